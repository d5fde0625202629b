# Products domain
