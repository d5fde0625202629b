# Orders domain
