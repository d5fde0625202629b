# Users domain
