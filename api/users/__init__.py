"""Users resource: router, service, repository."""
