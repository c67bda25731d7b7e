"""Comments resource: router, service, repository."""
