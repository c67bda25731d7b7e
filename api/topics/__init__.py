"""Topics resource: router, service, repository."""
