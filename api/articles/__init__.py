"""Articles resource: router, service, repository."""
