"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses
(DB wiring, settings, logging, validation, error classification). Keep
resource-specific SQL and rules in the corresponding package (e.g. `articles/`).
"""
