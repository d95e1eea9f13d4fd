"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every table feature uses (DB wiring,
logging, body validation, the request pipeline). Keep table-specific SQL and
rule sets in the corresponding feature package (e.g. `agents/`).
"""
