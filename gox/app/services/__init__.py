"""
Service layer abstraction.

Services sit between the HTTP handlers and the repositories.  Swapping
the in‑memory repository for a database would not require changes to
the handlers.
"""
