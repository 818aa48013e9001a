"""
Pydantic schema definitions for the user directory.

The ``User`` model is both the stored record and the wire
representation; request payloads get their own models.
"""
