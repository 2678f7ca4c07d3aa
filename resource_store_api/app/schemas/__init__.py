"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store so the HTTP representation of a
record is declared in one place.
"""
