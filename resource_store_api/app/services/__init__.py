"""
Service layer abstraction.

Services encapsulate the state behind the API handlers.  The only
service here is the in‑memory :class:`ResourceStore`.
"""
