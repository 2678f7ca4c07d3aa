"""
Application package initializer.

The project is split into a small number of layers: ``core`` holds
configuration, logging and error mapping, ``schemas`` the pydantic
models exchanged over HTTP, ``services`` the in‑memory resource store
and ``api`` the routers that expose the store.
"""

from .main import app, create_app  # noqa: F401
