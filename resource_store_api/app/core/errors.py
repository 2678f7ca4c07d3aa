"""
Store error taxonomy and its HTTP mapping.

The store itself performs no I/O, so the only failures it can report
are broken invariants.  Those surface as :class:`StoreError` and are
converted to HTTP responses by :func:`raise_http`; routers must not
pick status codes for store errors themselves.
"""

from __future__ import annotations

from typing import NoReturn

from fastapi import HTTPException, status


class StoreError(Exception):
    """Base class for failures reported by the resource store."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class StoreIntegrityError(StoreError):
    """The record sequence no longer satisfies ``id == position``."""


def raise_http(err: StoreError) -> NoReturn:
    """Convert a :class:`StoreError` into a FastAPI ``HTTPException``."""
    raise HTTPException(
        status_code=err.http_status,
        detail={"code": err.code, "message": err.message},
    )
