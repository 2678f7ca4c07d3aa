"""
Top‑level API router.

Aggregates the endpoint routers under their path prefixes.  When a
new resource type is exposed, include its router here.
"""

from fastapi import APIRouter

from .endpoints import resources

router = APIRouter()

router.include_router(resources.router, prefix="/resources", tags=["resources"])
