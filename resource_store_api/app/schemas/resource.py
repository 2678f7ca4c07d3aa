"""
Pydantic model for stored resources.

A ``Resource`` pairs a store-assigned identifier with an opaque
payload.  The model is generic over the payload type; the running
service commits to ``Resource[str]`` at the HTTP boundary.  Instances
are frozen, so a record handed out in a list snapshot can never be
changed behind the store's back.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

T = TypeVar("T")


class Resource(BaseModel, Generic[T]):
    """Schema for a single stored record."""

    id: PositiveInt = Field(..., examples=[1])
    data: T = Field(..., examples=["Resource 1"])

    model_config = ConfigDict(frozen=True)
