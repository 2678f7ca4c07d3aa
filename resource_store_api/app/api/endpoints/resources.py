"""
Resource endpoints.

``GET`` lists every stored resource in insertion order and ``POST``
appends a new one.  The request body of ``POST`` is the bare JSON
payload (a string) sent as ``application/json``; the identifier is
always assigned by the store.  Other bodies are rejected with HTTP 422
by ``read_string_payload`` before the store is touched.

Handlers are plain functions so FastAPI runs them in its thread pool;
the store's lock is held only inside the store call, never while the
response is serialized.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from resource_store_api.app.api.deps import get_resource_store, read_string_payload
from resource_store_api.app.core.errors import StoreError, raise_http
from resource_store_api.app.schemas.resource import Resource
from resource_store_api.app.services.resource_store import ResourceStore

router = APIRouter()

logger = logging.getLogger(__name__)

_PAYLOAD_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": {"type": "string"}, "example": "Resource 3"},
        },
    },
}


@router.get("", response_model=List[Resource[str]])
def list_resources(store: ResourceStore = Depends(get_resource_store)) -> List[Resource[str]]:
    """Return all resources in the order they were created."""
    return store.list()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    openapi_extra=_PAYLOAD_BODY,
)
def create_resource(
    data: str = Depends(read_string_payload),
    store: ResourceStore = Depends(get_resource_store),
) -> Response:
    """Append a resource holding ``data``.

    Responds with 201 and an empty body.
    """
    try:
        record = store.append(data)
    except StoreError as exc:
        logger.error("Failed to create resource: %s", exc.message)
        raise_http(exc)
    logger.info("Created resource %s", record.id)
    return Response(status_code=status.HTTP_201_CREATED)
