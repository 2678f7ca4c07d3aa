"""
Dependencies shared by the API handlers.

The resource store is created by ``create_app`` and kept on
``app.state``; handlers receive it through :func:`get_resource_store`
instead of importing a module-level instance.

Request payloads are decoded by :func:`read_string_payload` rather than
by FastAPI's body handling, which hands non-JSON bodies to the
validator as text.  Only ``application/json`` (or ``+json``) bodies
holding a JSON string are accepted; everything else is answered with
HTTP 422 before any handler runs.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import StrictStr, TypeAdapter, ValidationError

from resource_store_api.app.services.resource_store import ResourceStore

_string_payload = TypeAdapter(StrictStr)


def get_resource_store(request: Request) -> ResourceStore:
    """Return the store attached to the application serving ``request``."""
    store = getattr(request.app.state, "resource_store", None)
    if store is None:
        raise RuntimeError("Resource store not initialised")
    return store


def _is_json_content_type(value: str) -> bool:
    media_type = value.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_string_payload(request: Request) -> str:
    """Decode the request body as a JSON string.

    Raises
    ------
    RequestValidationError
        If the content type is not JSON, the body is not valid JSON or
        the decoded value is not a string.
    """
    content_type = request.headers.get("content-type", "")
    if not _is_json_content_type(content_type):
        raise RequestValidationError(
            [
                {
                    "type": "content_type",
                    "loc": ("header", "content-type"),
                    "msg": "Request body must be sent as application/json",
                    "input": content_type or None,
                }
            ]
        )

    body = await request.body()
    try:
        return _string_payload.validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(
            [
                {
                    "type": err["type"],
                    "loc": ("body", *err["loc"]),
                    "msg": err["msg"],
                }
                for err in exc.errors()
            ]
        ) from exc
