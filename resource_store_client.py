"""Resource Store API client.

A thin synchronous wrapper around the HTTP surface of the resource
store, built on the ``requests`` library.  It exposes:

* :meth:`ResourceStoreClient.list_resources` – return every stored resource.
* :meth:`ResourceStoreClient.create_resource` – append a new resource.

Methods never raise for HTTP or network failures.  They return a
``(result, error)`` tuple where ``error`` is ``None`` on success and
otherwise a dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

RESOURCES_PATH = "/resources"


class ResourceStoreClient:
    """Client for the ``/resources`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str = "http://127.0.0.1:8080",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://127.0.0.1:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Dict[str, Any]]]:
        """Perform an HTTP request and return ``(response, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        err_json = err_json.get("detail") or err_json
                    message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_resources(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all resources.

        Returns:
            A tuple ``(resources, error)``. ``resources`` is a list of
            ``{"id": ..., "data": ...}`` dictionaries, empty on failure.
        """
        response, error = self._request("GET", RESOURCES_PATH)
        if error:
            return [], error
        data = response.json()
        if not isinstance(data, list):
            return [], {"status_code": response.status_code, "message": "Unexpected response body"}
        return data, None

    def create_resource(self, data: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Create a resource holding ``data``.

        Returns:
            A tuple ``(created, error)``.
        """
        _, error = self._request("POST", RESOURCES_PATH, json_body=data)
        if error:
            return False, error
        return True, None
