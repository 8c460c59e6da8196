"""StreamStore API client.

This module defines a thin wrapper around the storefront's REST
endpoints.  It uses the ``requests`` library internally and never
raises for HTTP or network failures: every public method returns a
``(data, error)`` tuple where exactly one side is meaningful.  ``error``
is a dictionary with the keys ``status_code`` and ``message``; the
message is taken from the ``detail`` field of the server's JSON error
body when present.

Catalog reads are public.  Mutations need the administrator token,
obtained with :meth:`StorefrontAPI.login` and then sent in the
``Authorization`` header of every request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class StorefrontAPI:
    """Client for the storefront's ``/api`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
                The ``/api`` prefix is added by the client.
            token: Optional administrator token from a previous login.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to ``/api`` (e.g. ``/services``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = detail if isinstance(detail, str) else str(detail or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request %s %s failed (%s): %s", method, path, status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request %s %s failed: %s", method, path, exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Tuple[bool, Optional[Error]]:
        """Log in as administrator and keep the token for later calls."""
        data, error = self._request(
            "POST", "/auth/login", json_body={"username": username, "password": password}
        )
        if error:
            return False, error
        self.token = data["access_token"]
        return True, None

    def logout(self) -> None:
        """Forget the administrator token."""
        self.token = None

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------
    def list_services(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/services")

    def create_service(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/services", json_body=payload)

    def update_service(self, service_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/services/{service_id}", json_body=payload)

    def delete_service(self, service_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a service; the server also deletes its products."""
        _, error = self._request("DELETE", f"/services/{service_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------
    def list_products(self, service_id: Optional[int] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List all products, or only those of ``service_id``."""
        return self._list("/products", params={"serviceId": service_id})

    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/products", json_body=payload)

    def update_product(self, product_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/products/{product_id}", json_body=payload)

    def delete_product(self, product_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/products/{product_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Slides
    # ------------------------------------------------------------------
    def list_slides(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/slides")

    def create_slide(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/slides", json_body=payload)

    def update_slide(self, slide_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/slides/{slide_id}", json_body=payload)

    def delete_slide(self, slide_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/slides/{slide_id}")
        return error is None, error
