"""Users API client.

A thin wrapper around a running Users API instance built on the
``requests`` library.  Every high-level method returns a tuple
``(data, error)``: on success ``data`` holds the decoded JSON body and
``error`` is ``None``; on failure ``data`` is ``None`` and ``error`` is
a dictionary with ``status_code`` and ``message``.  For HTTP errors the
message is taken from the API's ``{"error": ...}`` body; for transport
errors ``status_code`` is ``None``.

Example::

    client = UsersClient(base_url="http://localhost:3000")
    page, error = client.list_users(role="admin")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class UsersClient:
    """Client for the Users API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Service information
    # ------------------------------------------------------------------
    def info(self) -> Result:
        return self._request("GET", "/")

    def health(self) -> Result:
        return self._request("GET", "/health")

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        role: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Result:
        """Retrieve a page of users.

        Returns:
            A tuple ``(page, error)`` where ``page`` is the listing body
            (``users``, ``total``, ``page``, ``limit``, ``totalPages``).
        """
        params = {"page": page, "limit": limit, "role": role, "search": search}
        return self._request("GET", "/users", params=params)

    def get_user(self, user_id: Any) -> Result:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str, email: str, role: Optional[str] = None) -> Result:
        payload: Dict[str, Any] = {"name": name, "email": email}
        if role is not None:
            payload["role"] = role
        return self._request("POST", "/users", json_body=payload)

    def update_user(self, user_id: Any, **fields: Any) -> Result:
        """Update a user.

        Args:
            user_id: Identifier of the user.
            fields: Any of ``name``, ``email`` and ``role``.
        """
        return self._request("PUT", f"/users/{user_id}", json_body=fields)

    def delete_user(self, user_id: Any) -> Result:
        return self._request("DELETE", f"/users/{user_id}")
