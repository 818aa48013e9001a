"""gox API client.

A thin wrapper around the gox HTTP API built on ``requests``.  It
reproduces the server's JSON shape on the consumer side: user payloads
are parsed back into :class:`gox.app.schemas.user.User` models.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with ``status_code`` and ``message`` keys, e.g.::

    client = GoxClient(base_url="http://localhost:1981")
    user, error = client.get_user("d9b5a4b1-d1d1-4d92-a14b-441a5e5a5ae5")
    if error and error["status_code"] == 404:
        ...
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

import requests
from pydantic import ValidationError

from gox.app.schemas.user import User

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class GoxClient:
    """Client for the gox user directory."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:1981``.
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
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the body.

        JSON bodies are decoded; anything else is returned as text.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if "json" in response.headers.get("Content-Type", ""):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("detail", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _parse_user(data: Any) -> Tuple[Optional[User], Optional[Error]]:
        try:
            return User.model_validate(data), None
        except ValidationError as exc:
            logger.error("Unexpected user payload: %s", exc)
            return None, {"status_code": None, "message": f"unexpected user payload: {exc}"}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def home(self) -> Tuple[Optional[str], Optional[Error]]:
        """Fetch the welcome message."""
        return self._request("GET", "/")

    def list_users(self) -> Tuple[List[User], Optional[Error]]:
        """Retrieve all users in server order."""
        data, error = self._request("GET", "/users", params={"format": "json"})
        if error:
            return [], error
        users: List[User] = []
        for item in data or []:
            user, error = self._parse_user(item)
            if error:
                return [], error
            users.append(user)
        return users, None

    def get_user(self, user_id: UUID | str) -> Tuple[Optional[User], Optional[Error]]:
        """Retrieve a single user.  A missing user yields a 404 error."""
        data, error = self._request("GET", "/user", params={"id": str(user_id), "format": "json"})
        if error:
            return None, error
        return self._parse_user(data)

    def create_user(
        self, first_name: str, last_name: str, email: str
    ) -> Tuple[Optional[User], Optional[Error]]:
        """Create a user.  The server must have user creation enabled."""
        data, error = self._request(
            "POST",
            "/users",
            json_body={"first_name": first_name, "last_name": last_name, "email": email},
        )
        if error:
            return None, error
        return self._parse_user(data)
