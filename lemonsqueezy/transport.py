"""HTTP transport and response handling for the Lemon Squeezy API."""

from __future__ import annotations

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

import requests

DEFAULT_BASE_URL = "https://api.lemonsqueezy.com"
SUCCESS_STATUSES = frozenset({200, 201, 202, 204, 205})
_MEDIA_TYPE = "application/vnd.api+json"


@dataclass(frozen=True)
class Response:
    """A raw HTTP response: its status code and body bytes."""

    status_code: int
    body: bytes = b""

    def raise_for_error(self) -> None:
        """Raise ApiError unless the status code is one the API treats as success."""
        if self.status_code not in SUCCESS_STATUSES:
            raise ApiError(self)


class ApiError(Exception):
    """Raised when the API answers with a status code that is not a success."""

    def __init__(self, response: Response) -> None:
        self.response = response
        try:
            reason = HTTPStatus(response.status_code).phrase
        except ValueError:
            reason = ""
        body = response.body.decode("utf-8", errors="replace")
        super().__init__(f"{response.status_code}: {reason}, Body: {body}")

    @property
    def status_code(self) -> int:
        return self.response.status_code


class Transport:
    """Sends authenticated JSON:API requests and returns checked responses."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str = "",
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()

    def request(self, method: str, path: str, payload: Any = None) -> Response:
        """Send a request; raise ApiError when the API reports failure."""
        headers = {"Accept": _MEDIA_TYPE, "Content-Type": _MEDIA_TYPE}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        data = None if payload is None else json.dumps(payload).encode("utf-8")
        reply = self.session.request(method, self.base_url + path, headers=headers, data=data)
        response = Response(status_code=reply.status_code, body=reply.content)
        response.raise_for_error()
        return response