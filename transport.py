"""HTTP transport used by the articles client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Protocol

import requests
from requests.structures import CaseInsensitiveDict

from errors import TransportError

# Fallbacks when neither an argument nor the environment sets a value.
ARTICLES_API_BASE_URL = "http://localhost:8080"
REQUEST_TIMEOUT_SECONDS = 10.0

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Raw outcome of one HTTP exchange."""

    status_code: int
    headers: CaseInsensitiveDict[str] = field(default_factory=CaseInsensitiveDict)
    content: bytes = b""


class Transport(Protocol):
    def request(
        self,
        method: str,
        path: str,
        json_payload: Any | None = None,
    ) -> TransportResponse: ...


class RequestsTransport:
    """Send requests relative to a base URL with ``requests``.

    HTTP error statuses are returned, not raised; only failures that produce
    no response at all become TransportError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        # Environment is read per instance; main() loads .env before building one.
        if not base_url:
            base_url = os.getenv("ARTICLES_API_BASE_URL") or ARTICLES_API_BASE_URL
        if timeout is None:
            timeout = float(os.getenv("ARTICLES_REQUEST_TIMEOUT_SECONDS") or REQUEST_TIMEOUT_SECONDS)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session

    def request(
        self,
        method: str,
        path: str,
        json_payload: Any | None = None,
    ) -> TransportResponse:
        url = f"{self.base_url}/{path.lstrip('/')}"
        send = self.session.request if self.session is not None else requests.request

        LOGGER.debug("Sending %s %s", method, url)
        try:
            response = send(
                method=method,
                url=url,
                headers={"Accept": "application/json"},
                json=json_payload,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        return TransportResponse(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers),
            content=response.content or b"",
        )
