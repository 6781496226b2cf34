"""Exceptions raised by the articles API client."""

from __future__ import annotations


class ArticleClientError(RuntimeError):
    """Base class for every error surfaced by the client."""


class TransportError(ArticleClientError):
    """The request never produced an HTTP response (connection, DNS, timeout)."""


class StatusError(ArticleClientError):
    """The server answered with a non-2xx status."""

    def __init__(self, method: str, path: str, status_code: int, body_text: str = "") -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body_text = body_text
        super().__init__(f"{method} {path} failed with HTTP {status_code}")


class NotFoundError(StatusError):
    """The addressed article does not exist (HTTP 404)."""


class DecodeError(ArticleClientError):
    """The response body is not JSON of the expected shape."""
