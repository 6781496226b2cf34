"""Typed client for the ``/articles`` REST resource."""

from __future__ import annotations

import json
import logging
from typing import Any

from errors import DecodeError, NotFoundError, StatusError
from models import Article
from transport import RequestsTransport, Transport, TransportResponse
from uri import expand_path, with_query

ARTICLES_PATH = "/articles"
ARTICLE_PATH = "/articles/{id}"
PAGED_ARTICLES_PATH = "/articles/paged"

LOGGER = logging.getLogger(__name__)


class ArticleClient:
    """CRUD façade over an injected transport.

    Holds no state besides the transport, so one instance can be shared
    between threads as long as the transport allows it.
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self.transport = transport if transport is not None else RequestsTransport()

    def create(self, article: Article) -> Article:
        """POST a new article and return it as stored by the server."""
        response = self._exchange("POST", ARTICLES_PATH, json_payload=article.to_payload())
        created = Article.from_payload(_decode_json(response))
        if created.id is None:
            raise DecodeError("Created article in response has no id")
        LOGGER.info("Created article id=%s", created.id)
        return created

    def read_one(self, article_id: int) -> Article:
        path = expand_path(ARTICLE_PATH, id=article_id)
        response = self._exchange("GET", path)
        return Article.from_payload(_decode_json(response))

    def read_all(self) -> list[Article]:
        """Return every article in the order the server lists them."""
        response = self._exchange("GET", ARTICLES_PATH)
        return _decode_article_list(response)

    def read_page(self, page: int = 0, limit: int = 10) -> list[Article]:
        """Return one zero-based page of articles from ``/articles/paged``."""
        if page < 0:
            raise ValueError(f"page must be >= 0, got {page}")
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        path = with_query(PAGED_ARTICLES_PATH, {"page": page, "limit": limit})
        response = self._exchange("GET", path)
        return _decode_article_list(response)

    def update(self, article_id: int, article: Article) -> Article | None:
        """PUT ``article`` over the stored one.

        Returns None when the server answers without a body; callers that need
        the stored record can read it back.
        """
        path = expand_path(ARTICLE_PATH, id=article_id)
        response = self._exchange("PUT", path, json_payload=article.to_payload())
        if response.status_code == 204 or not response.content.strip():
            return None
        return Article.from_payload(_decode_json(response))

    def delete(self, article_id: int) -> None:
        path = expand_path(ARTICLE_PATH, id=article_id)
        self._exchange("DELETE", path)
        LOGGER.info("Deleted article id=%s", article_id)

    def _exchange(
        self,
        method: str,
        path: str,
        json_payload: dict[str, Any] | None = None,
    ) -> TransportResponse:
        response = self.transport.request(method, path, json_payload=json_payload)
        LOGGER.info("%s %s -> %s", method, path, response.status_code)
        LOGGER.debug("Response headers for %s %s: %s", method, path, response.headers)

        if 200 <= response.status_code < 300:
            return response

        body_text = response.content.decode("utf-8", errors="replace")
        if response.status_code == 404:
            raise NotFoundError(method, path, response.status_code, body_text)
        raise StatusError(method, path, response.status_code, body_text)


def _decode_json(response: TransportResponse) -> Any:
    try:
        return json.loads(response.content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"Response body is not valid JSON: {exc}") from exc


def _decode_article_list(response: TransportResponse) -> list[Article]:
    payload = _decode_json(response)
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of articles, got {type(payload).__name__}")
    return [Article.from_payload(item) for item in payload]
