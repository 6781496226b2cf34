from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qs, urlsplit

import pytest

from transport import TransportResponse


class FakeArticleServer:
    """In-memory stand-in for the articles API, speaking the Transport protocol."""

    def __init__(self) -> None:
        self.articles: dict[int, dict[str, Any]] = {}
        self.next_id = 1
        self.requests: list[tuple[str, str, Any]] = []

    def request(self, method: str, path: str, json_payload: Any | None = None) -> TransportResponse:
        self.requests.append((method, path, json_payload))
        parts = urlsplit(path)
        segments = [segment for segment in parts.path.split("/") if segment]

        if segments == ["articles"]:
            if method == "POST":
                stored = {**json_payload, "id": self.next_id}
                self.articles[self.next_id] = stored
                self.next_id += 1
                return _json_response(201, stored)
            if method == "GET":
                return _json_response(200, list(self.articles.values()))

        if segments == ["articles", "paged"] and method == "GET":
            query = parse_qs(parts.query)
            page = int(query["page"][0])
            limit = int(query["limit"][0])
            items = list(self.articles.values())[page * limit:(page + 1) * limit]
            return _json_response(200, items)

        if len(segments) == 2 and segments[0] == "articles" and segments[1].isdigit():
            article_id = int(segments[1])
            if article_id not in self.articles:
                return TransportResponse(status_code=404, content=b'{"error":"not found"}')
            if method == "GET":
                return _json_response(200, self.articles[article_id])
            if method == "PUT":
                stored = {**json_payload, "id": article_id}
                self.articles[article_id] = stored
                return _json_response(200, stored)
            if method == "DELETE":
                del self.articles[article_id]
                return TransportResponse(status_code=204)

        return TransportResponse(status_code=405)


def _json_response(status_code: int, payload: Any) -> TransportResponse:
    return TransportResponse(
        status_code=status_code,
        headers={"Content-Type": "application/json"},
        content=json.dumps(payload).encode("utf-8"),
    )


@pytest.fixture
def server() -> FakeArticleServer:
    return FakeArticleServer()
