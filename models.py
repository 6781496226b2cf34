"""Shared typed models for the articles client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from errors import DecodeError

_CONTENT_FIELDS = ("title", "body", "author")


@dataclass(frozen=True, slots=True)
class Article:
    """One article as exchanged with the ``/articles`` endpoints.

    ``id`` is assigned by the server and is ``None`` on records built locally
    for ``create``.
    """

    title: str
    body: str = ""
    author: str = ""
    id: int | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.id is not None:
            payload["id"] = self.id
        payload["title"] = self.title
        payload["body"] = self.body
        payload["author"] = self.author
        return payload

    @classmethod
    def from_payload(cls, data: Any) -> Article:
        """Build an Article from decoded JSON, rejecting mistyped fields."""
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object for an article, got {type(data).__name__}")

        article_id = data.get("id")
        # bool is an int subclass; a JSON true is not an identifier.
        if article_id is not None and (isinstance(article_id, bool) or not isinstance(article_id, int)):
            raise DecodeError(f"Article id must be an integer, got {article_id!r}")

        fields: dict[str, str] = {}
        for name in _CONTENT_FIELDS:
            value = data.get(name)
            if value is None:
                fields[name] = ""
            elif isinstance(value, str):
                fields[name] = value
            else:
                raise DecodeError(f"Article field {name!r} must be a string, got {type(value).__name__}")

        return cls(id=article_id, **fields)
