"""URL building helpers: path templates and query strings.

Every value is percent-encoded exactly once with no safe characters, so a
literal ``%`` or ``&`` in a value always reaches the server as ``%25`` or
``%26`` and is never re-encoded into ``%2525``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def encode_query_value(value: Any) -> str:
    """Percent-encode ``str(value)`` in a single pass."""
    return quote(str(value), safe="")


def expand_path(template: str, **variables: Any) -> str:
    """Substitute ``{name}`` placeholders in ``template`` with encoded values.

    >>> expand_path("/articles/{id}", id=7)
    '/articles/7'
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in variables:
            raise ValueError(f"No value supplied for path variable {name!r} in {template!r}")
        return encode_query_value(variables[name])

    return _PLACEHOLDER.sub(_replace, template)


def with_query(path: str, params: Mapping[str, Any]) -> str:
    """Append ``params`` to ``path`` as a query string, keeping their order."""
    pairs = [
        f"{encode_query_value(key)}={encode_query_value(value)}"
        for key, value in params.items()
        if value is not None
    ]
    if not pairs:
        return path
    return f"{path}?{'&'.join(pairs)}"
