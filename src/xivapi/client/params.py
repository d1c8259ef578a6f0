"""Query-string builders shared by the search and lookup endpoints.

Parameters are kept as ordered `(key, encoded_value)` pairs; XIVAPI expects
them in a fixed order and the name token keeps its literal ``+`` joins,
so values are encoded here rather than by httpx.
"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote

from .selectors import ExtraData, selector_tokens

MAX_PAGE = 0xFFFF
MAX_CHARACTER_ID = 0xFFFF_FFFF

QueryParams = list[tuple[str, str]]


def name_token(name: str) -> str:
    """Collapse whitespace runs and join the encoded words with ``+``.

    Raises:
        ValueError: If `name` has no non-whitespace characters
    """
    words = name.split()
    if not words:
        raise ValueError("Search name must not be empty")
    return "+".join(quote(word, safe="") for word in words)


def search_params(name: str, server: str | None = None, page: int | None = None) -> QueryParams:
    """Build ``name``, ``server`` and ``page`` parameters, in that order.

    Raises:
        ValueError: If the name is empty or the page is out of range
    """
    params: QueryParams = [("name", name_token(name))]

    if server is not None:
        server = server.strip()
        if not server:
            raise ValueError("Server filter must not be blank")
        params.append(("server", quote(server, safe="")))

    if page is not None:
        if isinstance(page, bool) or not 1 <= page <= MAX_PAGE:
            raise ValueError(f"Invalid page: {page} (must be 1-{MAX_PAGE})")
        params.append(("page", str(page)))

    return params


def lookup_params(
    extended: bool = False, data: Iterable[ExtraData | str] | None = None
) -> QueryParams:
    """Build ``extended`` and ``data`` parameters for a lookup.

    ``extended=1`` is sent only when requested and ``data`` only when at
    least one selector is given.

    Raises:
        InvalidSelector: If any selector is unknown
    """
    tokens = selector_tokens(data)
    params: QueryParams = []
    if extended:
        params.append(("extended", "1"))
    if tokens:
        params.append(("data", ",".join(tokens)))
    return params


def encode_query(params: QueryParams) -> str:
    return "&".join(f"{key}={value}" for key, value in params)
