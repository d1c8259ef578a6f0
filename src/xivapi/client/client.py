"""Main XIVAPI client.

The client holds one shared `httpx.AsyncClient` and immutable settings; it
keeps no per-call state, so a single instance can serve concurrent callers.
Every operation performs exactly one GET with no caching or retries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar
from urllib.parse import quote

import httpx

from xivapi.models import (
    CharacterResult,
    CharacterSearchResults,
    FreeCompanyResult,
    FreeCompanySearchResults,
    XIVModel,
)
from xivapi.utils import get_config
from xivapi.utils.exceptions import HttpStatusError, TransportError

from .endpoints import CharacterEndpoints, FreeCompanyEndpoints
from .params import QueryParams, encode_query
from .selectors import ExtraData

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=XIVModel)


class XIVAPIClient:
    """Async client for XIVAPI character and Free Company data.

    Endpoints are grouped into namespaces (`characters`, `free_companies`);
    the four operations are also available directly on the client.

    Example:
        ```python
        async with XIVAPIClient() as client:
            found = await client.character_search("Tami Pesagniyah", server="Omega")
            profile = await client.character_lookup(found.results[0].id)
            print(profile.character.name)
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        private_key: str | None = None,
        request_timeout: float | None = None,
        user_agent: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the XIVAPI client.

        Args:
            base_url: API root. Falls back to config/env.
            private_key: XIVAPI private key. Falls back to config/env.
            request_timeout: HTTP timeout in seconds. Falls back to config/env.
                Ignored when `http_client` is given.
            user_agent: User-Agent header. Falls back to config/env.
            http_client: Shared transport to use instead of creating one.
                The caller keeps ownership and must close it.
        """
        config = get_config().xivapi

        self.base_url = (base_url or config.base_url).rstrip("/")
        self.private_key = private_key if private_key is not None else config.private_key
        self.request_timeout = (
            request_timeout if request_timeout is not None else config.request_timeout
        )
        self._headers = {
            "Accept": "application/json",
            "User-Agent": user_agent or config.computed_user_agent,
        }

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=self.request_timeout)

        self.characters = CharacterEndpoints(self)
        self.free_companies = FreeCompanyEndpoints(self)

    def build_url(self, path: str, params: QueryParams, include_key: bool = True) -> str:
        """Assemble the request URL from a path and ordered query parameters.

        The private key, when configured, is always the last parameter.
        """
        params = list(params)
        if include_key and self.private_key:
            params.append(("private_key", quote(self.private_key, safe="")))
        url = f"{self.base_url}{path}"
        if params:
            url = f"{url}?{encode_query(params)}"
        return url

    async def get(self, path: str, params: QueryParams) -> bytes:
        """Perform a single GET and return the raw response body.

        Raises:
            TransportError: On connection, TLS or timeout failures
            HttpStatusError: On a non-2xx response
        """
        url = self.build_url(path, params)
        # Never log the private key
        display_url = self.build_url(path, params, include_key=False)

        logger.debug("Sending HTTP request: GET %s", display_url)
        try:
            response = await self._http_client.get(url, headers=self._headers)
        except httpx.RequestError as e:
            logger.debug("GET %s failed: %s", display_url, e)
            raise TransportError(f"GET {display_url} failed: {e}", cause=e) from e

        if not response.is_success:
            logger.debug("GET %s returned HTTP %d", display_url, response.status_code)
            raise HttpStatusError(response.status_code, display_url)

        logger.debug("Served by API %d: GET %s", response.status_code, display_url)
        return response.content

    async def fetch(self, model: type[ModelT], path: str, params: QueryParams) -> ModelT:
        """GET `path` and decode the body into `model`.

        Raises:
            TransportError, HttpStatusError: From `get`
            ParseError: If the body is not JSON
            SchemaMismatch: If the JSON does not fit `model`
        """
        body = await self.get(path, params)
        return model.from_json(body)

    async def character_search(
        self, name: str, server: str | None = None, page: int | None = None
    ) -> CharacterSearchResults:
        """Search characters by name. See `CharacterEndpoints.search`."""
        return await self.characters.search(name, server, page)

    async def character_lookup(
        self,
        character_id: int,
        extended: bool = False,
        data: Iterable[ExtraData | str] | None = None,
    ) -> CharacterResult:
        """Look up a character profile. See `CharacterEndpoints.lookup`."""
        return await self.characters.lookup(character_id, extended, data)

    async def free_company_search(
        self, name: str, server: str | None = None, page: int | None = None
    ) -> FreeCompanySearchResults:
        """Search Free Companies by name. See `FreeCompanyEndpoints.search`."""
        return await self.free_companies.search(name, server, page)

    async def free_company_lookup(
        self,
        free_company_id: str,
        extended: bool = False,
        data: Iterable[ExtraData | str] | None = None,
    ) -> FreeCompanyResult:
        """Look up a Free Company profile. See `FreeCompanyEndpoints.lookup`."""
        return await self.free_companies.lookup(free_company_id, extended, data)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> XIVAPIClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
