"""Character-related XIVAPI endpoints."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from xivapi.client.params import MAX_CHARACTER_ID, lookup_params, search_params
from xivapi.client.selectors import ExtraData
from xivapi.models import CharacterResult, CharacterSearchResults

if TYPE_CHECKING:
    from xivapi.client import XIVAPIClient

logger = logging.getLogger(__name__)


class CharacterEndpoints:
    """Handles the character search and lookup endpoints.

    Example:
        ```python
        client = XIVAPIClient()
        found = await client.characters.search("Tami Pesagniyah", server="Omega")
        result = await client.characters.lookup(found.results[0].id)
        ```
    """

    def __init__(self, client: XIVAPIClient):
        """Initialize character endpoints with the XIVAPI client.

        Args:
            client: XIVAPI client instance for HTTP operations
        """
        self._client = client

    async def search(
        self,
        name: str,
        server: str | None = None,
        page: int | None = None,
    ) -> CharacterSearchResults:
        """Search characters by name.

        Args:
            name: Character name; whitespace runs are joined with ``+``
            server: Optional server (world) filter
            page: Optional 1-based results page

        Returns:
            One page of matching characters; `results` is empty on no match

        Raises:
            ValueError: If the name is empty or the page is out of range
        """
        params = search_params(name, server, page)
        results = await self._client.fetch(CharacterSearchResults, "/character/search", params)
        logger.debug(
            "Character search %r matched %d result(s) on page %d",
            name,
            results.pagination.results_total,
            results.pagination.page,
        )
        return results

    async def lookup(
        self,
        character_id: int,
        extended: bool = False,
        data: Iterable[ExtraData | str] | None = None,
    ) -> CharacterResult:
        """Get the full profile of a character.

        Args:
            character_id: Lodestone character ID
            extended: Whether to expand IDs into full objects upstream
            data: Extra sections to include (achievements, friends...)

        Returns:
            The character profile with any requested public sections

        Raises:
            InvalidSelector: If a selector is unknown; no request is sent
            ValueError: If the character ID is out of range
        """
        if isinstance(character_id, bool) or not 1 <= character_id <= MAX_CHARACTER_ID:
            raise ValueError(f"Invalid character_id: {character_id}")

        params = lookup_params(extended, data)
        return await self._client.fetch(CharacterResult, f"/character/{character_id}", params)
