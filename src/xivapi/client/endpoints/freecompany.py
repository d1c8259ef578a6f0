"""Free Company XIVAPI endpoints."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from urllib.parse import quote

from xivapi.client.params import lookup_params, search_params
from xivapi.client.selectors import ExtraData
from xivapi.models import FreeCompanyResult, FreeCompanySearchResults

if TYPE_CHECKING:
    from xivapi.client import XIVAPIClient

logger = logging.getLogger(__name__)


class FreeCompanyEndpoints:
    """Handles the Free Company search and lookup endpoints."""

    def __init__(self, client: XIVAPIClient):
        self._client = client

    async def search(
        self,
        name: str,
        server: str | None = None,
        page: int | None = None,
    ) -> FreeCompanySearchResults:
        """Search Free Companies by name.

        Args:
            name: FC name; whitespace runs are joined with ``+``
            server: Optional server (world) filter
            page: Optional 1-based results page

        Returns:
            One page of matching Free Companies
        """
        params = search_params(name, server, page)
        results = await self._client.fetch(FreeCompanySearchResults, "/freecompany/search", params)
        logger.debug(
            "Free Company search %r matched %d result(s) on page %d",
            name,
            results.pagination.results_total,
            results.pagination.page,
        )
        return results

    async def lookup(
        self,
        free_company_id: str,
        extended: bool = False,
        data: Iterable[ExtraData | str] | None = None,
    ) -> FreeCompanyResult:
        """Get the profile of a Free Company.

        Args:
            free_company_id: Lodestone FC ID, as a string
            extended: Whether to expand IDs into full objects upstream
            data: Extra sections to include, e.g. ExtraData.FREE_COMPANY_MEMBERS

        Raises:
            InvalidSelector: If a selector is unknown; no request is sent
            ValueError: If the ID is blank
        """
        free_company_id = str(free_company_id).strip()
        if not free_company_id:
            raise ValueError("free_company_id must not be blank")

        params = lookup_params(extended, data)
        path = f"/freecompany/{quote(free_company_id, safe='')}"
        return await self._client.fetch(FreeCompanyResult, path, params)
