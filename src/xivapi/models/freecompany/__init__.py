"""Free Company search and lookup models."""

from pydantic import Field

from xivapi.models.base import XIVModel
from xivapi.models.character.search import CharacterSearch
from xivapi.models.pagination import SearchResults

from .company import FcEstate, FcFocus, FcRanking, FcReputation, FcSeeking, FreeCompany


class FreeCompanySearch(XIVModel):
    """Summary of an FC, as returned by a name search."""

    id: str = Field(..., alias="ID")
    name: str
    server: str
    crest: list[str]


FreeCompanySearchResults = SearchResults[FreeCompanySearch]


class FreeCompanyResult(XIVModel):
    """Everything returned by an FC lookup."""

    free_company: FreeCompany
    free_company_members: list[CharacterSearch] | None = None


__all__ = [
    "FcEstate",
    "FcFocus",
    "FcRanking",
    "FcReputation",
    "FcSeeking",
    "FreeCompany",
    "FreeCompanyResult",
    "FreeCompanySearch",
    "FreeCompanySearchResults",
]
