"""XIVAPI response data models."""

from .base import U8, U16, U32, Percent, XIVModel, field_path
from .character import (
    Achievement,
    Character,
    CharacterAchievements,
    CharacterResult,
    CharacterSearch,
    CharacterSearchResults,
    Class,
    ClassBozjan,
    ClassElemental,
    Gear,
    GearPiece,
    GearSet,
    GrandCompany,
    Mimo,
    UnlockedState,
)
from .freecompany import (
    FcEstate,
    FcFocus,
    FcRanking,
    FcReputation,
    FcSeeking,
    FreeCompany,
    FreeCompanyResult,
    FreeCompanySearch,
    FreeCompanySearchResults,
)
from .pagination import Pagination, SearchResults

__all__ = [
    "U8",
    "U16",
    "U32",
    "Percent",
    "Achievement",
    "Character",
    "CharacterAchievements",
    "CharacterResult",
    "CharacterSearch",
    "CharacterSearchResults",
    "Class",
    "ClassBozjan",
    "ClassElemental",
    "FcEstate",
    "FcFocus",
    "FcRanking",
    "FcReputation",
    "FcSeeking",
    "FreeCompany",
    "FreeCompanyResult",
    "FreeCompanySearch",
    "FreeCompanySearchResults",
    "Gear",
    "GearPiece",
    "GearSet",
    "GrandCompany",
    "Mimo",
    "Pagination",
    "SearchResults",
    "UnlockedState",
    "XIVModel",
    "field_path",
]
