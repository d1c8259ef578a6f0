"""XIVAPI endpoint classes for organized API access."""

from .character import CharacterEndpoints
from .freecompany import FreeCompanyEndpoints

__all__ = [
    "CharacterEndpoints",
    "FreeCompanyEndpoints",
]
