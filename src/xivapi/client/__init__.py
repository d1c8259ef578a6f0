"""Async XIVAPI query client."""

from .client import XIVAPIClient
from .selectors import ExtraData

__all__ = ["ExtraData", "XIVAPIClient"]
