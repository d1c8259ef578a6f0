"""Async client and data models for XIVAPI, the Final Fantasy XIV REST API."""

from .client import ExtraData, XIVAPIClient
from .utils.exceptions import (
    ConfigurationError,
    DecodeError,
    HttpStatusError,
    InvalidSelector,
    ParseError,
    SchemaMismatch,
    TransportError,
    XIVAPIError,
)

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "ExtraData",
    "HttpStatusError",
    "InvalidSelector",
    "ParseError",
    "SchemaMismatch",
    "TransportError",
    "XIVAPIClient",
    "XIVAPIError",
]
