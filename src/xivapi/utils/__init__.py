"""Utility functions and classes for the XIVAPI client."""

from .config import Config, get_config, reload_config, reset_config
from .exceptions import (
    ConfigurationError,
    DecodeError,
    HttpStatusError,
    InvalidSelector,
    ParseError,
    SchemaMismatch,
    TransportError,
    XIVAPIError,
)
from .logging_setup import resolve_log_level, setup_logging

__all__ = [
    "Config",
    "ConfigurationError",
    "DecodeError",
    "HttpStatusError",
    "InvalidSelector",
    "ParseError",
    "SchemaMismatch",
    "TransportError",
    "XIVAPIError",
    "get_config",
    "reload_config",
    "reset_config",
    "resolve_log_level",
    "setup_logging",
]
