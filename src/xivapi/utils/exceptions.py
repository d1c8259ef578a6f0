"""Custom exception hierarchy for the XIVAPI client.

Every failure surfaced by the client derives from `XIVAPIError` so callers
can catch the whole family with one clause.
"""

from __future__ import annotations


class XIVAPIError(Exception):
    """Base exception for all XIVAPI client errors."""

    pass


class ConfigurationError(XIVAPIError):
    """Exception raised for configuration-related errors."""

    pass


class TransportError(XIVAPIError):
    """Exception raised when the HTTP exchange itself fails.

    Covers connection failures, TLS errors and timeouts. The underlying
    httpx exception is kept on `cause` and chained as `__cause__`.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class HttpStatusError(XIVAPIError):
    """Exception raised when XIVAPI answers with a non-2xx status."""

    def __init__(self, status_code: int, url: str = ""):
        super().__init__(f"XIVAPI returned HTTP {status_code} for {url or '<unknown>'}")
        self.status_code = status_code
        self.url = url


class DecodeError(XIVAPIError):
    """Base exception for response body decoding errors."""

    pass


class ParseError(DecodeError):
    """Exception raised when a response body is not valid JSON."""

    pass


class SchemaMismatch(DecodeError):
    """Exception raised when valid JSON does not match the expected shape.

    `field_path` is the dotted attribute path of the offending field, e.g.
    ``character.id`` or ``character.class_jobs[3].level``.
    """

    def __init__(self, field_path: str, reason: str = ""):
        location = field_path or "<root>"
        message = f"Schema mismatch at {location}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.field_path = field_path
        self.reason = reason


class InvalidSelector(XIVAPIError, ValueError):
    """Exception raised for an extra-data selector outside the known set."""

    def __init__(self, selector: object):
        super().__init__(f"Unknown extra-data selector: {selector!r}")
        self.selector = selector
