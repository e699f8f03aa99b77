"""Volcano camera ETL exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class VolcanoCamsError(Exception):
    """Base exception for all volcano camera ETL failures."""


class EtlConfigError(VolcanoCamsError):
    """Raised for invalid runtime configuration."""


class NetworkError(VolcanoCamsError):
    """Raised when the upstream feed cannot be reached."""


class FetchError(VolcanoCamsError):
    """Raised when the upstream feed answers with a non-success status."""

    def __init__(self, status_code: int, status_text: str, url: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
        super().__init__(f"Failed to fetch data from {url}: {status_code} {status_text}")


class ParseError(VolcanoCamsError):
    """Raised for malformed JSON or an unexpected feed shape."""


class TimestampError(VolcanoCamsError):
    """Raised when a camera timestamp cannot be converted to UTC."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        super().__init__(f"Invalid camera timestamp '{value}': {reason}")


class SubmitError(VolcanoCamsError):
    """Raised when a feature sink cannot accept the collection."""
