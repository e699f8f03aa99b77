"""Runtime configuration model for the volcano camera ETL.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse

from core.constants import (
    DEFAULT_CAMERA_PROXY_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_SOURCE_URL,
)
from core.errors import EtlConfigError


@dataclass(frozen=True)
class EtlConfig:
    """Validated runtime configuration.

    Attributes:
        camera_proxy_url: Camera proxy base URL without trailing slash.
            Accepted for compatibility, not consulted by the fetch step.
        source_url: Upstream camera feed URL.
        request_timeout_seconds: Timeout applied to the single feed request.
    """

    camera_proxy_url: str
    source_url: str = DEFAULT_SOURCE_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "EtlConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            EtlConfigError: If environment values are invalid.
        """
        proxy_value = os.getenv("CAMERA_PROXY_URL", DEFAULT_CAMERA_PROXY_URL)
        source_value = os.getenv("VOLCANOCAMS_SOURCE_URL", DEFAULT_SOURCE_URL)
        timeout_value = os.getenv(
            "VOLCANOCAMS_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS)
        )
        return cls(
            camera_proxy_url=normalize_base_url(proxy_value, "CAMERA_PROXY_URL"),
            source_url=_validate_http_url(source_value, "VOLCANOCAMS_SOURCE_URL"),
            request_timeout_seconds=_parse_timeout(timeout_value),
        )


def normalize_base_url(raw_value: str, variable_name: str) -> str:
    """Validate a base URL and strip trailing slashes.

    Args:
        raw_value: Raw URL string.
        variable_name: Environment variable name used in error messages.

    Returns:
        URL without trailing slash.

    Raises:
        EtlConfigError: If value is not an http(s) URL.
    """
    return _validate_http_url(raw_value, variable_name).rstrip("/")


def _validate_http_url(raw_value: str, variable_name: str) -> str:
    value = raw_value.strip()
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise EtlConfigError(
            f"Invalid {variable_name} value: expected http(s) URL, got '{raw_value}'. "
            f"Set {variable_name} to a full URL such as https://example.org/."
        )
    return value


def _parse_timeout(raw_value: str) -> float:
    """Parse the request timeout environment value.

    Raises:
        EtlConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise EtlConfigError(
            "Invalid VOLCANOCAMS_REQUEST_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'."
        ) from error
    if timeout <= 0:
        raise EtlConfigError(
            "Invalid VOLCANOCAMS_REQUEST_TIMEOUT value: "
            f"expected positive seconds, got '{raw_value}'."
        )
    return timeout
