"""Upstream camera feed fetching.

This module performs the single HTTP request for the camera feed.
Transport failures and non-success statuses map onto domain errors.
"""

from __future__ import annotations

import requests

from core.errors import FetchError, NetworkError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def fetch_camera_feed(
    url: str,
    timeout_seconds: float,
    session: requests.Session | None = None,
) -> bytes:
    """Fetch the raw camera feed body with one request and no retries.

    Args:
        url: Upstream feed URL.
        timeout_seconds: Request timeout in seconds.
        session: Optional session; a plain ``requests.get`` is used if omitted.

    Returns:
        Raw response body.

    Raises:
        NetworkError: If the request fails before a response arrives.
        FetchError: If the response status is not 2xx.
    """
    _LOGGER.info("camera_feed_fetch_started", url=url)
    try:
        if session is None:
            response = requests.get(url, timeout=timeout_seconds)
        else:
            response = session.get(url, timeout=timeout_seconds)
    except requests.RequestException as error:
        raise NetworkError(f"Failed to reach camera feed at {url}: {error}") from error
    if not 200 <= response.status_code < 300:
        raise FetchError(response.status_code, response.reason or "", url)
    body = response.content
    _LOGGER.info(
        "camera_feed_fetched",
        url=url,
        status_code=response.status_code,
        byte_count=len(body),
    )
    return body
