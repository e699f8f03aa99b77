"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import EtlConfig
from core.constants import DEFAULT_SOURCE_URL
from core.errors import EtlConfigError


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CAMERA_PROXY_URL", "VOLCANOCAMS_SOURCE_URL", "VOLCANOCAMS_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to the default proxy, source, and timeout."""
    _clear_env(monkeypatch)

    config = EtlConfig.from_env()

    assert config.camera_proxy_url == "https://utils.test.tak.nz/camera-proxy"
    assert config.source_url == DEFAULT_SOURCE_URL
    assert config.request_timeout_seconds == 30.0


def test_from_env_strips_proxy_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    """Camera proxy URL should be stored without trailing slashes."""
    _clear_env(monkeypatch)
    monkeypatch.setenv("CAMERA_PROXY_URL", "https://proxy.example.org/cams//")

    config = EtlConfig.from_env()

    assert config.camera_proxy_url == "https://proxy.example.org/cams"


def test_from_env_reads_source_and_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mirror URL and timeout should come from the environment."""
    _clear_env(monkeypatch)
    monkeypatch.setenv("VOLCANOCAMS_SOURCE_URL", "https://mirror.example.org/all.json")
    monkeypatch.setenv("VOLCANOCAMS_REQUEST_TIMEOUT", "7.5")

    config = EtlConfig.from_env()

    assert (config.source_url, config.request_timeout_seconds) == (
        "https://mirror.example.org/all.json",
        7.5,
    )


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CAMERA_PROXY_URL", "not-a-url"),
        ("VOLCANOCAMS_SOURCE_URL", "ftp://example.org/all.json"),
        ("VOLCANOCAMS_REQUEST_TIMEOUT", "soon"),
        ("VOLCANOCAMS_REQUEST_TIMEOUT", "0"),
    ],
)
def test_from_env_raises_for_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
    name: str,
    value: str,
) -> None:
    """Config should fail with the offending variable named."""
    _clear_env(monkeypatch)
    monkeypatch.setenv(name, value)

    with pytest.raises(EtlConfigError) as error_info:
        EtlConfig.from_env()

    assert name in str(error_info.value)
