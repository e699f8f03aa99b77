"""Unit tests for schema negotiation descriptors."""

from __future__ import annotations

import pytest

from core.schema import describe_schema


def test_describe_schema_returns_configuration_for_incoming_input() -> None:
    """Input schema should describe the camera proxy option."""
    schema = describe_schema("input", "incoming")

    proxy_option = schema["properties"]["Camera Proxy URL"]
    assert proxy_option["default"] == "https://utils.test.tak.nz/camera-proxy/"
    assert proxy_option["type"] == "string"


def test_describe_schema_returns_feature_shape_for_incoming_output() -> None:
    """Output schema should describe one point feature record."""
    schema = describe_schema("output", "incoming")

    geometry = schema["properties"]["geometry"]["properties"]
    assert geometry["coordinates"]["minItems"] == 3
    assert "remarks" in schema["properties"]["properties"]["properties"]


@pytest.mark.parametrize("schema_type", ["input", "output"])
def test_describe_schema_is_empty_for_outgoing_flow(schema_type: str) -> None:
    """Outgoing flows carry no schema."""
    schema = describe_schema(schema_type, "outgoing")  # type: ignore[arg-type]

    assert schema == {"type": "object", "properties": {}}


def test_describe_schema_returns_independent_copies() -> None:
    """Callers mutating a schema should not affect later requests."""
    first = describe_schema("input", "incoming")
    first["properties"].clear()

    assert "Camera Proxy URL" in describe_schema("input", "incoming")["properties"]


def test_describe_schema_rejects_unknown_direction() -> None:
    """Unsupported schema types should fail loudly."""
    with pytest.raises(ValueError):
        describe_schema("sideways", "incoming")  # type: ignore[arg-type]
