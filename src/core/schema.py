"""Schema descriptors exposed to the hosting harness.

This module answers schema negotiation requests with JSON schema
payloads for the configuration and for one output feature record.
"""

from __future__ import annotations

import copy
from typing import Any, Literal

from core.constants import DEFAULT_CAMERA_PROXY_URL

SchemaType = Literal["input", "output"]
DataFlowType = Literal["incoming", "outgoing"]

SUPPORTED_SCHEMA_TYPES: tuple[SchemaType, ...] = ("input", "output")
SUPPORTED_FLOW_TYPES: tuple[DataFlowType, ...] = ("incoming", "outgoing")

_NUMBER = {"type": "number"}
_STRING = {"type": "string"}

CONFIG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "Camera Proxy URL": {
            "type": "string",
            "description": "Base URL for camera proxy service",
            "default": DEFAULT_CAMERA_PROXY_URL,
        },
    },
    "required": ["Camera Proxy URL"],
}

OUTPUT_FEATURE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": _STRING,
        "type": {"const": "Feature"},
        "geometry": {
            "type": "object",
            "properties": {
                "type": {"const": "Point"},
                "coordinates": {
                    "type": "array",
                    "items": _NUMBER,
                    "minItems": 3,
                    "maxItems": 3,
                },
            },
            "required": ["type", "coordinates"],
        },
        "properties": {
            "type": "object",
            "properties": {
                "callsign": _STRING,
                "type": _STRING,
                "how": _STRING,
                "icon": _STRING,
                "time": {"type": "string", "format": "date-time"},
                "start": {"type": "string", "format": "date-time"},
                "sensor": {
                    "type": "object",
                    "properties": {
                        "azimuth": _NUMBER,
                        "north": _NUMBER,
                        "fov": _NUMBER,
                        "vfov": _NUMBER,
                        "roll": _NUMBER,
                        "range": _NUMBER,
                        "elevation": _NUMBER,
                    },
                },
                "marker-color": _STRING,
                "links": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "uid": _STRING,
                            "relation": _STRING,
                            "mime": _STRING,
                            "url": _STRING,
                            "remarks": _STRING,
                        },
                    },
                },
                "remarks": _STRING,
            },
            "required": ["callsign", "time", "start", "sensor", "links", "remarks"],
        },
    },
    "required": ["id", "type", "geometry", "properties"],
}

_EMPTY_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}


def describe_schema(
    schema_type: SchemaType = "input",
    flow: DataFlowType = "incoming",
) -> dict[str, Any]:
    """Return the JSON schema for a schema negotiation request.

    Args:
        schema_type: ``input`` for configuration, ``output`` for feature records.
        flow: Data flow direction; only incoming flows carry schemas.

    Returns:
        A fresh JSON schema dictionary safe for callers to mutate.

    Raises:
        ValueError: If schema type or flow is unsupported.
    """
    if schema_type not in SUPPORTED_SCHEMA_TYPES:
        raise ValueError(
            f"Unsupported schema type '{schema_type}'. Supported: {SUPPORTED_SCHEMA_TYPES}."
        )
    if flow not in SUPPORTED_FLOW_TYPES:
        raise ValueError(f"Unsupported flow '{flow}'. Supported: {SUPPORTED_FLOW_TYPES}.")
    if flow == "outgoing":
        return copy.deepcopy(_EMPTY_SCHEMA)
    if schema_type == "input":
        return copy.deepcopy(CONFIG_SCHEMA)
    return copy.deepcopy(OUTPUT_FEATURE_SCHEMA)
