"""Camera feed decoding and shape validation.

This module turns the raw feed body into typed volcano groups.
Any malformed record rejects the whole document.
"""

from __future__ import annotations

import json
import math
from typing import Any

from core.errors import ParseError
from core.types import CameraRecord, Number, VolcanoGroup


def parse_volcano_groups(body: bytes | str) -> list[VolcanoGroup]:
    """Decode and validate the camera feed document.

    Args:
        body: Raw JSON response body.

    Returns:
        Ordered volcano groups with validated camera records.

    Raises:
        ParseError: If JSON is malformed or the first shape violation is found.
    """
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise ParseError(f"Failed to decode camera feed JSON: {error}") from error
    if not isinstance(payload, list):
        _raise_shape_error("$", "expected a list of volcano groups")
    return [_parse_group(group, f"$[{index}]") for index, group in enumerate(payload)]


def _parse_group(group: Any, path: str) -> VolcanoGroup:
    if not isinstance(group, dict):
        _raise_shape_error(path, "expected an object")
    features = group.get("features")
    if not isinstance(features, list):
        _raise_shape_error(f"{path}.features", "expected a list of camera records")
    cameras = tuple(
        _parse_camera(camera, f"{path}.features[{index}]")
        for index, camera in enumerate(features)
    )
    return VolcanoGroup(cameras=cameras)


def _parse_camera(camera: Any, path: str) -> CameraRecord:
    """Validate one camera record and build its typed model.

    Args:
        camera: Decoded camera JSON value.
        path: JSON path of the record for error messages.

    Returns:
        Typed camera record.

    Raises:
        ParseError: If any required field is missing or mistyped.
    """
    if not isinstance(camera, dict):
        _raise_shape_error(path, "expected an object")
    camera_id = _require_string(camera, "id", path)
    coordinates = _parse_coordinates(camera.get("geometry"), f"{path}.geometry")
    properties = camera.get("properties")
    properties_path = f"{path}.properties"
    if not isinstance(properties, dict):
        _raise_shape_error(properties_path, "expected an object")
    volcano_titles = _require_string_list(camera, "volcano-title", path)
    if not volcano_titles:
        _raise_shape_error(f"{path}.volcano-title", "expected at least one volcano title")
    volcano_ids = ()
    if "volcano-id" in camera:
        volcano_ids = _require_string_list(camera, "volcano-id", path)
    latest_image_url = None
    if "latest-image-large" in properties:
        latest_image_url = _require_string(properties, "latest-image-large", properties_path)
    return CameraRecord(
        camera_id=camera_id,
        coordinates=coordinates,
        title=_require_string(properties, "title", properties_path),
        height=_require_number(properties, "height", properties_path),
        latest_timestamp=_require_string(properties, "latest-timestamp", properties_path),
        azimuth=_require_number(properties, "azimuth", properties_path),
        volcano_titles=volcano_titles,
        volcano_ids=volcano_ids,
        latest_image_url=latest_image_url,
    )


def _parse_coordinates(geometry: Any, path: str) -> tuple[Number, Number]:
    if not isinstance(geometry, dict):
        _raise_shape_error(path, "expected an object")
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, list) or len(coordinates) != 2:
        _raise_shape_error(f"{path}.coordinates", "expected [latitude, longitude]")
    if not all(_is_number(value) for value in coordinates):
        _raise_shape_error(f"{path}.coordinates", "expected numeric latitude and longitude")
    return coordinates[0], coordinates[1]


def _require_string(container: dict[str, Any], key: str, path: str) -> str:
    value = container.get(key)
    if not isinstance(value, str):
        _raise_shape_error(f"{path}.{key}", "expected a string")
    return value


def _require_number(container: dict[str, Any], key: str, path: str) -> Number:
    value = container.get(key)
    if not _is_number(value):
        _raise_shape_error(f"{path}.{key}", "expected a number")
    return value


def _require_string_list(container: dict[str, Any], key: str, path: str) -> tuple[str, ...]:
    value = container.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        _raise_shape_error(f"{path}.{key}", "expected a list of strings")
    return tuple(value)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _reject_constant(constant: str) -> None:
    raise ParseError(f"Unexpected camera feed value {constant}: expected a finite number.")


def _raise_shape_error(path: str, reason: str) -> None:
    raise ParseError(f"Unexpected camera feed shape at {path}: {reason}.")
