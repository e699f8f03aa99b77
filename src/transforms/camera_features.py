"""Camera record to feature mapping.

This module builds normalized point features from validated camera
records. Mapping is pure and preserves feed order.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import (
    CAMERA_PAGE_BASE_URL,
    COORDINATE_DECIMAL_PLACES,
    FEATURE_ID_PREFIX,
    LINK_MIME,
    LINK_RELATION,
    LINK_REMARKS,
    SENSOR_ELEVATION_DEGREES,
    SENSOR_FIELD_OF_VIEW_DEGREES,
    SENSOR_RANGE,
    SENSOR_ROLL_DEGREES,
    SENSOR_VERTICAL_FIELD_OF_VIEW_DEGREES,
)
from core.types import (
    CameraRecord,
    FeatureLink,
    Number,
    OutputFeature,
    SensorOrientation,
    VolcanoGroup,
)
from transforms.timestamp_normalization import normalize_timestamp


def build_camera_features(groups: Iterable[VolcanoGroup]) -> list[OutputFeature]:
    """Map every camera of every group into output features.

    Args:
        groups: Volcano groups in feed order.

    Returns:
        Flat feature list, one per camera, in feed order.

    Raises:
        TimestampError: If any camera timestamp cannot be normalized.
    """
    features: list[OutputFeature] = []
    for group in groups:
        for camera in group.cameras:
            timestamp_utc = normalize_timestamp(camera.latest_timestamp)
            features.append(build_camera_feature(camera, timestamp_utc))
    return features


def build_camera_feature(camera: CameraRecord, timestamp_utc: str) -> OutputFeature:
    """Build one output feature from a camera record.

    Args:
        camera: Validated camera record.
        timestamp_utc: Normalized UTC timestamp for the camera.

    Returns:
        Output feature with swapped axes and derived display fields.
    """
    feature_id = f"{FEATURE_ID_PREFIX}{camera.camera_id}"
    return OutputFeature(
        feature_id=feature_id,
        coordinates=(camera.longitude, camera.latitude, camera.height),
        display_name=camera.title,
        time=timestamp_utc,
        start=timestamp_utc,
        sensor=_build_sensor(camera.azimuth),
        link=FeatureLink(
            uid=f"{feature_id}-link",
            url=f"{CAMERA_PAGE_BASE_URL}{camera.camera_id}",
            relation=LINK_RELATION,
            mime=LINK_MIME,
            remarks=LINK_REMARKS,
        ),
        remarks=build_remarks(camera),
    )


def build_remarks(camera: CameraRecord) -> str:
    """Render the multi-line camera summary.

    Args:
        camera: Validated camera record.

    Returns:
        Newline-joined summary lines.
    """
    latitude = f"{camera.latitude:.{COORDINATE_DECIMAL_PLACES}f}"
    longitude = f"{camera.longitude:.{COORDINATE_DECIMAL_PLACES}f}"
    lines = [
        f"Camera: {camera.title}",
        f"Volcano: {', '.join(camera.volcano_titles)}",
        f"Location: {latitude}, {longitude}",
        f"Height: {format_number(camera.height)}m",
        f"Azimuth: {format_number(camera.azimuth)}°",
        f"Last Updated: {camera.latest_timestamp}",
    ]
    return "\n".join(lines)


def format_number(value: Number) -> str:
    """Render a feed number without a trailing ``.0`` for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _build_sensor(azimuth: Number) -> SensorOrientation:
    return SensorOrientation(
        azimuth=azimuth,
        north=azimuth,
        fov=SENSOR_FIELD_OF_VIEW_DEGREES,
        vfov=SENSOR_VERTICAL_FIELD_OF_VIEW_DEGREES,
        roll=SENSOR_ROLL_DEGREES,
        range=SENSOR_RANGE,
        elevation=SENSOR_ELEVATION_DEGREES,
    )
