"""Unit tests for camera feature mapping."""

from __future__ import annotations

from core.types import CameraRecord, VolcanoGroup
from transforms.camera_features import (
    build_camera_feature,
    build_camera_features,
    build_remarks,
    format_number,
)


def _sample_camera(**overrides: object) -> CameraRecord:
    fields: dict[str, object] = {
        "camera_id": "ruapehu-crater",
        "coordinates": (-39.123456789, 175.987654321),
        "title": "Ruapehu Crater",
        "height": 2600,
        "latest_timestamp": "2024-06-01 10:00:00 NZST",
        "azimuth": 210,
        "volcano_titles": ("Ruapehu",),
    }
    fields.update(overrides)
    return CameraRecord(**fields)  # type: ignore[arg-type]


def test_build_camera_feature_swaps_axes_and_adds_height() -> None:
    """Geometry should be longitude, latitude, height."""
    feature = build_camera_feature(_sample_camera(), "2024-05-31T22:00:00.000Z")

    assert feature.coordinates == (175.987654321, -39.123456789, 2600)


def test_build_camera_feature_derives_identifiers_and_link() -> None:
    """Feature id and camera page link should derive from the camera id."""
    feature = build_camera_feature(_sample_camera(), "2024-05-31T22:00:00.000Z")

    assert feature.feature_id == "volcano-camera-ruapehu-crater"
    assert feature.link.url == "https://www.geonet.org.nz/volcano/cameras/ruapehu-crater"
    assert feature.link.uid == "volcano-camera-ruapehu-crater-link"


def test_build_camera_feature_sets_time_start_and_sensor() -> None:
    """Time fields should match and the sensor cone should follow azimuth."""
    feature = build_camera_feature(_sample_camera(azimuth=35.5), "2024-05-31T22:00:00.000Z")

    assert feature.time == feature.start == "2024-05-31T22:00:00.000Z"
    assert feature.sensor.azimuth == feature.sensor.north == 35.5
    assert (feature.sensor.fov, feature.sensor.vfov) == (45, 45)
    assert (feature.sensor.roll, feature.sensor.range, feature.sensor.elevation) == (0, 15000, 0)


def test_build_remarks_rounds_coordinates_in_feed_order() -> None:
    """Remarks should list the rounded latitude before longitude."""
    remarks = build_remarks(_sample_camera(volcano_titles=("Tongariro", "Ngauruhoe")))

    assert remarks.split("\n") == [
        "Camera: Ruapehu Crater",
        "Volcano: Tongariro, Ngauruhoe",
        "Location: -39.123457, 175.987654",
        "Height: 2600m",
        "Azimuth: 210°",
        "Last Updated: 2024-06-01 10:00:00 NZST",
    ]


def test_format_number_drops_integral_fraction() -> None:
    """Integral floats render like integers, other values keep their digits."""
    assert [format_number(320.0), format_number(1480.5), format_number(7)] == [
        "320",
        "1480.5",
        "7",
    ]


def test_build_camera_features_preserves_order_across_groups() -> None:
    """Flattening should keep group order then camera order."""
    groups = [
        VolcanoGroup(cameras=(_sample_camera(camera_id="a"), _sample_camera(camera_id="b"))),
        VolcanoGroup(cameras=()),
        VolcanoGroup(cameras=(_sample_camera(camera_id="c"),)),
    ]

    features = build_camera_features(groups)

    assert [feature.feature_id for feature in features] == [
        "volcano-camera-a",
        "volcano-camera-b",
        "volcano-camera-c",
    ]
