"""Shared typed models.

This module defines immutable data models used by ingest, transform,
and submission layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass

Number = int | float


@dataclass(frozen=True)
class CameraRecord:
    """One validated camera entry from the upstream feed.

    Attributes:
        camera_id: Stable GeoNet camera identifier.
        coordinates: ``(latitude, longitude)`` pair in feed order.
        title: Camera display name.
        height: Camera height in metres.
        latest_timestamp: Raw timestamp string, optionally NZST/NZDT tagged.
        azimuth: Camera view direction in degrees.
        volcano_titles: Names of the volcanoes the camera watches.
        volcano_ids: GeoNet volcano identifiers, when supplied.
        latest_image_url: Latest large image URL, when supplied.
    """

    camera_id: str
    coordinates: tuple[Number, Number]
    title: str
    height: Number
    latest_timestamp: str
    azimuth: Number
    volcano_titles: tuple[str, ...]
    volcano_ids: tuple[str, ...] = ()
    latest_image_url: str | None = None

    @property
    def latitude(self) -> Number:
        return self.coordinates[0]

    @property
    def longitude(self) -> Number:
        return self.coordinates[1]


@dataclass(frozen=True)
class VolcanoGroup:
    """Ordered camera records delivered as one feed group."""

    cameras: tuple[CameraRecord, ...]


@dataclass(frozen=True)
class SensorOrientation:
    """Camera sensor cone shown by downstream map clients.

    Attributes:
        azimuth: View direction in degrees.
        north: Reference bearing in degrees, equal to azimuth.
        fov: Horizontal field of view in degrees.
        vfov: Vertical field of view in degrees.
        roll: Sensor roll in degrees.
        range: Sensor range.
        elevation: Sensor elevation in degrees.
    """

    azimuth: Number
    north: Number
    fov: Number
    vfov: Number
    roll: Number
    range: Number
    elevation: Number


@dataclass(frozen=True)
class FeatureLink:
    """Outbound link attached to a feature."""

    uid: str
    url: str
    relation: str
    mime: str
    remarks: str


@dataclass(frozen=True)
class OutputFeature:
    """Normalized point feature for one camera.

    Attributes:
        feature_id: Synthetic ``volcano-camera-<id>`` identifier.
        coordinates: ``(longitude, latitude, height)`` point position.
        display_name: Camera title used as callsign.
        time: Canonical UTC timestamp string.
        start: Same value as ``time``.
        sensor: Fixed sensor cone around the camera azimuth.
        link: Link to the GeoNet camera page.
        remarks: Multi-line human readable summary.
    """

    feature_id: str
    coordinates: tuple[Number, Number, Number]
    display_name: str
    time: str
    start: str
    sensor: SensorOrientation
    link: FeatureLink
    remarks: str


@dataclass(frozen=True)
class FeatureCollection:
    """Ordered output features submitted as one unit."""

    features: tuple[OutputFeature, ...]
