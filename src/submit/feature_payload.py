"""GeoJSON serialization for output features.

This module centralizes OutputFeature payload rendering.
It is reused by every sink and by schema-facing tests.
"""

from __future__ import annotations

import json
from dataclasses import asdict

from core.constants import CAMERA_ICON, COT_HOW, COT_TYPE, MARKER_COLOR
from core.types import FeatureCollection, OutputFeature


def feature_to_payload(feature: OutputFeature) -> dict[str, object]:
    """Serialize an OutputFeature into a GeoJSON Feature payload.

    Args:
        feature: Output feature instance.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "id": feature.feature_id,
        "type": "Feature",
        "properties": {
            "callsign": feature.display_name,
            "type": COT_TYPE,
            "how": COT_HOW,
            "icon": CAMERA_ICON,
            "time": feature.time,
            "start": feature.start,
            "sensor": asdict(feature.sensor),
            "marker-color": MARKER_COLOR,
            "links": [asdict(feature.link)],
            "remarks": feature.remarks,
        },
        "geometry": {
            "type": "Point",
            "coordinates": list(feature.coordinates),
        },
    }


def collection_to_payload(collection: FeatureCollection) -> dict[str, object]:
    """Serialize a FeatureCollection into a GeoJSON payload."""
    return {
        "type": "FeatureCollection",
        "features": [feature_to_payload(feature) for feature in collection.features],
    }


def collection_to_json(collection: FeatureCollection) -> str:
    """Encode a FeatureCollection as deterministic JSON text."""
    return json.dumps(collection_to_payload(collection), ensure_ascii=False, indent=2) + "\n"
