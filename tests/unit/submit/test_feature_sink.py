"""Unit tests for feature payloads and submission sinks."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from core.errors import SubmitError
from core.types import FeatureCollection
from ingest.feed_parser import parse_volcano_groups
from ingest.pipeline import build_feature_collection
from submit.feature_payload import collection_to_json, collection_to_payload
from submit.feature_sink import JsonFileFeatureSink, StdoutFeatureSink
from tests.fixture_paths import fixture_path


def _fixture_collection() -> FeatureCollection:
    groups = parse_volcano_groups(fixture_path("volcano_cameras.json").read_bytes())
    return build_feature_collection(groups)


def test_collection_to_payload_renders_geojson_feature() -> None:
    """Payload should follow GeoJSON with display properties."""
    payload = collection_to_payload(_fixture_collection())

    feature = payload["features"][0]  # type: ignore[index]
    assert payload["type"] == "FeatureCollection"
    assert feature["geometry"] == {
        "type": "Point",
        "coordinates": [175.987654321, -39.123456789, 2600],
    }
    assert feature["properties"]["callsign"] == "Ruapehu Crater"
    assert feature["properties"]["time"] == "2024-05-31T22:00:00.000Z"
    assert feature["properties"]["links"][0]["url"] == (
        "https://www.geonet.org.nz/volcano/cameras/ruapehu-crater"
    )


def test_collection_to_json_is_deterministic() -> None:
    """Serializing the same feed twice should be byte-identical."""
    assert collection_to_json(_fixture_collection()) == collection_to_json(_fixture_collection())


def test_stdout_sink_writes_collection_json() -> None:
    """Stdout sink should write the whole collection to its stream."""
    stream = io.StringIO()

    StdoutFeatureSink(stream).submit(FeatureCollection(features=()))

    assert json.loads(stream.getvalue()) == {"type": "FeatureCollection", "features": []}


def test_json_file_sink_writes_collection(tmp_path: Path) -> None:
    """File sink should create parent directories and write GeoJSON."""
    output_path = tmp_path / "out" / "cameras.geojson"

    JsonFileFeatureSink(output_path).submit(_fixture_collection())

    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert len(payload["features"]) == 3
    assert not output_path.with_name("cameras.geojson.tmp").exists()


def test_json_file_sink_raises_submit_error_for_unwritable_path(tmp_path: Path) -> None:
    """File system failures should surface as SubmitError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(SubmitError):
        JsonFileFeatureSink(blocker / "cameras.geojson").submit(FeatureCollection(features=()))
