"""Public SDK surface for the GeoNet volcano camera ETL.

This module provides a stable import path for harness integrations.
It re-exports the pipeline entry points and exposes the event handler.
"""

from __future__ import annotations

from typing import Any, Mapping, cast

from core.config import EtlConfig
from core.constants import ETL_NAME
from core.schema import DataFlowType, SchemaType, describe_schema
from core.types import CameraRecord, FeatureCollection, OutputFeature, VolcanoGroup
from ingest.pipeline import run_camera_pipeline
from submit.feature_payload import collection_to_payload
from submit.feature_sink import FeatureSink, JsonFileFeatureSink, StdoutFeatureSink
from transforms.timestamp_normalization import normalize_timestamp

__all__ = [
    "CameraRecord",
    "ETL_NAME",
    "EtlConfig",
    "FeatureCollection",
    "FeatureSink",
    "JsonFileFeatureSink",
    "OutputFeature",
    "StdoutFeatureSink",
    "VolcanoGroup",
    "describe_schema",
    "handler",
    "normalize_timestamp",
    "run_camera_pipeline",
]


def handler(
    event: Mapping[str, Any] | None = None,
    sink: FeatureSink | None = None,
) -> dict[str, Any]:
    """Handle one event-triggered invocation.

    Schema events (``{"type": "schema", "schema_type": ..., "flow": ...}``)
    return the requested JSON schema. Every other event runs the pipeline.

    Args:
        event: Harness event payload; an empty event runs the pipeline.
        sink: Submission collaborator, stdout when omitted.

    Returns:
        The requested schema, or the submitted GeoJSON collection.
    """
    event = event or {}
    if event.get("type") == "schema":
        return describe_schema(
            cast(SchemaType, event.get("schema_type", "input")),
            cast(DataFlowType, event.get("flow", "incoming")),
        )
    config = EtlConfig.from_env()
    collection = run_camera_pipeline(config, sink or StdoutFeatureSink())
    return collection_to_payload(collection)
