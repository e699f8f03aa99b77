"""Camera feed pipeline orchestration.

This module coordinates feed fetching, validation, feature mapping,
and the single submission call for one invocation.
"""

from __future__ import annotations

import requests

from core.config import EtlConfig
from core.errors import FetchError, TimestampError
from core.logging_config import get_logger
from core.types import FeatureCollection, VolcanoGroup
from ingest.feed_fetcher import fetch_camera_feed
from ingest.feed_parser import parse_volcano_groups
from submit.feature_sink import FeatureSink
from transforms.camera_features import build_camera_features

_LOGGER = get_logger(__name__)


class CameraPipelineRunner:
    """Runner for one fetch, map, and submit invocation."""

    def __init__(
        self,
        config: EtlConfig,
        sink: FeatureSink,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._sink = sink
        self._session = session

    def run(self) -> FeatureCollection:
        """Execute the pipeline and return the submitted collection.

        Raises:
            VolcanoCamsError: If any stage fails; nothing is submitted.
            Exception: Sink failures outside the domain hierarchy are
                logged and re-raised unchanged.
        """
        try:
            groups = self._load_groups()
            collection = build_feature_collection(groups)
            _log_collection_built(groups, collection)
            self._sink.submit(collection)
        except Exception as error:
            _log_pipeline_failure(error)
            raise
        return collection

    def _load_groups(self) -> list[VolcanoGroup]:
        body = fetch_camera_feed(
            self._config.source_url,
            self._config.request_timeout_seconds,
            session=self._session,
        )
        return parse_volcano_groups(body)


def run_camera_pipeline(
    config: EtlConfig,
    sink: FeatureSink,
    session: requests.Session | None = None,
) -> FeatureCollection:
    """Fetch the camera feed, map it, and submit one collection.

    Args:
        config: Runtime configuration.
        sink: Submission collaborator receiving the whole collection.
        session: Optional HTTP session for the feed request.

    Returns:
        The collection handed to the sink.

    Raises:
        NetworkError: If the feed cannot be reached.
        FetchError: If the feed answers with a non-success status.
        ParseError: If the feed body is malformed.
        TimestampError: If a camera timestamp cannot be normalized.
    """
    runner = CameraPipelineRunner(config, sink, session=session)
    return runner.run()


def build_feature_collection(groups: list[VolcanoGroup]) -> FeatureCollection:
    """Flatten volcano groups into one ordered feature collection."""
    return FeatureCollection(features=tuple(build_camera_features(groups)))


def _log_collection_built(groups: list[VolcanoGroup], collection: FeatureCollection) -> None:
    """Log the feature count before submission."""
    _LOGGER.info(
        "camera_features_built",
        group_count=len(groups),
        feature_count=len(collection.features),
    )


def _log_pipeline_failure(error: Exception) -> None:
    """Log a terminal pipeline error with stage-specific context."""
    fields: dict[str, object] = {
        "error_type": type(error).__name__,
        "message": str(error),
    }
    if isinstance(error, FetchError):
        fields["status_code"] = error.status_code
        fields["status_text"] = error.status_text
    if isinstance(error, TimestampError):
        fields["timestamp"] = error.value
    if error.__cause__ is not None:
        fields["cause"] = repr(error.__cause__)
    _LOGGER.error("pipeline_failed", exc_info=True, **fields)
