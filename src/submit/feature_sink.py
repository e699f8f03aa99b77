"""Submission sinks for finished feature collections.

This module defines the sink protocol the pipeline submits to, plus
stdout and JSON file sinks for local and scheduled runs.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Protocol, TextIO

from core.errors import SubmitError
from core.logging_config import get_logger
from core.types import FeatureCollection
from submit.feature_payload import collection_to_json

_LOGGER = get_logger(__name__)


class FeatureSink(Protocol):
    """Downstream consumer that accepts one whole collection per run."""

    def submit(self, collection: FeatureCollection) -> None:
        """Accept the complete feature collection."""


class StdoutFeatureSink:
    """Sink that writes the GeoJSON collection to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def submit(self, collection: FeatureCollection) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(collection_to_json(collection))
        stream.flush()


class JsonFileFeatureSink:
    """Sink that writes the GeoJSON collection to a local file."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    def submit(self, collection: FeatureCollection) -> None:
        """Write the collection, replacing any previous file atomically.

        Raises:
            SubmitError: If the file cannot be written.
        """
        temp_path = self._output_path.with_name(self._output_path.name + ".tmp")
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(collection_to_json(collection), encoding="utf-8")
            temp_path.replace(self._output_path)
        except OSError as error:
            raise SubmitError(
                f"Failed to write feature collection to {self._output_path}: {error}"
            ) from error
        _LOGGER.info(
            "feature_collection_written",
            output_path=str(self._output_path),
            feature_count=len(collection.features),
        )
