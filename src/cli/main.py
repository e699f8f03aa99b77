"""Volcano camera ETL CLI entry points.
This module exposes the scheduled pipeline run and schema queries.
It maps argparse commands onto pipeline and schema calls.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence, cast

from core.config import EtlConfig
from core.errors import VolcanoCamsError
from core.schema import (
    SUPPORTED_FLOW_TYPES,
    SUPPORTED_SCHEMA_TYPES,
    DataFlowType,
    SchemaType,
    describe_schema,
)
from ingest.pipeline import run_camera_pipeline
from submit.feature_sink import FeatureSink, JsonFileFeatureSink, StdoutFeatureSink


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="volcanocams",
        description="GeoNet volcano camera feature ETL",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_run_command(subparsers)
    _add_schema_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the volcano camera CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "run":
            return _run_pipeline_command(args)
        if args.command == "schema":
            return _run_schema_command(args)
    except VolcanoCamsError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_pipeline_command(args: argparse.Namespace) -> int:
    """Handle run command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    config = EtlConfig.from_env()
    if args.source_url:
        config = replace(config, source_url=args.source_url)
    if args.timeout is not None:
        config = replace(config, request_timeout_seconds=args.timeout)
    sink: FeatureSink = StdoutFeatureSink()
    if args.output:
        sink = JsonFileFeatureSink(Path(args.output).expanduser())
    collection = run_camera_pipeline(config, sink)
    if args.output:
        print(f"feature_count={len(collection.features)}")
    return 0


def _run_schema_command(args: argparse.Namespace) -> int:
    """Handle schema command."""
    schema = describe_schema(
        cast(SchemaType, args.schema_type),
        cast(DataFlowType, args.flow),
    )
    print(json.dumps(schema, indent=2))
    return 0


def _add_run_command(subparsers: Any) -> None:
    """Register run subcommand."""
    parser = subparsers.add_parser("run", help="Fetch cameras and submit one feature collection")
    parser.add_argument("--output", help="Write GeoJSON to this path instead of stdout")
    parser.add_argument("--source-url", help="Override VOLCANOCAMS_SOURCE_URL for this run")
    parser.add_argument("--timeout", type=_positive_float, help="Request timeout in seconds")


def _add_schema_command(subparsers: Any) -> None:
    """Register schema subcommand."""
    parser = subparsers.add_parser("schema", help="Print a configuration or feature schema")
    parser.add_argument(
        "--type",
        dest="schema_type",
        default="input",
        choices=SUPPORTED_SCHEMA_TYPES,
        help="input for configuration, output for feature records",
    )
    parser.add_argument(
        "--flow",
        default="incoming",
        choices=SUPPORTED_FLOW_TYPES,
        help="Data flow direction",
    )


def _positive_float(raw_value: str) -> float:
    """Parse a strictly positive float CLI argument."""
    try:
        value = float(raw_value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"expected seconds, got '{raw_value}'") from error
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected positive seconds, got '{raw_value}'")
    return value
