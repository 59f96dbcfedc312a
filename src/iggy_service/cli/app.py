"""Command-line interface implementation for the state interpreter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from .. import __version__
from ..reporting import (
    bindings_to_dict,
    controls_to_list,
    render_bindings_table,
    render_controls_ruby,
)
from ..service import SERVICE_ERRORS, ExtractionResult, GenerationResult, IggyService

LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="iggy",
        description="Derive profile bindings and compliance controls from Terraform state.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Verbosity of diagnostics written to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Shorthand for --log-level debug.",
    )
    subparsers = parser.add_subparsers(dest="command")

    extract_parser = subparsers.add_parser(
        "extract", help="List compliance profiles bound to tagged resources."
    )
    extract_parser.add_argument("state", type=Path, help="Path to the Terraform state file.")
    extract_parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Output format for the extracted profile bindings.",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Generate compliance controls for the resources in a state file."
    )
    generate_parser.add_argument("state", type=Path, help="Path to the Terraform state file.")
    generate_parser.add_argument(
        "--format",
        choices=["ruby", "json"],
        default="ruby",
        help="Output format for the generated controls.",
    )
    generate_parser.add_argument(
        "--resource-manifest",
        dest="resource_manifests",
        action="append",
        default=None,
        type=str,
        help="Additional YAML manifest extending the resource translation and property tables.",
    )

    return parser


def create_service() -> IggyService:
    """Create a service instance using the packaged resource catalog."""

    return IggyService()


def configure_logging(level: str, *, stream: TextIO | None = None) -> None:
    """Send log records at *level* and above to stderr."""

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )


def _format_extraction(result: ExtractionResult, output_format: str) -> str:
    if output_format == "table":
        return render_bindings_table(result.bindings)
    return json.dumps(bindings_to_dict(result.bindings), indent=2)


def _format_generation(result: GenerationResult, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(controls_to_list(result.controls), indent=2)
    return render_controls_ruby(result.controls).rstrip("\n")


def _handle_extract(args: argparse.Namespace) -> int:
    service = create_service()
    try:
        result = service.extract(args.state)
    except SERVICE_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(_format_extraction(result, args.format))
    return 0


def _handle_generate(args: argparse.Namespace) -> int:
    service = create_service()
    try:
        result = service.generate(args.state, manifests=args.resource_manifests)
    except SERVICE_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(_format_generation(result, args.format))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("debug" if args.verbose else args.log_level)

    if args.command == "extract":
        return _handle_extract(args)
    if args.command == "generate":
        return _handle_generate(args)

    parser.print_help()
    return 0


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
