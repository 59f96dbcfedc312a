"""Command-line interface package for the state interpreter."""

from .app import build_parser, configure_logging, create_service, main, run

__all__ = [
    "build_parser",
    "configure_logging",
    "create_service",
    "main",
    "run",
]
