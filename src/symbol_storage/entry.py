"""Console script entry points with production wiring.

This module provides the entry points for console scripts (pip-installed commands).
It wires production services from the composition layer before invoking the CLI.

System Role:
    Sits at package level (outside adapters) to properly wire composition into
    the adapters layer without violating clean architecture layer constraints.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production
from .domain.enums import CliMode


def main() -> int:
    """``symbol-storage`` entry point exposing every subcommand.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


def main_upload() -> int:
    """``symbol-storage-upload`` entry point limited to ``new``, ``upload`` and ``create``."""
    return cli_main(services_factory=build_production, mode=CliMode.UPLOAD_ONLY)


__all__ = ["main", "main_upload"]
