"""Click context helpers for CLI state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from symbol_storage.adapters.config.settings import StorageSettings
from symbol_storage.domain.destination import Destination, resolve_destination

if TYPE_CHECKING:
    from symbol_storage.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """Typed CLI context for Click subcommand access.

    The destination options are kept raw; :meth:`destination` resolves them
    when a subcommand actually needs a storage, so ``COMMAND --help`` works
    without one.
    """

    traceback: bool
    config: Config
    services: AppServices
    settings: StorageSettings
    profile: str | None = None
    directory: str | None = None
    aws_s3_bucket: str | None = None
    aws_s3_region: str | None = None

    def destination(self) -> Destination:
        """Resolve the global destination options into exactly one destination.

        Raises:
            ConfigurationError: If no destination or two destinations were given.
        """
        return resolve_destination(
            self.directory,
            self.aws_s3_bucket,
            self.aws_s3_region,
            default_region=self.settings.aws_s3_region,
        )


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    settings: StorageSettings,
    profile: str | None = None,
    directory: str | None = None,
    aws_s3_bucket: str | None = None,
    aws_s3_region: str | None = None,
) -> None:
    """Store CLI state in the Click context for subcommand access.

    Args:
        ctx: Click context associated with the current invocation.
        traceback: Whether verbose tracebacks were requested.
        config: Loaded layered configuration object for all subcommands.
        services: All application services from composition layer.
        settings: Validated ``[storage]`` section.
        profile: Optional configuration profile name.
        directory: Raw ``--directory`` value.
        aws_s3_bucket: Raw ``--aws-s3`` value.
        aws_s3_region: Raw ``--aws-s3-region`` value.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = None
        >>> store_cli_context(
        ...     ctx, traceback=True, config=MagicMock(), services=MagicMock(), settings=StorageSettings(), directory="/srv"
        ... )
        >>> ctx.obj.traceback, ctx.obj.directory
        (True, '/srv')
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        settings=settings,
        profile=profile,
        directory=directory,
        aws_s3_bucket=aws_s3_bucket,
        aws_s3_region=aws_s3_region,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Retrieve typed CLI state from Click context.

    Subcommands receive their own context, so the root context is looked up
    through ``find_object``.

    Raises:
        RuntimeError: If CLI context was not properly initialized.
    """
    cli_ctx = ctx.find_object(CLIContext)
    if cli_ctx is None:
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return cli_ctx


def apply_traceback_preferences(enabled: bool) -> None:
    """Synchronise shared traceback flags with the requested preference.

    Args:
        enabled: ``True`` enables full tracebacks with colour.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback configuration for later restoration."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply a previously captured traceback configuration.

    Example:
        >>> original = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(original)
        >>> lib_cli_exit_tools.config.traceback == original[0]
        True
    """
    lib_cli_exit_tools.config.traceback = state[0]
    lib_cli_exit_tools.config.traceback_force_color = state[1]


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
