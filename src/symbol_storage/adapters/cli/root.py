"""Root CLI command groups and global option handling.

Defines the top-level Click groups serving as entry points for the
subcommands. Handles the destination options and the global flags
``--traceback`` and ``--profile``.

Two groups exist: :data:`cli` exposes every subcommand, :data:`upload_cli`
only the commands that write into a storage (``new``, ``upload``,
``create``).

Contents:
    * :func:`build_cli` - Build the root group for a :class:`CliMode`.
    * :data:`cli` - Full command group.
    * :data:`upload_cli` - Upload-only command group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from symbol_storage import __init__conf__
from symbol_storage.adapters.config.settings import load_storage_settings
from symbol_storage.domain.enums import CliMode

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from symbol_storage.composition import AppServices


def shell_command_for(mode: CliMode) -> str:
    """Console script name used for ``mode``.

    Example:
        >>> shell_command_for(CliMode.UPLOAD_ONLY)
        'symbol-storage-upload'
    """
    if mode is CliMode.UPLOAD_ONLY:
        return __init__conf__.upload_shell_command
    return __init__conf__.shell_command


def build_cli(mode: CliMode) -> click.Group:
    """Build the root group and register the subcommands available in ``mode``."""
    shell_command = shell_command_for(mode)

    @click.group(
        shell_command,
        help=__init__conf__.title,
        context_settings=CLICK_CONTEXT_SETTINGS,
        invoke_without_command=True,
    )
    @click.version_option(
        version=__init__conf__.version,
        prog_name=shell_command,
        message=f"{shell_command} version {__init__conf__.version}",
    )
    @click.option(
        "-d",
        "--directory",
        type=str,
        default=None,
        help="Local directory of the destination storage",
    )
    @click.option(
        "-a",
        "--aws-s3",
        "aws_s3_bucket",
        type=str,
        default=None,
        metavar="BUCKET",
        help="AWS S3 bucket of the destination storage",
    )
    @click.option(
        "-ar",
        "--aws-s3-region",
        "aws_s3_region",
        type=str,
        default=None,
        metavar="REGION",
        help="AWS S3 region endpoint [default: from config, eu-west-1]",
    )
    @click.option(
        "--traceback/--no-traceback",
        is_flag=True,
        default=False,
        help="Show full Python traceback on errors",
    )
    @click.option(
        "--profile",
        type=str,
        default=None,
        help="Load configuration from a named profile (e.g., 'production', 'test')",
    )
    @click.pass_context
    def group(
        ctx: click.Context,
        directory: str | None,
        aws_s3_bucket: str | None,
        aws_s3_region: str | None,
        traceback: bool,
        profile: str | None,
    ) -> None:
        """Root command storing global flags and syncing shared traceback state.

        Loads configuration once with the profile, initialises logging and
        stores everything in the Click context for the subcommands. The
        destination options are resolved by the subcommand that needs them.
        """
        # ctx.obj is always the services factory (production or test)
        if not callable(ctx.obj):
            raise RuntimeError("Services factory not provided. This is a bug.")
        services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
        config = services.get_config(profile=profile)
        services.init_logging(config)
        store_cli_context(
            ctx,
            traceback=traceback,
            config=config,
            services=services,
            settings=load_storage_settings(config),
            profile=profile,
            directory=directory,
            aws_s3_bucket=aws_s3_bucket,
            aws_s3_region=aws_s3_region,
        )
        apply_traceback_preferences(traceback)

        if ctx.invoked_subcommand is None:
            click.echo(ctx.get_help())

    for command in _commands_for(mode):
        group.add_command(command)
    return group


# Deferred import: command modules import from package ancestors.
def _commands_for(mode: CliMode) -> tuple[click.Command, ...]:
    from .commands import cli_create, cli_delete, cli_info, cli_list, cli_new, cli_upload, cli_validate

    if mode is CliMode.UPLOAD_ONLY:
        return (cli_new, cli_upload, cli_create)
    return (cli_validate, cli_list, cli_delete, cli_new, cli_upload, cli_create, cli_info)


cli = build_cli(CliMode.FULL)
upload_cli = build_cli(CliMode.UPLOAD_ONLY)


__all__ = ["build_cli", "cli", "shell_command_for", "upload_cli"]
