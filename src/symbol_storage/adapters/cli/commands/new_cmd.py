"""``new`` subcommand: initialise an empty storage."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from symbol_storage.domain.enums import StorageFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..options import format_options
from ._shared import open_destination

logger = logging.getLogger(__name__)


@click.command("new", context_settings=CLICK_CONTEXT_SETTINGS)
@format_options
@click.pass_context
def cli_new(ctx: click.Context, storage_format: StorageFormat) -> int:
    """Create a new, empty storage at the destination."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "new", "storage_format": storage_format.value}
    with lib_log_rich.runtime.bind(job_id="cli-new", extra=extra):
        storage = open_destination(cli_ctx)
        logger.info("Creating new storage", extra={"storage": storage.describe()})
        return cli_ctx.services.new_storage(storage, storage_format=storage_format)


__all__ = ["cli_new"]
