"""``list`` subcommand: show the tags of the destination storage."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from symbol_storage.domain.options import TagSelection

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..options import filter_options
from ._shared import open_destination

logger = logging.getLogger(__name__)


@click.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
@filter_options
@click.pass_context
def cli_list(ctx: click.Context, *, selection: TagSelection) -> int:
    """List tags matching the product and version filters."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-list", extra={"command": "list"}):
        storage = open_destination(cli_ctx)
        logger.info(
            "Listing storage",
            extra={"storage": storage.describe(), "safety_period_days": selection.safety_period.days},
        )
        return cli_ctx.services.list_storage(storage, selection=selection)


__all__ = ["cli_list"]
