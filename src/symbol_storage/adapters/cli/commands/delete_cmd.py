"""``delete`` subcommand: remove matching tags and the files only they reference."""

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


@click.command("delete", context_settings=CLICK_CONTEXT_SETTINGS)
@filter_options
@click.pass_context
def cli_delete(ctx: click.Context, *, selection: TagSelection) -> int:
    """Delete tags matching the product and version filters.

    Tags and files younger than the safety period are kept.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-delete", extra={"command": "delete"}):
        storage = open_destination(cli_ctx)
        logger.info(
            "Deleting from storage",
            extra={"storage": storage.describe(), "safety_period_days": selection.safety_period.days},
        )
        return cli_ctx.services.delete_storage(storage, selection=selection)


__all__ = ["cli_delete"]
