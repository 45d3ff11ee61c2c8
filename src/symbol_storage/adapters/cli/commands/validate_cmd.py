"""``validate`` subcommand: check and optionally repair storage consistency."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import open_destination

logger = logging.getLogger(__name__)


@click.command("validate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("-r", "--rights", "check_rights", is_flag=True, default=False, help="Check that every object is readable")
@click.option("-f", "--fix", is_flag=True, default=False, help="Remove orphaned files and broken tags")
@click.pass_context
def cli_validate(ctx: click.Context, check_rights: bool, fix: bool) -> int:
    """Validate the destination storage.

    Returns the operation result; non-zero means inconsistencies remain.
    """
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "validate", "check_rights": check_rights, "fix": fix}
    with lib_log_rich.runtime.bind(job_id="cli-validate", extra=extra):
        storage = open_destination(cli_ctx)
        logger.info("Validating storage", extra={"storage": storage.describe()})
        return cli_ctx.services.validate_storage(storage, check_rights=check_rights, fix=fix)


__all__ = ["cli_validate"]
