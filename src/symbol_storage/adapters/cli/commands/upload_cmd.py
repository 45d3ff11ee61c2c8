"""``upload`` subcommand: copy a local storage into the destination."""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from symbol_storage.domain.enums import StorageFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..options import format_options
from ._shared import open_destination

logger = logging.getLogger(__name__)


@click.command("upload", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "-s",
    "--source",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory of the storage to upload",
)
@format_options
@click.pass_context
def cli_upload(ctx: click.Context, source: Path, storage_format: StorageFormat) -> int:
    """Upload a local storage directory into the destination storage."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "upload", "source": str(source), "storage_format": storage_format.value}
    with lib_log_rich.runtime.bind(job_id="cli-upload", extra=extra):
        storage = open_destination(cli_ctx)
        logger.info("Uploading storage", extra={"storage": storage.describe()})
        return cli_ctx.services.upload_storage(storage, source=source, storage_format=storage_format)


__all__ = ["cli_upload"]
