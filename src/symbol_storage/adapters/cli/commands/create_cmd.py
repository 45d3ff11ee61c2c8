"""``create`` subcommand: build a storage from source files and upload it.

The sources are collected into a scratch storage first; the destination only
receives them when that step succeeded. Path arguments starting with ``@``
name manifest files listing further paths, one per line.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from symbol_storage import __init__conf__
from symbol_storage.application.create_upload import create_and_upload
from symbol_storage.domain.enums import StorageFormat
from symbol_storage.domain.options import CreateRequest, Properties

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..options import format_options, property_option
from ..paths import resolve_paths
from ._shared import open_destination

logger = logging.getLogger(__name__)


def tool_identity() -> str:
    """Identity recorded in tags written by this tool.

    Example:
        >>> tool_identity().startswith("symbol-storage/")
        True
    """
    return f"{__init__conf__.shell_command}/{__init__conf__.version}"


@click.command("create", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "-cwpdb",
    "--compress-windows-pdb",
    "compress_windows_pdb",
    is_flag=True,
    default=False,
    help="Compress Windows PDB files",
)
@click.option("-cpe", "--compress-pe", "compress_pe", is_flag=True, default=False, help="Compress PE files")
@click.option(
    "-k",
    "--keep-non-compressed",
    "keep_non_compressed",
    is_flag=True,
    default=False,
    help="Store the non-compressed files next to the compressed ones",
)
@property_option
@format_options
@click.argument("product")
@click.argument("version")
@click.argument("paths", nargs=-1, required=True, metavar="PATH|@FILE...")
@click.pass_context
def cli_create(
    ctx: click.Context,
    compress_windows_pdb: bool,
    compress_pe: bool,
    keep_non_compressed: bool,
    properties: Properties,
    storage_format: StorageFormat,
    product: str,
    version: str,
    paths: tuple[str, ...],
) -> int:
    """Create a storage for PRODUCT VERSION from PATHs and upload it."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "create", "product": product, "version": version}
    with lib_log_rich.runtime.bind(job_id="cli-create", extra=extra):
        storage = open_destination(cli_ctx)
        request = CreateRequest(
            tool=tool_identity(),
            product=product,
            version=version,
            sources=tuple(Path(path) for path in resolve_paths(paths)),
            compress_pe=compress_pe,
            compress_windows_pdb=compress_windows_pdb,
            keep_non_compressed=keep_non_compressed,
            properties=properties,
        )
        logger.info(
            "Creating storage",
            extra={"storage": storage.describe(), "sources": len(request.sources)},
        )
        services = cli_ctx.services
        return create_and_upload(
            storage,
            request,
            storage_format=storage_format,
            open_scratch=services.scratch_storage,
            open_storage=services.open_storage,
            populate=services.populate_storage,
            upload=services.upload_storage,
        )


__all__ = ["cli_create", "tool_identity"]
