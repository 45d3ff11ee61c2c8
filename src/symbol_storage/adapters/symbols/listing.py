"""List tag metadata of a storage as a Rich table."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import lib_log_rich.runtime
from rich.console import Console
from rich.table import Table

from symbol_storage.application.ports import Storage
from symbol_storage.domain.options import TagSelection

from .inventory import is_protected, load_inventory, matches_selection

logger = logging.getLogger(__name__)


def list_storage(storage: Storage, *, selection: TagSelection, console: Console | None = None) -> int:
    """Print product, version, creation time, and file count of matching tags.

    Tags younger than the safety period are marked as protected. Pending log
    output is flushed first so it does not interleave with the table.

    Returns:
        Always 0; backend failures are raised.
    """
    inventory = load_inventory(storage)
    now = datetime.now(timezone.utc)
    selected = sorted(
        (tag for tag in inventory.tags.values() if matches_selection(tag, selection)),
        key=lambda tag: (tag.product.lower(), tag.version, tag.created_utc),
    )

    table = Table(title=f"Storage {storage.describe()}")
    table.add_column("Product")
    table.add_column("Version")
    table.add_column("Created (UTC)")
    table.add_column("Files", justify="right")
    table.add_column("Tool")
    table.add_column("Protected")
    for tag in selected:
        table.add_row(
            tag.product,
            tag.version,
            tag.created_utc.strftime("%Y-%m-%d %H:%M:%S"),
            str(len(tag.files)),
            tag.tool,
            "yes" if is_protected(tag, selection, now) else "",
        )

    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    (console or Console()).print(table)
    logger.info("Listed tags", extra={"selected": len(selected), "total": len(inventory.tags)})
    return 0


__all__ = ["list_storage"]
