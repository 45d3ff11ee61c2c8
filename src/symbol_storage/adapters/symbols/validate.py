"""Storage consistency check with optional repair."""

from __future__ import annotations

import logging

from symbol_storage.application.ports import Storage
from symbol_storage.domain.errors import StorageError

from .inventory import Inventory, load_inventory
from .layout import read_storage_format

logger = logging.getLogger(__name__)


def _check_rights(storage: Storage, inventory: Inventory) -> int:
    """Return the number of data files that cannot be read."""
    unreadable = 0
    for key in inventory.data_files:
        try:
            storage.read(key)
        except StorageError as exc:
            logger.error("Data file is not readable", extra={"key": key, "error": str(exc)})
            unreadable += 1
    return unreadable


def _find_issues(inventory: Inventory) -> tuple[list[str], dict[str, list[str]], list[str]]:
    missing = inventory.missing_files()
    for tag, absent in missing.items():
        logger.error("Tag references missing data files", extra={"tag": tag, "missing": absent})
    orphans = inventory.orphaned_files()
    for key in orphans:
        logger.warning("Data file is not referenced by any tag", extra={"key": key})
    return list(inventory.broken_tags), missing, orphans


def validate_storage(storage: Storage, *, check_rights: bool, fix: bool) -> int:
    """Validate tags against data files; with ``fix``, remove what is broken.

    Broken tags and tags with missing data files are deleted first, then every
    data file no remaining tag references.

    Returns:
        0 when the storage is consistent (or was repaired), 1 otherwise.
    """
    storage_format = read_storage_format(storage)
    logger.info("Validating storage", extra={"storage": storage.describe(), "format": storage_format.value})

    inventory = load_inventory(storage)
    broken, missing, orphans = _find_issues(inventory)
    issues = len(broken) + len(missing) + len(orphans)

    if issues and fix:
        for key in [*broken, *missing]:
            logger.info("Deleting inconsistent tag", extra={"tag": key})
            storage.delete(key)
            inventory.tags.pop(key, None)
        for key in inventory.orphaned_files():
            logger.info("Deleting unreferenced data file", extra={"key": key})
            storage.delete(key)
            inventory.data_files.pop(key, None)
        issues = 0

    unreadable = _check_rights(storage, inventory) if check_rights else 0

    logger.info(
        "Validation finished",
        extra={
            "tags": len(inventory.tags),
            "data_files": len(inventory.data_files),
            "issues": issues,
            "unreadable": unreadable,
        },
    )
    return 0 if issues == 0 and unreadable == 0 else 1


__all__ = ["validate_storage"]
