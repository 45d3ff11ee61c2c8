"""Delete tags and the data files that only they reference."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from symbol_storage.application.ports import Storage
from symbol_storage.domain.options import TagSelection

from .inventory import is_protected, load_inventory, matches_selection

logger = logging.getLogger(__name__)


def delete_from_storage(storage: Storage, *, selection: TagSelection) -> int:
    """Delete matching tags older than the safety period.

    Data files are deleted only when no surviving tag references them and
    they are themselves older than the safety period. Protected tags are
    skipped and reported.

    Returns:
        Always 0; backend failures are raised.
    """
    inventory = load_inventory(storage)
    now = datetime.now(timezone.utc)

    doomed: set[str] = set()
    for key, tag in inventory.tags.items():
        if not matches_selection(tag, selection):
            continue
        if is_protected(tag, selection, now):
            logger.info("Skipping tag inside safety period", extra={"tag": key})
            continue
        doomed.add(key)

    survivors = inventory.referenced_files(exclude_tags=frozenset(doomed))
    victims = sorted(
        {
            name
            for key in doomed
            for name in inventory.tags[key].files
            if name not in survivors
            and name in inventory.data_files
            and now - inventory.data_files[name].modified >= selection.safety_period
        }
    )

    for key in sorted(doomed):
        logger.info("Deleting tag", extra={"tag": key})
        storage.delete(key)
    for name in victims:
        logger.debug("Deleting data file", extra={"key": name})
        storage.delete(name)

    logger.info("Deletion finished", extra={"tags": len(doomed), "data_files": len(victims)})
    return 0


__all__ = ["delete_from_storage"]
