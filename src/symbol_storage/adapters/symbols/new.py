"""Initialize an empty storage."""

from __future__ import annotations

import logging

from symbol_storage.application.ports import Storage
from symbol_storage.domain.enums import StorageFormat

from .layout import write_storage_format

logger = logging.getLogger(__name__)


def new_storage(storage: Storage, *, storage_format: StorageFormat) -> int:
    """Write the format marker into an empty storage.

    Returns:
        0 on success, 1 when the storage already holds objects.
    """
    if not storage.is_empty():
        logger.error("Storage is not empty", extra={"storage": storage.describe()})
        return 1
    write_storage_format(storage, storage_format)
    logger.info("Created empty storage", extra={"storage": storage.describe(), "format": storage_format.value})
    return 0


__all__ = ["new_storage"]
