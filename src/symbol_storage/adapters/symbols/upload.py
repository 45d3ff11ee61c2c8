"""Upload a local storage directory into another storage."""

from __future__ import annotations

import logging
from pathlib import Path

from symbol_storage.adapters.storage.filesystem import FileSystemStorage
from symbol_storage.application.ports import Storage
from symbol_storage.domain.enums import StorageFormat

from .inventory import load_inventory
from .layout import read_storage_format, write_storage_format

logger = logging.getLogger(__name__)


def upload_storage(storage: Storage, *, source: Path, storage_format: StorageFormat) -> int:
    """Copy data files and tags from the storage at ``source`` into ``storage``.

    The source must be consistent: every tag's files present, no broken tags.
    An empty destination is initialised with ``storage_format``; a non-empty
    one keeps its recorded format and keys are converted to it. Data files
    already present in the destination are not copied again.

    Returns:
        0 on success, 1 when the source directory is missing or its storage is inconsistent.
    """
    if not source.is_dir():
        logger.error("Source storage directory does not exist", extra={"source": str(source)})
        return 1
    source_storage = FileSystemStorage(source)
    inventory = load_inventory(source_storage)
    missing = inventory.missing_files()
    if inventory.broken_tags or missing:
        logger.error(
            "Source storage is inconsistent, nothing uploaded",
            extra={"source": str(source), "broken_tags": inventory.broken_tags, "tags_missing_files": sorted(missing)},
        )
        return 1

    if storage.is_empty():
        write_storage_format(storage, storage_format)
        target_format = storage_format
    else:
        target_format = read_storage_format(storage)
    logger.info(
        "Uploading storage",
        extra={"source": str(source), "destination": storage.describe(), "format": target_format.value},
    )

    copied = 0
    for key in inventory.data_files:
        target_key = target_format.apply(key)
        if storage.exists(target_key):
            continue
        storage.write(target_key, source_storage.read(key))
        copied += 1

    for key, tag in inventory.tags.items():
        converted = tag.model_copy(update={"files": [target_format.apply(name) for name in tag.files]})
        storage.write(key, converted.to_bytes())

    logger.info("Upload finished", extra={"data_files": copied, "tags": len(inventory.tags)})
    return 0


__all__ = ["upload_storage"]
