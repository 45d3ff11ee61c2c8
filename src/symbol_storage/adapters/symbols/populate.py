"""Build storage content from source files and directories."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from symbol_storage.application.ports import Storage
from symbol_storage.domain.enums import StorageFormat
from symbol_storage.domain.options import CreateRequest

from .layout import Tag, content_digest, data_key, tag_key, write_storage_format

logger = logging.getLogger(__name__)


def _iter_source_files(sources: tuple[Path, ...]) -> Iterator[Path]:
    """Yield every file of ``sources``; directories are walked recursively in name order."""
    for source in sources:
        if source.is_file():
            yield source
            continue
        for dirpath, dirnames, filenames in os.walk(source):
            dirnames.sort()
            for filename in sorted(filenames):
                yield Path(dirpath) / filename


def populate_storage(storage: Storage, *, storage_format: StorageFormat, request: CreateRequest) -> int:
    """Store every source file and write one tag describing the product version.

    Compression options are recorded in the tag; files are stored as they are.

    Returns:
        0 on success, 1 when a source does not exist or no files were found.
    """
    absent = [str(source) for source in request.sources if not source.exists()]
    if absent:
        logger.error("Source paths do not exist", extra={"sources": absent})
        return 1
    if request.compress_pe or request.compress_windows_pdb:
        logger.warning("Compression is not supported on this platform, files are stored uncompressed")

    if storage.is_empty():
        write_storage_format(storage, storage_format)

    files: list[str] = []
    for path in _iter_source_files(request.sources):
        data = path.read_bytes()
        key = storage_format.apply(data_key(path.name, content_digest(data)))
        if key not in files:
            files.append(key)
        if storage.exists(key):
            continue
        logger.debug("Storing file", extra={"path": str(path), "key": key})
        storage.write(key, data)

    if not files:
        logger.error("No files found in the sources", extra={"sources": [str(s) for s in request.sources]})
        return 1

    tag = Tag(
        tool=request.tool,
        product=request.product,
        version=request.version,
        created_utc=datetime.now(timezone.utc),
        properties=list(request.properties),
        compress_pe=request.compress_pe,
        compress_windows_pdb=request.compress_windows_pdb,
        keep_non_compressed=request.keep_non_compressed,
        files=files,
    )
    storage.write(tag_key(request.product, request.version), tag.to_bytes())
    logger.info(
        "Storage populated",
        extra={"product": request.product, "version": request.version, "data_files": len(files)},
    )
    return 0


__all__ = ["populate_storage"]
