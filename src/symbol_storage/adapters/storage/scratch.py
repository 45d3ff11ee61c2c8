"""Scratch storage lifecycle: unique temporary location, guaranteed removal.

Contents:
    * :func:`acquire` - build a fresh, process-unique scratch handle.
    * :func:`release` - recursively delete a scratch location (idempotent).
    * :func:`scratch_storage` - context manager pairing the two.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from symbol_storage.domain.storage import ScratchStorage

logger = logging.getLogger(__name__)

#: Prefix of every scratch directory name.
SCRATCH_PREFIX = "storage_"


def acquire(root: Path | None = None) -> ScratchStorage:
    """Return a handle for a new scratch location under the temp root.

    The directory itself is not created; the storage writing into it does
    that on first write.

    Args:
        root: Parent directory. Defaults to the platform temp directory.

    Example:
        >>> handle = acquire()
        >>> handle.path.name.startswith(SCRATCH_PREFIX)
        True
        >>> handle.path.exists()
        False
    """
    parent = Path(root) if root is not None else Path(tempfile.gettempdir())
    return ScratchStorage(parent / f"{SCRATCH_PREFIX}{uuid.uuid4()}")


def release(handle: ScratchStorage) -> None:
    """Delete everything at the scratch location; a missing path is fine.

    Example:
        >>> handle = acquire()
        >>> release(handle)
        >>> release(handle)
    """
    path = handle.path
    if path.is_symlink() or path.is_file():
        logger.debug("Removing scratch file", extra={"scratch": str(path)})
        path.unlink()
        return
    if not path.exists():
        return
    logger.debug("Removing scratch storage", extra={"scratch": str(path)})
    shutil.rmtree(path)


@contextmanager
def scratch_storage(root: Path | None = None) -> Iterator[ScratchStorage]:
    """Yield a scratch handle and release it when the block exits, however it exits."""
    handle = acquire(root)
    try:
        yield handle
    finally:
        release(handle)


__all__ = [
    "SCRATCH_PREFIX",
    "acquire",
    "release",
    "scratch_storage",
]
