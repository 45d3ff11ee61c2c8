"""Value objects describing storage contents and scratch locations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True, slots=True)
class StorageItem:
    """One object of a storage as reported by a listing.

    Attributes:
        key: Slash-separated key relative to the storage root.
        size: Size in bytes.
        modified: Last modification time (timezone-aware, UTC).
    """

    key: str
    size: int
    modified: datetime


@dataclass(frozen=True, slots=True)
class ScratchStorage:
    """Handle of a short-lived local staging storage.

    The directory is not guaranteed to exist: the storage creates it on first
    write and the lifecycle manager removes it after use.
    """

    path: Path


__all__ = [
    "ScratchStorage",
    "StorageItem",
]
