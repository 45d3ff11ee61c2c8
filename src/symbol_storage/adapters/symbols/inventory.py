"""Storage inventory: tags, data files, and their consistency relations.

Contents:
    * :class:`Inventory` - snapshot of tags and data files of one storage.
    * :func:`load_inventory` - scan a storage into an inventory.
    * :func:`matches_selection` - product/version wildcard filtering of tags.
"""

from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass, field
from datetime import datetime

from pydantic import ValidationError

from symbol_storage.application.ports import Storage
from symbol_storage.domain.options import TagSelection
from symbol_storage.domain.storage import StorageItem

from .layout import Tag, is_data_key, is_tag_key

logger = logging.getLogger(__name__)


@dataclass
class Inventory:
    """Tags and data files found in a storage.

    Attributes:
        tags: Parsed tags by tag key.
        broken_tags: Tag keys whose content could not be parsed.
        data_files: Data files by key.
    """

    tags: dict[str, Tag] = field(default_factory=dict)
    broken_tags: list[str] = field(default_factory=list)
    data_files: dict[str, StorageItem] = field(default_factory=dict)

    def missing_files(self) -> dict[str, list[str]]:
        """Return tag key -> referenced data keys absent from the storage."""
        missing: dict[str, list[str]] = {}
        for key, tag in self.tags.items():
            absent = [name for name in tag.files if name not in self.data_files]
            if absent:
                missing[key] = absent
        return missing

    def referenced_files(self, exclude_tags: frozenset[str] = frozenset()) -> set[str]:
        """Return data keys referenced by any tag not in ``exclude_tags``."""
        return {name for key, tag in self.tags.items() if key not in exclude_tags for name in tag.files}

    def orphaned_files(self) -> list[str]:
        """Return data keys no tag references, in key order."""
        referenced = self.referenced_files()
        return sorted(key for key in self.data_files if key not in referenced)


def load_inventory(storage: Storage) -> Inventory:
    """Scan ``storage`` and parse every tag file."""
    inventory = Inventory()
    for item in storage.iter_items():
        if is_tag_key(item.key):
            try:
                inventory.tags[item.key] = Tag.from_bytes(storage.read(item.key))
            except (ValueError, ValidationError) as exc:
                logger.warning("Cannot parse tag", extra={"tag": item.key, "error": str(exc)})
                inventory.broken_tags.append(item.key)
        elif is_data_key(item.key):
            inventory.data_files[item.key] = item
    logger.debug(
        "Storage inventory loaded",
        extra={"tags": len(inventory.tags), "data_files": len(inventory.data_files)},
    )
    return inventory


def _matches_any(value: str, patterns: tuple[str, ...]) -> bool:
    lowered = value.lower()
    return any(fnmatch.fnmatchcase(lowered, pattern.lower()) for pattern in patterns)


def matches_selection(tag: Tag, selection: TagSelection) -> bool:
    """Return True when ``tag`` passes the product and version filters.

    A dimension passes when the value matches an include pattern (or no
    include patterns are given) and matches no exclude pattern. Both
    dimensions must pass. Wildcards are case-insensitive ``fnmatch`` patterns.

    Example:
        >>> from datetime import timezone
        >>> tag = Tag(tool="t", product="dotTrace", version="2024.1",
        ...           created_utc=datetime(2024, 1, 1, tzinfo=timezone.utc))
        >>> matches_selection(tag, TagSelection(include_products=("dot*",)))
        True
        >>> matches_selection(tag, TagSelection(exclude_versions=("2024.*",)))
        False
    """
    for value, include, exclude in (
        (tag.product, selection.include_products, selection.exclude_products),
        (tag.version, selection.include_versions, selection.exclude_versions),
    ):
        if include and not _matches_any(value, include):
            return False
        if _matches_any(value, exclude):
            return False
    return True


def is_protected(tag: Tag, selection: TagSelection, now: datetime) -> bool:
    """Return True when ``tag`` is younger than the safety period."""
    return now - tag.created_utc < selection.safety_period


__all__ = [
    "Inventory",
    "is_protected",
    "load_inventory",
    "matches_selection",
]
