"""In-memory storage adapters for testing.

Contents:
    * :class:`MemoryStorage` - dict-backed implementation of the Storage port.
    * :class:`MemoryStorageRegistry` - OpenStorage implementation handing out
      one MemoryStorage per destination.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ...domain.destination import Destination
from ...domain.errors import StorageError
from ...domain.storage import StorageItem


@dataclass
class MemoryStorage:
    """Storage keeping objects in a dict.

    Example:
        >>> storage = MemoryStorage()
        >>> storage.write("a/b", b"1")
        >>> storage.read("a/b")
        b'1'
        >>> storage.is_empty()
        False
    """

    name: str = "memory"
    objects: dict[str, tuple[bytes, datetime]] = field(default_factory=dict)

    def describe(self) -> str:
        return self.name

    def exists(self, key: str) -> bool:
        return key in self.objects

    def read(self, key: str) -> bytes:
        try:
            return self.objects[key][0]
        except KeyError as exc:
            raise StorageError(f"No such key in {self.name}: {key}") from exc

    def write(self, key: str, data: bytes) -> None:
        self.objects[key] = (bytes(data), datetime.now(timezone.utc))

    def delete(self, key: str) -> None:
        self.objects.pop(key, None)

    def iter_items(self, prefix: str = "") -> Iterator[StorageItem]:
        for key in sorted(self.objects):
            if key.startswith(prefix):
                data, modified = self.objects[key]
                yield StorageItem(key=key, size=len(data), modified=modified)

    def is_empty(self) -> bool:
        return not self.objects


@dataclass
class MemoryStorageRegistry:
    """Hands out the same MemoryStorage for equal destinations.

    Attributes:
        storages: Storages created so far, by destination.
    """

    storages: dict[Destination, MemoryStorage] = field(default_factory=dict)

    def open_storage(self, destination: Destination) -> MemoryStorage:
        if destination not in self.storages:
            self.storages[destination] = MemoryStorage(name=destination.describe())
        return self.storages[destination]


__all__ = [
    "MemoryStorage",
    "MemoryStorageRegistry",
]
