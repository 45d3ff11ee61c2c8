"""Storage backed by a local directory tree."""

from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from symbol_storage.domain.errors import StorageError
from symbol_storage.domain.storage import StorageItem


class FileSystemStorage:
    """Key/value storage where each key is a relative file path under ``root``.

    The root directory is created lazily on the first write, so a storage
    can point at a path that does not exist yet.

    Example:
        >>> import tempfile
        >>> root = Path(tempfile.mkdtemp()) / "store"
        >>> storage = FileSystemStorage(root)
        >>> storage.is_empty()
        True
        >>> storage.write("a/b.txt", b"x")
        >>> [item.key for item in storage.iter_items()]
        ['a/b.txt']
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def describe(self) -> str:
        return str(self.root)

    def _path(self, key: str) -> Path:
        parts = [part for part in key.split("/") if part]
        if not parts or any(part in (".", "..") for part in parts):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.root.joinpath(*parts)

    def exists(self, key: str) -> bool:
        return self._path(key).is_file()

    def read(self, key: str) -> bytes:
        try:
            return self._path(key).read_bytes()
        except OSError as exc:
            raise StorageError(f"Cannot read {key} from {self.root}: {exc}") from exc

    def write(self, key: str, data: bytes) -> None:
        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Cannot write {key} to {self.root}: {exc}") from exc

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot delete {key} from {self.root}: {exc}") from exc
        self._prune_empty_parents(path.parent)

    def _prune_empty_parents(self, directory: Path) -> None:
        while directory != self.root and self.root in directory.parents:
            try:
                directory.rmdir()
            except OSError:
                return
            directory = directory.parent

    def iter_items(self, prefix: str = "") -> Iterator[StorageItem]:
        """Yield files whose key starts with ``prefix``, directories walked in name order."""
        if not self.root.is_dir():
            return
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames.sort()
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                key = path.relative_to(self.root).as_posix()
                if not key.startswith(prefix):
                    continue
                stat = path.stat()
                yield StorageItem(
                    key=key,
                    size=stat.st_size,
                    modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                )

    def is_empty(self) -> bool:
        return next(self.iter_items(), None) is None


__all__ = ["FileSystemStorage"]
