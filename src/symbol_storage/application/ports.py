"""Application ports: Protocol definitions for adapter functions and storages.

Each callable Protocol defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Module-level adapter functions
satisfy these protocols through structural subtyping (PEP 544).

Storage operations return an integer result: ``0`` on success and a small
positive number on a logical failure (for example an inconsistency that could
not be fixed). Anything unexpected is raised, never encoded as a result.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that the layer contracts remain
    satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.destination import Destination
from ..domain.enums import StorageFormat
from ..domain.options import CreateRequest, TagSelection
from ..domain.storage import ScratchStorage, StorageItem

if TYPE_CHECKING:
    from lib_layered_config import Config


class Storage(Protocol):
    """Key/value object store holding a symbol server storage."""

    def describe(self) -> str: ...

    def exists(self, key: str) -> bool: ...

    def read(self, key: str) -> bytes: ...

    def write(self, key: str, data: bytes) -> None: ...

    def delete(self, key: str) -> None: ...

    def iter_items(self, prefix: str = ...) -> Iterator[StorageItem]: ...

    def is_empty(self) -> bool: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class OpenStorage(Protocol):
    """Construct the storage backend for a destination."""

    def __call__(self, destination: Destination) -> Storage: ...


class OpenScratchStorage(Protocol):
    """Acquire a scratch storage location released when the scope exits."""

    def __call__(self) -> AbstractContextManager[ScratchStorage]: ...


class ValidateStorage(Protocol):
    """Check a storage for inconsistencies and optionally fix them."""

    def __call__(self, storage: Storage, *, check_rights: bool, fix: bool) -> int: ...


class ListStorage(Protocol):
    """Print metadata of the tags matching a selection."""

    def __call__(self, storage: Storage, *, selection: TagSelection) -> int: ...


class DeleteFromStorage(Protocol):
    """Delete tags matching a selection and the data files only they reference."""

    def __call__(self, storage: Storage, *, selection: TagSelection) -> int: ...


class NewStorage(Protocol):
    """Initialize an empty storage with the given format."""

    def __call__(self, storage: Storage, *, storage_format: StorageFormat) -> int: ...


class UploadStorage(Protocol):
    """Upload a local storage directory into another storage."""

    def __call__(self, storage: Storage, *, source: Path, storage_format: StorageFormat) -> int: ...


class PopulateStorage(Protocol):
    """Build storage content from source files."""

    def __call__(self, storage: Storage, *, storage_format: StorageFormat, request: CreateRequest) -> int: ...


__all__ = [
    "DeleteFromStorage",
    "GetConfig",
    "InitLogging",
    "ListStorage",
    "NewStorage",
    "OpenScratchStorage",
    "OpenStorage",
    "PopulateStorage",
    "Storage",
    "UploadStorage",
    "ValidateStorage",
]
