"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no cloud bucket, no config files.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.storage` - Dict-backed storages (MemoryStorage, MemoryStorageRegistry)
    * :mod:`.operations` - Recording storage operations (OperationSpy)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .operations import OperationCall, OperationSpy
from .storage import MemoryStorage, MemoryStorageRegistry

# Static conformance assertions
if TYPE_CHECKING:
    from symbol_storage.application.ports import (
        DeleteFromStorage,
        GetConfig,
        ListStorage,
        NewStorage,
        OpenStorage,
        PopulateStorage,
        Storage,
        UploadStorage,
        ValidateStorage,
    )

    _spy = OperationSpy()
    _assert_get_config: GetConfig = get_config_in_memory
    _assert_open_storage: OpenStorage = MemoryStorageRegistry().open_storage
    _assert_storage: Storage = MemoryStorage()
    _assert_validate: ValidateStorage = _spy.validate_storage
    _assert_list: ListStorage = _spy.list_storage
    _assert_delete: DeleteFromStorage = _spy.delete_from_storage
    _assert_new: NewStorage = _spy.new_storage
    _assert_upload: UploadStorage = _spy.upload_storage
    _assert_populate: PopulateStorage = _spy.populate_storage

__all__ = [
    "MemoryStorage",
    "MemoryStorageRegistry",
    "OperationCall",
    "OperationSpy",
    "get_config_in_memory",
]
