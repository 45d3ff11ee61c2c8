"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Storage backends and scratch lifecycle
from ..adapters.storage import open_storage, scratch_storage

# Storage operations
from ..adapters.symbols import (
    delete_from_storage,
    list_storage,
    new_storage,
    populate_storage,
    upload_storage,
    validate_storage,
)

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import MemoryStorageRegistry, OperationSpy
    from ..application.ports import (
        DeleteFromStorage,
        GetConfig,
        InitLogging,
        ListStorage,
        NewStorage,
        OpenScratchStorage,
        OpenStorage,
        PopulateStorage,
        UploadStorage,
        ValidateStorage,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_open_storage: OpenStorage = open_storage
    _assert_scratch_storage: OpenScratchStorage = scratch_storage
    _assert_validate_storage: ValidateStorage = validate_storage
    _assert_list_storage: ListStorage = list_storage
    _assert_delete_storage: DeleteFromStorage = delete_from_storage
    _assert_new_storage: NewStorage = new_storage
    _assert_upload_storage: UploadStorage = upload_storage
    _assert_populate_storage: PopulateStorage = populate_storage


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    open_storage: OpenStorage
    scratch_storage: OpenScratchStorage
    validate_storage: ValidateStorage
    list_storage: ListStorage
    delete_storage: DeleteFromStorage
    new_storage: NewStorage
    upload_storage: UploadStorage
    populate_storage: PopulateStorage


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        open_storage=open_storage,
        scratch_storage=scratch_storage,
        validate_storage=validate_storage,
        list_storage=list_storage,
        delete_storage=delete_from_storage,
        new_storage=new_storage,
        upload_storage=upload_storage,
        populate_storage=populate_storage,
    )


def build_testing(
    *,
    spy: OperationSpy | None = None,
    registry: MemoryStorageRegistry | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Storages live in memory and the storage operations are recorded by an
    :class:`OperationSpy` instead of being executed. Configuration is empty,
    so the built-in ``[storage]`` defaults apply. Logging and the scratch
    lifecycle stay the production ones: commands bind log context through
    the lib_log_rich runtime, and scratch directories are plain temp dirs.

    Args:
        spy: Spy capturing operation calls. A fresh one is created when None;
            pass your own to assert on the calls.
        registry: Registry handing out memory storages per destination.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import MemoryStorageRegistry, OperationSpy, get_config_in_memory

    operations = spy if spy is not None else OperationSpy()
    storages = registry if registry is not None else MemoryStorageRegistry()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging,
        open_storage=storages.open_storage,
        scratch_storage=scratch_storage,
        validate_storage=operations.validate_storage,
        list_storage=operations.list_storage,
        delete_storage=operations.delete_from_storage,
        new_storage=operations.new_storage,
        upload_storage=operations.upload_storage,
        populate_storage=operations.populate_storage,
    )


__all__ = [
    # Configuration
    "get_config",
    # Logging
    "init_logging",
    # Storage
    "open_storage",
    "scratch_storage",
    # Operations
    "delete_from_storage",
    "list_storage",
    "new_storage",
    "populate_storage",
    "upload_storage",
    "validate_storage",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
