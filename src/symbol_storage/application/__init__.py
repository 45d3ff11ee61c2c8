"""Application layer - use cases and port definitions.

Contains the composite create-and-upload use case and the port protocols
that define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Protocol definitions for storages and adapter functions
    * :mod:`.create_upload` - Scratch-build then upload use case
"""

from __future__ import annotations

from .create_upload import create_and_upload
from .ports import (
    DeleteFromStorage,
    GetConfig,
    InitLogging,
    ListStorage,
    NewStorage,
    OpenScratchStorage,
    OpenStorage,
    PopulateStorage,
    Storage,
    UploadStorage,
    ValidateStorage,
)

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
    "create_and_upload",
]
