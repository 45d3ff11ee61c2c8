"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains value objects and parsing rules that the CLI and the storage
operations share.

Contents:
    * :mod:`.destination` - Destination storage sum type and its resolution
    * :mod:`.enums` - Domain enumerations (StorageFormat, CliMode)
    * :mod:`.errors` - Domain exception types
    * :mod:`.options` - Safety period / property parsing, selection and request objects
    * :mod:`.storage` - Storage listing items and scratch handles
"""

from __future__ import annotations

from .destination import AwsS3Destination, Destination, LocalDestination, resolve_destination
from .enums import CliMode, StorageFormat
from .errors import ConfigurationError, StorageError
from .options import CreateRequest, Properties, TagSelection, parse_days, parse_properties
from .storage import ScratchStorage, StorageItem

__all__ = [
    # Destination
    "AwsS3Destination",
    "Destination",
    "LocalDestination",
    "resolve_destination",
    # Enums
    "CliMode",
    "StorageFormat",
    # Errors
    "ConfigurationError",
    "StorageError",
    # Options
    "CreateRequest",
    "Properties",
    "TagSelection",
    "parse_days",
    "parse_properties",
    # Storage values
    "ScratchStorage",
    "StorageItem",
]
