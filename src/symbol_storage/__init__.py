"""Public package surface exposing metadata, configuration and the storage types.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: destinations, storage formats, errors
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    AwsS3Destination,
    ConfigurationError,
    LocalDestination,
    StorageError,
    StorageFormat,
)

__all__ = [
    "AwsS3Destination",
    "ConfigurationError",
    "LocalDestination",
    "StorageError",
    "StorageFormat",
    "get_config",
    "print_info",
]
