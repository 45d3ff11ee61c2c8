"""Configuration adapter - layered loading and typed settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - Pydantic model of the ``[storage]`` section
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path
from .settings import StorageSettings, load_storage_settings

__all__ = [
    "StorageSettings",
    "get_config",
    "get_default_config_path",
    "load_storage_settings",
]
