"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks (CLI, configuration, storage backends, logging).

Contents:
    * :mod:`.config` - Configuration loading and the ``[storage]`` settings
    * :mod:`.storage` - Filesystem and AWS S3 storages, scratch lifecycle
    * :mod:`.symbols` - Storage operations behind the subcommands
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
