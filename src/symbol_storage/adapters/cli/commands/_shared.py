"""Shared helpers for CLI command modules.

Contents:
    * :func:`open_destination` - Resolve the global destination options and open the storage.
"""

from __future__ import annotations

import logging

from symbol_storage.application.ports import Storage

from ..context import CLIContext

logger = logging.getLogger(__name__)


def open_destination(cli_ctx: CLIContext) -> Storage:
    """Open the destination storage chosen by ``-d`` or ``-a``/``-ar``.

    Raises:
        ConfigurationError: If no destination or both destinations were given.
    """
    destination = cli_ctx.destination()
    logger.debug("Opening destination storage", extra={"destination": destination.describe()})
    return cli_ctx.services.open_storage(destination)


__all__ = ["open_destination"]
