"""CLI package providing the command-line interface.

Re-exports all public symbols from submodules for convenient access.

Contents:
    * Click context helpers and traceback state management from :mod:`.context`
    * Root command groups from :mod:`.root`
    * Entry point from :mod:`.main`
    * Exit status translation from :mod:`.exit_codes`
    * Path argument expansion from :mod:`.paths`
    * All command functions from :mod:`.commands`

System Role:
    Acts as the public facade for the CLI subsystem. Consumers import from here
    and remain insulated from internal module boundaries.
"""

from __future__ import annotations

from .commands import (
    cli_create,
    cli_delete,
    cli_info,
    cli_list,
    cli_new,
    cli_upload,
    cli_validate,
)
from .constants import CLICK_CONTEXT_SETTINGS, NO_COMMAND_HINT, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode, to_exit_status
from .main import main
from .paths import resolve_paths
from .root import build_cli, cli, upload_cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "NO_COMMAND_HINT",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "CLIContext",
    "get_cli_context",
    "store_cli_context",
    # Exit status
    "ExitCode",
    "to_exit_status",
    # Path arguments
    "resolve_paths",
    # Root commands
    "build_cli",
    "cli",
    "upload_cli",
    # Entry point
    "main",
    # Commands
    "cli_create",
    "cli_delete",
    "cli_info",
    "cli_list",
    "cli_new",
    "cli_upload",
    "cli_validate",
]
