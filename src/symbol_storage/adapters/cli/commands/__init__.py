"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI groups.

Contents:
    * Storage commands: :mod:`.validate_cmd`, :mod:`.list_cmd`, :mod:`.delete_cmd`,
      :mod:`.new_cmd`, :mod:`.upload_cmd`, :mod:`.create_cmd`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .create_cmd import cli_create
from .delete_cmd import cli_delete
from .info import cli_info
from .list_cmd import cli_list
from .new_cmd import cli_new
from .upload_cmd import cli_upload
from .validate_cmd import cli_validate

__all__ = [
    "cli_create",
    "cli_delete",
    "cli_info",
    "cli_list",
    "cli_new",
    "cli_upload",
    "cli_validate",
]
