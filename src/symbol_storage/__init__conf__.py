"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by hand; ``version`` is the
single string that changes on every release.

Contents:
    * Package identity (``name``, ``title``, ``version``, ``homepage``).
    * Console script names (``shell_command``, ``upload_shell_command``).
    * lib_layered_config identifiers (``LAYEREDCONF_*``).
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "symbol_storage"
title = "Symbol server storage management: validate, list, delete, create and upload symbol storages"
version = "1.4.0"
homepage = "https://github.com/symbol-storage/symbol-storage"
author = "Symbol Storage Maintainers"
author_email = "maintainers@symbol-storage.dev"
shell_command = "symbol-storage"
upload_shell_command = "symbol-storage-upload"

#: Vendor, application and slug used by lib_layered_config to derive the
#: platform-specific configuration directories.
LAYEREDCONF_VENDOR = "symbol-storage"
LAYEREDCONF_APP = "Symbol Storage"
LAYEREDCONF_SLUG = "symbol-storage"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for symbol_storage:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
        ("upload_shell_command", upload_shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
