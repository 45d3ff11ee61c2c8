"""Type-safe domain enums for storage formats and CLI modes."""

from __future__ import annotations

from enum import Enum


class StorageFormat(str, Enum):
    """Key casing applied to data files of a newly created storage.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        NORMAL: Keys keep the casing of the source file names.
        LOWER: Keys are lower-cased (case-insensitive servers).
        UPPER: Keys are upper-cased.

    Example:
        >>> StorageFormat.NORMAL.value
        'normal'
        >>> StorageFormat.LOWER == "lower"
        True
        >>> StorageFormat.UPPER.apply("Foo.pdb/ABC/Foo.pdb")
        'FOO.PDB/ABC/FOO.PDB'
    """

    NORMAL = "normal"
    LOWER = "lower"
    UPPER = "upper"

    def apply(self, key: str) -> str:
        """Return ``key`` with this format's casing."""
        if self is StorageFormat.LOWER:
            return key.lower()
        if self is StorageFormat.UPPER:
            return key.upper()
        return key


class CliMode(str, Enum):
    """Which subcommands a console script exposes.

    Attributes:
        FULL: Every maintenance and publishing subcommand.
        UPLOAD_ONLY: Only the publishing subcommands (new, upload, create).

    Example:
        >>> CliMode.UPLOAD_ONLY.value
        'upload-only'
    """

    FULL = "full"
    UPLOAD_ONLY = "upload-only"


__all__ = [
    "CliMode",
    "StorageFormat",
]
