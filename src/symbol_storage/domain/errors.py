"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or ambiguous configuration.

    Raised when the destination storage cannot be resolved to exactly one
    backend, or when configuration values are malformed. Not caught by the
    subcommands; the CLI boundary reports it as an unhandled failure.

    Example:
        >>> from symbol_storage.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No destination storage specified")
        >>> str(err)
        'No destination storage specified'
    """


class StorageError(Exception):
    """A storage backend could not complete a read, write, or delete.

    Example:
        >>> from symbol_storage.domain.errors import StorageError
        >>> err = StorageError("Access denied for s3://symbols/_tags")
        >>> str(err)
        'Access denied for s3://symbols/_tags'
    """


__all__ = [
    "ConfigurationError",
    "StorageError",
]
