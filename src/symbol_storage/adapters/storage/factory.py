"""Construct the storage backend for a resolved destination."""

from __future__ import annotations

import logging

from symbol_storage.application.ports import Storage
from symbol_storage.domain.destination import AwsS3Destination, Destination, LocalDestination

from .aws_s3 import AwsS3Storage
from .filesystem import FileSystemStorage

logger = logging.getLogger(__name__)


def open_storage(destination: Destination) -> Storage:
    """Return the storage implementation matching ``destination``.

    Example:
        >>> from pathlib import Path
        >>> open_storage(LocalDestination(Path("symbols"))).describe()
        'symbols'
    """
    if isinstance(destination, LocalDestination):
        return FileSystemStorage(destination.path)
    if isinstance(destination, AwsS3Destination):
        logger.info("Opening S3 storage", extra={"bucket": destination.bucket, "region": destination.region})
        return AwsS3Storage(destination.bucket, destination.region)
    raise TypeError(f"Unsupported destination: {destination!r}")


__all__ = ["open_storage"]
