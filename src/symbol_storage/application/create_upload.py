"""Composite create-and-upload use case.

Builds a storage in a scratch directory and, only when that succeeds, uploads
the scratch storage into the destination. The scratch directory is released
by the context manager on every exit path, including exceptions raised by
either step; those exceptions still propagate to the caller.

Contents:
    * :func:`create_and_upload` - run the two steps as one pseudo-transaction.
"""

from __future__ import annotations

import logging

from ..domain.destination import LocalDestination
from ..domain.enums import StorageFormat
from ..domain.options import CreateRequest
from .ports import OpenScratchStorage, OpenStorage, PopulateStorage, Storage, UploadStorage

logger = logging.getLogger(__name__)


def create_and_upload(
    destination: Storage,
    request: CreateRequest,
    *,
    storage_format: StorageFormat,
    open_scratch: OpenScratchStorage,
    open_storage: OpenStorage,
    populate: PopulateStorage,
    upload: UploadStorage,
) -> int:
    """Populate a scratch storage from ``request`` and upload it to ``destination``.

    Args:
        destination: Already opened destination storage.
        request: Product, version, sources and options for the populate step.
        storage_format: Format used when the destination storage is new.
        open_scratch: Scratch lifecycle manager.
        open_storage: Storage factory used to open the scratch directory.
        populate: Populate operation (building step).
        upload: Upload operation (handoff step).

    Returns:
        The populate result when it is non-zero, otherwise the upload result.
    """
    with open_scratch() as scratch:
        logger.info("Building temporary storage", extra={"scratch": str(scratch.path), "product": request.product})
        scratch_storage = open_storage(LocalDestination(scratch.path))
        result = populate(scratch_storage, storage_format=StorageFormat.NORMAL, request=request)
        if result != 0:
            logger.warning("Temporary storage creation failed, skipping upload", extra={"result": result})
            return result

        logger.info("Uploading temporary storage", extra={"destination": destination.describe()})
        return upload(destination, source=scratch.path, storage_format=storage_format)


__all__ = ["create_and_upload"]
