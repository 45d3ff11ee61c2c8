"""Symbol storage operations executed by the CLI subcommands.

Every operation takes an opened storage plus keyword options and returns an
integer result (0 success, 1 logical failure); backend failures are raised.

Contents:
    * :mod:`.layout` - Keys, format marker, and tag metadata model
    * :mod:`.inventory` - Storage scan, consistency relations, tag filtering
    * :mod:`.validate` - Consistency check and repair
    * :mod:`.listing` - Tag listing
    * :mod:`.delete` - Tag and data file deletion
    * :mod:`.new` - Empty storage initialisation
    * :mod:`.upload` - Storage to storage upload
    * :mod:`.populate` - Storage creation from source files
"""

from __future__ import annotations

from .delete import delete_from_storage
from .listing import list_storage
from .new import new_storage
from .populate import populate_storage
from .upload import upload_storage
from .validate import validate_storage

__all__ = [
    "delete_from_storage",
    "list_storage",
    "new_storage",
    "populate_storage",
    "upload_storage",
    "validate_storage",
]
