"""On-storage layout: format marker, data-file keys, and tag metadata files.

Layout of a storage root::

    .storage-format                                   format token (absent: normal)
    <name>/<digest>/<name>                            data files
    _tags/<product>/<product>-<version>-<uuid>.tag    JSON tag metadata

Contents:
    * :class:`Tag` - validated tag metadata model (pydantic, orjson).
    * :func:`read_storage_format` / :func:`write_storage_format` - format marker.
    * :func:`data_key` / :func:`tag_key` - key construction.
    * :func:`is_data_key` / :func:`is_tag_key` - key classification.
"""

from __future__ import annotations

import hashlib
import uuid
from datetime import datetime

import orjson
from pydantic import BaseModel, ConfigDict, Field

from symbol_storage.application.ports import Storage
from symbol_storage.domain.enums import StorageFormat

FORMAT_MARKER_KEY = ".storage-format"
TAGS_PREFIX = "_tags/"
TAG_SUFFIX = ".tag"
DIGEST_LENGTH = 32


class Tag(BaseModel):
    """Metadata describing one published product version.

    Example:
        >>> from datetime import timezone
        >>> tag = Tag(tool="symbol-storage/1.0.0", product="App", version="1.0",
        ...           created_utc=datetime(2024, 1, 2, tzinfo=timezone.utc), files=["a.pdb/0A/a.pdb"])
        >>> Tag.from_bytes(tag.to_bytes()) == tag
        True
    """

    model_config = ConfigDict(frozen=True)

    tool: str
    product: str
    version: str
    created_utc: datetime
    properties: list[tuple[str, str]] = Field(default_factory=list)
    compress_pe: bool = False
    compress_windows_pdb: bool = False
    keep_non_compressed: bool = False
    files: list[str] = Field(default_factory=list)

    def to_bytes(self) -> bytes:
        return orjson.dumps(self.model_dump(mode="json"), option=orjson.OPT_INDENT_2)

    @classmethod
    def from_bytes(cls, data: bytes) -> Tag:
        return cls.model_validate(orjson.loads(data))


def read_storage_format(storage: Storage) -> StorageFormat:
    """Return the format recorded in the storage, ``normal`` when unmarked.

    Raises:
        ValueError: If the marker holds an unknown token.
    """
    if not storage.exists(FORMAT_MARKER_KEY):
        return StorageFormat.NORMAL
    token = storage.read(FORMAT_MARKER_KEY).decode("utf-8").strip().lower()
    return StorageFormat(token)


def write_storage_format(storage: Storage, storage_format: StorageFormat) -> None:
    storage.write(FORMAT_MARKER_KEY, f"{storage_format.value}\n".encode())


def content_digest(data: bytes) -> str:
    """Return the identifier used as middle component of a data-file key.

    Example:
        >>> content_digest(b"")
        'E3B0C44298FC1C149AFBF4C8996FB924'
    """
    return hashlib.sha256(data).hexdigest()[:DIGEST_LENGTH].upper()


def data_key(file_name: str, digest: str) -> str:
    """Return ``<name>/<digest>/<name>``.

    Example:
        >>> data_key("App.pdb", "0A1B")
        'App.pdb/0A1B/App.pdb'
    """
    return f"{file_name}/{digest}/{file_name}"


def tag_key(product: str, version: str) -> str:
    """Return a fresh, unique tag key for a product version."""
    return f"{TAGS_PREFIX}{product}/{product}-{version}-{uuid.uuid4()}{TAG_SUFFIX}"


def is_tag_key(key: str) -> bool:
    return key.startswith(TAGS_PREFIX) and key.endswith(TAG_SUFFIX)


def is_data_key(key: str) -> bool:
    """Return True for keys shaped like ``<name>/<digest>/<name>``.

    Example:
        >>> is_data_key("a.pdb/0A/a.pdb"), is_data_key("_tags/a/a-1.tag"), is_data_key(".storage-format")
        (True, False, False)
        >>> is_data_key("_tags/0A/_tags")
        True
    """
    if key == FORMAT_MARKER_KEY or is_tag_key(key):
        return False
    parts = key.split("/")
    return len(parts) == 3 and all(parts) and parts[0].lower() == parts[2].lower()


__all__ = [
    "FORMAT_MARKER_KEY",
    "TAGS_PREFIX",
    "Tag",
    "content_digest",
    "data_key",
    "is_data_key",
    "is_tag_key",
    "read_storage_format",
    "tag_key",
    "write_storage_format",
]
