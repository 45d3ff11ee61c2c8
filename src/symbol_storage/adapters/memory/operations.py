"""Recording stand-ins for the storage operations.

Each method matches the signature of the corresponding production operation
so an :class:`OperationSpy` can be wired into ``AppServices`` directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...application.ports import Storage
from ...domain.enums import StorageFormat
from ...domain.options import CreateRequest, TagSelection


@dataclass(frozen=True)
class OperationCall:
    """One recorded operation invocation."""

    name: str
    storage: Storage
    options: dict[str, Any]


@dataclass
class OperationSpy:
    """Captures operation calls and returns configurable results.

    Attributes:
        calls: Recorded invocations in call order.
        results: Result per operation name (``validate``, ``list``, ``delete``,
            ``new``, ``upload``, ``populate``); missing names return 0.
        failures: Exception per operation name, raised after recording.

    Example:
        >>> from symbol_storage.adapters.memory.storage import MemoryStorage
        >>> spy = OperationSpy(results={"new": 1})
        >>> spy.new_storage(MemoryStorage(), storage_format=StorageFormat.LOWER)
        1
        >>> spy.names()
        ['new']
    """

    calls: list[OperationCall] = field(default_factory=list)
    results: dict[str, int] = field(default_factory=dict)
    failures: dict[str, BaseException] = field(default_factory=dict)

    def names(self) -> list[str]:
        return [call.name for call in self.calls]

    def last(self, name: str) -> OperationCall:
        return [call for call in self.calls if call.name == name][-1]

    def _record(self, name: str, storage: Storage, **options: Any) -> int:
        self.calls.append(OperationCall(name=name, storage=storage, options=options))
        if name in self.failures:
            raise self.failures[name]
        return self.results.get(name, 0)

    def validate_storage(self, storage: Storage, *, check_rights: bool, fix: bool) -> int:
        return self._record("validate", storage, check_rights=check_rights, fix=fix)

    def list_storage(self, storage: Storage, *, selection: TagSelection) -> int:
        return self._record("list", storage, selection=selection)

    def delete_from_storage(self, storage: Storage, *, selection: TagSelection) -> int:
        return self._record("delete", storage, selection=selection)

    def new_storage(self, storage: Storage, *, storage_format: StorageFormat) -> int:
        return self._record("new", storage, storage_format=storage_format)

    def upload_storage(self, storage: Storage, *, source: Path, storage_format: StorageFormat) -> int:
        return self._record("upload", storage, source=source, storage_format=storage_format)

    def populate_storage(self, storage: Storage, *, storage_format: StorageFormat, request: CreateRequest) -> int:
        return self._record("populate", storage, storage_format=storage_format, request=request)


__all__ = [
    "OperationCall",
    "OperationSpy",
]
