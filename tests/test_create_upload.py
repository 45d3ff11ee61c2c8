"""Create-and-upload stories: build in scratch, hand off only on success, always clean up."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import pytest

from symbol_storage.adapters.memory import MemoryStorage, OperationSpy
from symbol_storage.adapters.storage import open_storage, scratch_storage
from symbol_storage.application import create_and_upload
from symbol_storage.application.ports import Storage
from symbol_storage.domain.enums import StorageFormat
from symbol_storage.domain.options import CreateRequest
from symbol_storage.domain.storage import ScratchStorage

REQUEST = CreateRequest(tool="symbol-storage/1.4.0", product="App", version="1.0", sources=(Path("bin"),))


class WritingPopulate:
    """Populate stand-in that writes into the scratch storage before answering."""

    def __init__(self, result: int = 0, error: BaseException | None = None) -> None:
        self.result = result
        self.error = error
        self.scratch_dirs: list[Path] = []

    def __call__(self, storage: Storage, *, storage_format: StorageFormat, request: CreateRequest) -> int:
        storage.write("app.pdb/ABC/app.pdb", b"data")
        self.scratch_dirs.append(Path(storage.describe()))
        if self.error is not None:
            raise self.error
        return self.result


class RecordingScratch:
    """Scratch lifecycle under ``root`` that remembers every handle it gave out."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.handles: list[ScratchStorage] = []

    @contextmanager
    def __call__(self) -> Iterator[ScratchStorage]:
        with scratch_storage(self.root) as handle:
            self.handles.append(handle)
            yield handle


def _run(
    scratch: RecordingScratch,
    populate: Any,
    spy: OperationSpy,
    destination: Storage,
    storage_format: StorageFormat = StorageFormat.NORMAL,
) -> int:
    return create_and_upload(
        destination,
        REQUEST,
        storage_format=storage_format,
        open_scratch=scratch,
        open_storage=open_storage,
        populate=populate,
        upload=spy.upload_storage,
    )


@pytest.mark.os_agnostic
def test_successful_build_hands_off_scratch_directory_and_cleans_up(tmp_path: Path) -> None:
    """Upload receives the scratch path and the requested format; the path is gone afterwards."""
    scratch = RecordingScratch(tmp_path)
    populate = WritingPopulate()
    spy = OperationSpy(results={"upload": 7})
    destination = MemoryStorage(name="dest")

    result = _run(scratch, populate, spy, destination, StorageFormat.UPPER)

    assert result == 7
    upload = spy.last("upload")
    assert upload.storage is destination
    assert upload.options["source"] == scratch.handles[0].path
    assert upload.options["storage_format"] is StorageFormat.UPPER
    assert populate.scratch_dirs == [scratch.handles[0].path]
    assert not scratch.handles[0].path.exists()


@pytest.mark.os_agnostic
def test_failed_build_skips_handoff_and_propagates_result(tmp_path: Path) -> None:
    """A non-zero populate result is returned and upload never runs."""
    scratch = RecordingScratch(tmp_path)
    spy = OperationSpy()

    result = _run(scratch, WritingPopulate(result=3), spy, MemoryStorage())

    assert result == 3
    assert spy.names() == []
    assert not scratch.handles[0].path.exists()


@pytest.mark.os_agnostic
def test_build_exception_propagates_and_leaves_no_scratch_directory(tmp_path: Path) -> None:
    """An exception while building surfaces unchanged after cleanup."""
    scratch = RecordingScratch(tmp_path)
    spy = OperationSpy()

    with pytest.raises(OSError, match="disk full"):
        _run(scratch, WritingPopulate(error=OSError("disk full")), spy, MemoryStorage())

    assert spy.names() == []
    assert not scratch.handles[0].path.exists()
    assert list(tmp_path.iterdir()) == []


@pytest.mark.os_agnostic
def test_handoff_exception_propagates_and_leaves_no_scratch_directory(tmp_path: Path) -> None:
    """An exception while uploading surfaces unchanged after cleanup."""
    scratch = RecordingScratch(tmp_path)
    spy = OperationSpy(failures={"upload": ConnectionError("bucket unreachable")})

    with pytest.raises(ConnectionError):
        _run(scratch, WritingPopulate(), spy, MemoryStorage())

    assert spy.names() == ["upload"]
    assert not scratch.handles[0].path.exists()


@pytest.mark.os_agnostic
def test_build_always_uses_normal_format_in_scratch(tmp_path: Path) -> None:
    """The scratch storage is built in normal format; the requested one applies on upload."""
    spy = OperationSpy()
    scratch = RecordingScratch(tmp_path)

    _run(scratch, spy.populate_storage, spy, MemoryStorage(), StorageFormat.LOWER)

    populate = spy.last("populate")
    assert populate.options["storage_format"] is StorageFormat.NORMAL
    assert populate.options["request"] is REQUEST
    assert spy.last("upload").options["storage_format"] is StorageFormat.LOWER


@pytest.mark.os_agnostic
def test_each_run_acquires_exactly_one_fresh_scratch_location(tmp_path: Path) -> None:
    """Two runs use two different scratch paths."""
    scratch = RecordingScratch(tmp_path)
    spy = OperationSpy()

    _run(scratch, WritingPopulate(), spy, MemoryStorage())
    _run(scratch, WritingPopulate(), spy, MemoryStorage())

    assert len(scratch.handles) == 2
    assert scratch.handles[0].path != scratch.handles[1].path
