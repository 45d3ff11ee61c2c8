"""Port behavioral contract tests: in-memory adapters and composition wiring.

Storage contract tests run against both the dict-backed and the directory
storage. Static type conformance is enforced by pyright.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from symbol_storage.adapters.memory import MemoryStorage, MemoryStorageRegistry, OperationSpy, get_config_in_memory
from symbol_storage.adapters.storage import FileSystemStorage
from symbol_storage.composition import AppServices, build_production, build_testing
from symbol_storage.domain.destination import AwsS3Destination, LocalDestination
from symbol_storage.domain.enums import StorageFormat
from symbol_storage.domain.errors import StorageError
from symbol_storage.domain.options import TagSelection

if TYPE_CHECKING:
    from symbol_storage.application.ports import Storage


@pytest.fixture(params=["memory", "filesystem"])
def storage_impl(request: pytest.FixtureRequest, tmp_path: Path) -> Storage:
    """Provide each Storage implementation that runs without network access."""
    if request.param == "memory":
        return MemoryStorage()
    return FileSystemStorage(tmp_path / "store")


# ======================== Storage contract ========================


@pytest.mark.os_agnostic
def test_storage_starts_empty(storage_impl: Storage) -> None:
    """A new storage holds nothing."""
    assert storage_impl.is_empty()
    assert not storage_impl.exists("a/A/a")


@pytest.mark.os_agnostic
def test_storage_write_then_read(storage_impl: Storage) -> None:
    """Written bytes are read back unchanged."""
    storage_impl.write("a/A/a", b"\x00\x01payload")

    assert storage_impl.exists("a/A/a")
    assert storage_impl.read("a/A/a") == b"\x00\x01payload"
    assert not storage_impl.is_empty()


@pytest.mark.os_agnostic
def test_storage_write_overwrites(storage_impl: Storage) -> None:
    """A second write to the same key replaces the content."""
    storage_impl.write("a/A/a", b"first")
    storage_impl.write("a/A/a", b"second")

    assert storage_impl.read("a/A/a") == b"second"
    assert [item.key for item in storage_impl.iter_items()] == ["a/A/a"]


@pytest.mark.os_agnostic
def test_storage_delete_removes_key(storage_impl: Storage) -> None:
    """A deleted key no longer exists and deleting again is harmless."""
    storage_impl.write("a/A/a", b"x")

    storage_impl.delete("a/A/a")
    storage_impl.delete("a/A/a")

    assert not storage_impl.exists("a/A/a")
    assert storage_impl.is_empty()


@pytest.mark.os_agnostic
def test_storage_read_of_missing_key_raises(storage_impl: Storage) -> None:
    """Reading an absent key raises StorageError."""
    with pytest.raises(StorageError):
        storage_impl.read("absent/A/absent")


@pytest.mark.os_agnostic
def test_storage_iter_items_reports_sizes_and_prefix(storage_impl: Storage) -> None:
    """Items carry their size; a prefix narrows the listing."""
    storage_impl.write("_tags/App/App-1.tag", b"{}")
    storage_impl.write("b/B/b", b"bbb")

    sizes = {item.key: item.size for item in storage_impl.iter_items()}

    assert sizes == {"_tags/App/App-1.tag": 2, "b/B/b": 3}
    assert [item.key for item in storage_impl.iter_items("_tags/")] == ["_tags/App/App-1.tag"]


# ======================== In-memory adapters ========================


@pytest.mark.os_agnostic
def test_get_config_in_memory_returns_empty_config() -> None:
    """The in-memory loader yields an empty Config for any profile."""
    config = get_config_in_memory(profile="staging")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_registry_hands_out_one_storage_per_destination() -> None:
    """Equal destinations share a storage; different ones do not."""
    registry = MemoryStorageRegistry()
    local = registry.open_storage(LocalDestination(Path("symbols")))

    assert registry.open_storage(LocalDestination(Path("symbols"))) is local
    assert registry.open_storage(AwsS3Destination("symbols", "eu-west-1")) is not local
    assert local.describe() == "symbols"


@pytest.mark.os_agnostic
def test_spy_records_calls_and_returns_configured_results() -> None:
    """Results default to 0 and can be set per operation."""
    storage = MemoryStorage()
    spy = OperationSpy(results={"upload": 5})

    assert spy.new_storage(storage, storage_format=StorageFormat.UPPER) == 0
    assert spy.upload_storage(storage, source=Path("local"), storage_format=StorageFormat.NORMAL) == 5

    assert spy.names() == ["new", "upload"]
    assert spy.last("upload").options == {"source": Path("local"), "storage_format": StorageFormat.NORMAL}
    assert spy.last("new").storage is storage


@pytest.mark.os_agnostic
def test_spy_raises_configured_failure_after_recording() -> None:
    """Failures are raised, but the call is still recorded."""
    spy = OperationSpy(failures={"validate": StorageError("denied")})

    with pytest.raises(StorageError, match="denied"):
        spy.validate_storage(MemoryStorage(), check_rights=True, fix=False)

    assert spy.names() == ["validate"]


# ======================== Composition ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("factory", [build_production, build_testing])
def test_every_service_is_callable(factory: Callable[[], AppServices]) -> None:
    """Both factories fill every port with a callable."""
    services = factory()

    for field in dataclasses.fields(services):
        assert callable(getattr(services, field.name)), field.name


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """Services cannot be swapped after construction."""
    services = build_testing()

    with pytest.raises(dataclasses.FrozenInstanceError):
        services.new_storage = build_production().new_storage  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_build_testing_uses_given_spy_and_registry() -> None:
    """Operations and storages come from the objects passed in."""
    spy = OperationSpy()
    registry = MemoryStorageRegistry()
    services = build_testing(spy=spy, registry=registry)

    storage = services.open_storage(LocalDestination(Path("x")))
    services.list_storage(storage, selection=TagSelection())

    assert spy.names() == ["list"]
    assert registry.storages[LocalDestination(Path("x"))] is storage
