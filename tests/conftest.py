"""Shared pytest fixtures for CLI, storage and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from symbol_storage.adapters.memory import MemoryStorageRegistry, OperationSpy
    from symbol_storage.composition import AppServices

_COVERAGE_BASENAME = ".coverage.symbol_storage"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a **local** temp directory.

    coverage.py stores trace data in a SQLite database, which needs
    file-locking semantics network mounts do not reliably provide. This hook
    runs before ``pytest-cov`` creates its ``Coverage()`` object.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Example:
        def test_help(cli_runner: CliRunner) -> None:
            result = cli_runner.invoke(cli, ["--help"])
            assert result.exit_code == 0
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Use this when a test runs the real storage operations against ``tmp_path``.
    """
    from symbol_storage.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Note: Only clears before, not after, to avoid errors when the function
    has been monkeypatched during the test (losing cache_clear method).
    """
    from symbol_storage.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Example:
        def test_region(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"storage": {"aws_s3_region": "us-east-1"}})
            assert config.get("storage.aws_s3_region") == "us-east-1"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def operation_spy() -> OperationSpy:
    """Provide a fresh spy recording storage operation calls."""
    from symbol_storage.adapters.memory import OperationSpy

    return OperationSpy()


@pytest.fixture
def memory_storages() -> MemoryStorageRegistry:
    """Provide a fresh registry of in-memory destination storages."""
    from symbol_storage.adapters.memory import MemoryStorageRegistry

    return MemoryStorageRegistry()


@pytest.fixture
def testing_factory(
    operation_spy: OperationSpy,
    memory_storages: MemoryStorageRegistry,
) -> Callable[[], AppServices]:
    """Return a services factory wired to the in-memory adapters.

    The spy and registry are the ``operation_spy`` and ``memory_storages``
    fixtures, so a test can request them to assert on calls and storages.

    Example:
        def test_new(cli_runner, testing_factory, operation_spy) -> None:
            cli_runner.invoke(cli, ["-d", "x", "new"], obj=testing_factory)
            assert operation_spy.names() == ["new"]
    """
    from symbol_storage.composition import build_testing

    services = build_testing(spy=operation_spy, registry=memory_storages)
    return lambda: services


@pytest.fixture
def inject_services(
    testing_factory: Callable[[], AppServices],
) -> Callable[..., Callable[[], AppServices]]:
    """Return a function replacing individual ports of the testing services.

    Example:
        def test_config(inject_services, config_factory) -> None:
            config = config_factory({"storage": {"safety_period_days": 3}})
            factory = inject_services(get_config=lambda **_: config)
    """

    def _inject(**replacements: Any) -> Callable[[], AppServices]:
        services = dataclasses.replace(testing_factory(), **replacements)
        return lambda: services

    return _inject


@pytest.fixture
def inject_config(
    inject_services: Callable[..., Callable[[], AppServices]],
    config_factory: Callable[[dict[str, Any]], Config],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function wiring a literal configuration into the testing services."""

    def _inject(data: dict[str, Any]) -> Callable[[], AppServices]:
        config = config_factory(data)

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        return inject_services(get_config=_fake_get_config)

    return _inject


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Return a function writing the given lines into a manifest file.

    Lines are joined with ``\\n`` and a trailing newline is added.
    """
    counter = iter(range(1_000_000))

    def _write(lines: list[str]) -> Path:
        manifest = tmp_path / f"manifest-{next(counter)}.txt"
        manifest.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return manifest

    return _write


@pytest.fixture
def symbol_sources(tmp_path: Path) -> Path:
    """Create a small build output tree with two binaries and their PDBs."""
    root = tmp_path / "build"
    (root / "bin").mkdir(parents=True)
    (root / "bin" / "app.exe").write_bytes(b"MZ app")
    (root / "bin" / "app.pdb").write_bytes(b"pdb app")
    (root / "lib.dll").write_bytes(b"MZ lib")
    return root
