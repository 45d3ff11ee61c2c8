"""Module entry stories ensuring `python -m` mirrors the console scripts."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import lib_cli_exit_tools
import pytest

from symbol_storage import __init__conf__, entry
from symbol_storage.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_without_arguments_exits_127(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args prints the hint and exits 127."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("symbol_storage.__main__", run_name="__main__")

    assert exc.value.code == 127
    assert cli_mod.NO_COMMAND_HINT in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_module_entry_reports_missing_destination(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """A subcommand without destination is reported by lib_cli_exit_tools."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "validate"], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("symbol_storage.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code == 126
    assert "ConfigurationError" in plain_err or "No destination" in plain_err


@pytest.mark.os_agnostic
def test_module_entry_traceback_flag_prints_full_traceback(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback via module entry prints complete traceback on error."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "--traceback", "validate"])
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("symbol_storage.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exc.value.code == 126
    assert "Traceback (most recent call last)" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """CLI facade exports all registered commands."""
    expected_commands = {
        "cli_create",
        "cli_delete",
        "cli_info",
        "cli_list",
        "cli_new",
        "cli_upload",
        "cli_validate",
    }
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """Verify `python -m symbol_storage --help` works via subprocess."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "symbol_storage", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click outputs Unicode that cp1252 can't decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """Verify `python -m symbol_storage --version` outputs version."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "symbol_storage", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the full CLI."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out
    assert "validate" in captured.out


@pytest.mark.os_agnostic
def test_entry_main_creates_local_storage(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """entry.main() runs new against a real directory."""
    target = tmp_path / "symbols"
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "-d", str(target), "new"])

    assert entry.main() == 0
    assert target.is_dir()


@pytest.mark.os_agnostic
def test_entry_main_upload_rejects_maintenance_commands(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """entry.main_upload() does not know validate."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.upload_shell_command, "-d", str(tmp_path), "validate"])

    assert entry.main_upload() == 2


@pytest.mark.os_agnostic
def test_entry_main_upload_without_arguments_exits_127(monkeypatch: pytest.MonkeyPatch) -> None:
    """entry.main_upload() shares the no-argument contract."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.upload_shell_command])

    assert entry.main_upload() == 127
