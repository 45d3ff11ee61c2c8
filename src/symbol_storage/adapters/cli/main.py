"""CLI entry point and execution wrapper.

Provides the main entry point used by console scripts and ``python -m``
execution. This is the single recovery boundary of the tool: every
unhandled exception raised while parsing, wiring or running a subcommand is
logged and reported here, and every subcommand result is narrowed to a
shell-safe exit status.

Contents:
    * :func:`main` - Primary entry point for CLI execution.
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click

from symbol_storage.domain.enums import CliMode

from .constants import NO_COMMAND_HINT, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode, to_exit_status

if TYPE_CHECKING:
    from symbol_storage.composition import AppServices

logger = logging.getLogger(__name__)


def _report_failure(exc: BaseException) -> int:
    """Log and print an unhandled exception; return the crash exit code."""
    logger.error("Unhandled failure: %s", exc, exc_info=(type(exc), exc, exc.__traceback__))
    tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(tracebacks_enabled)
    length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
    return int(ExitCode.UNHANDLED_FAILURE)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices], mode: CliMode) -> int:
    """Execute the CLI with exception handling.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        services_factory: Factory function that returns AppServices. Passed via ctx.obj.
        mode: Which command group to run.

    Returns:
        Exit status for the process.
    """
    from .root import cli, shell_command_for, upload_cli

    args = list(argv) if argv is not None else sys.argv[1:]
    if not args:
        click.echo(NO_COMMAND_HINT)
        return int(ExitCode.NO_COMMAND)

    command = upload_cli if mode is CliMode.UPLOAD_ONLY else cli
    try:
        result = command.main(
            args=args,
            prog_name=shell_command_for(mode),
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return to_exit_status(exc.exit_code)
    except click.UsageError as exc:
        exc.show()
        return int(ExitCode.USAGE_ERROR)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        if exc.code is None or isinstance(exc.code, int):
            return to_exit_status(exc.code)
        return _report_failure(exc)
    except BaseException as exc:
        # KeyboardInterrupt and Abort end here too.
        return _report_failure(exc)
    return to_exit_status(result)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
    mode: CliMode = CliMode.FULL,
) -> int:
    """Execute the CLI with error handling and return the exit code.

    Exit statuses:

    * no arguments at all: a usage hint is printed, 127
    * unhandled exception: logged and printed, 126
    * subcommand result ``r``: ``r`` when ``0 <= r < 126``, otherwise 255
    * option parsing error: reported by Click, 2

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        restore_traceback: Whether to restore prior traceback configuration after execution.
        services_factory: Factory function returning AppServices. Required.
            Callers outside the adapters layer should pass ``build_production``.
        mode: :attr:`CliMode.FULL` for every subcommand,
            :attr:`CliMode.UPLOAD_ONLY` for ``new``/``upload``/``create``.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from symbol_storage.composition import build_testing
        >>> main([], services_factory=build_testing)
        Specify --help for a list of available options and commands.
        127
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory, mode=mode)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Only shutdown logging from main thread to avoid killing logging for other threads.
        is_main_thread = threading.current_thread() is threading.main_thread()
        if is_main_thread and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
