"""Exit codes and the result-to-exit-status translation.

Subcommands report signed integer results. Only values below 126 reach the
shell unchanged; 126 and 127 are reserved for "crashed" and "no command" the
way POSIX shells use them, and every other result collapses to 255. The
narrowing applies on every platform, including those whose native exit
status is wider than a byte.

Contents:
    * :class:`ExitCode` - IntEnum of the exit codes the tool emits itself.
    * :func:`to_exit_status` - Narrow a subcommand result to a safe exit status.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes with a fixed meaning.

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.NO_COMMAND)
        127
    """

    SUCCESS = 0
    USAGE_ERROR = 2
    UNHANDLED_FAILURE = 126
    NO_COMMAND = 127
    OUT_OF_RANGE = 255


def to_exit_status(result: int | None) -> int:
    """Map a subcommand result onto the exit status reported to the shell.

    Args:
        result: Value returned by the subcommand. None (help, version, root
            group without a subcommand) counts as success.

    Returns:
        ``result`` when it lies in ``[0, 125]``, otherwise 255.

    Examples:
        >>> to_exit_status(0), to_exit_status(125)
        (0, 125)
        >>> [to_exit_status(r) for r in (126, 200, -1, 1000)]
        [255, 255, 255, 255]
        >>> to_exit_status(None)
        0
    """
    if result is None:
        return int(ExitCode.SUCCESS)
    if 0 <= result < ExitCode.UNHANDLED_FAILURE:
        return int(result)
    return int(ExitCode.OUT_OF_RANGE)


__all__ = ["ExitCode", "to_exit_status"]
