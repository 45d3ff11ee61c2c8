"""Pure parsing helpers and value objects for subcommand options."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

Properties = tuple[tuple[str, str], ...]
"""Ordered ``(key, value)`` pairs stored in tag metadata."""


def parse_days(days: str | None, default: timedelta) -> timedelta:
    """Interpret an optional whole number of days as a duration.

    Args:
        days: Raw option value, or None when the option was not given.
        default: Duration returned when ``days`` is None.

    Returns:
        ``default`` for None, otherwise ``timedelta(days=int(days))``.

    Raises:
        ValueError: If ``days`` is not a non-negative integer.

    Examples:
        >>> parse_days(None, timedelta(days=30)).days
        30
        >>> parse_days("7", timedelta(days=30)).days
        7
        >>> parse_days("-1", timedelta(days=30))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: safety period must be a non-negative number of days: '-1'
    """
    if days is None:
        return default
    text = days.strip()
    if not text.isdigit():
        raise ValueError(f"safety period must be a non-negative number of days: {days!r}")
    try:
        return timedelta(days=int(text))
    except OverflowError as exc:
        raise ValueError(f"safety period is too large: {days!r}") from exc


def parse_properties(values: Iterable[str]) -> Properties:
    """Parse ``key=value[,key=value...]`` strings into ordered pairs.

    Each value may hold several comma-separated assignments; the option may
    be repeated. Only the first ``=`` of an assignment separates key from
    value. Empty segments (``"a=1,,b=2"``) are ignored.

    Raises:
        ValueError: If an assignment has no ``=`` or an empty key.

    Examples:
        >>> parse_properties(["a=1,b=2", "c=3"])
        (('a', '1'), ('b', '2'), ('c', '3'))
        >>> parse_properties(["build=x=y"])
        (('build', 'x=y'),)
    """
    result: list[tuple[str, str]] = []
    for raw in values:
        for assignment in raw.split(","):
            if not assignment:
                continue
            key, sep, value = assignment.partition("=")
            if not sep:
                raise ValueError(f"Invalid property {assignment!r}: expected <key>=<value>")
            key = key.strip()
            if not key:
                raise ValueError(f"Invalid property {assignment!r}: key is empty")
            result.append((key, value))
    return tuple(result)


@dataclass(frozen=True, slots=True)
class TagSelection:
    """Product/version wildcard filters plus the safety period for young files.

    The combination semantics of the patterns belong to the storage
    operations; this object only carries them.
    """

    include_products: tuple[str, ...] = ()
    exclude_products: tuple[str, ...] = ()
    include_versions: tuple[str, ...] = ()
    exclude_versions: tuple[str, ...] = ()
    safety_period: timedelta = timedelta(days=30)


@dataclass(frozen=True, slots=True)
class CreateRequest:
    """Everything the populate operation needs to build a storage."""

    tool: str
    product: str
    version: str
    sources: tuple[Path, ...]
    compress_pe: bool = False
    compress_windows_pdb: bool = False
    keep_non_compressed: bool = False
    properties: Properties = field(default_factory=tuple)


__all__ = [
    "CreateRequest",
    "Properties",
    "TagSelection",
    "parse_days",
    "parse_properties",
]
