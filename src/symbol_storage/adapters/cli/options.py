"""Option groups shared by several subcommands.

Contents:
    * :func:`filter_options` - Product/version filters plus safety period (list, delete).
    * :func:`format_options` - New storage format (new, upload, create).
    * :func:`property_option` - Repeatable ``key=value`` properties (create).
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar

import rich_click as click

from symbol_storage.domain.enums import StorageFormat
from symbol_storage.domain.options import Properties, TagSelection, parse_days, parse_properties

from .context import get_cli_context

F = TypeVar("F", bound=Callable[..., Any])


def _safety_period_callback(ctx: click.Context, param: click.Parameter, value: str | None) -> timedelta:
    default = get_cli_context(ctx).settings.safety_period
    try:
        return parse_days(value, default)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


def _storage_format_callback(ctx: click.Context, param: click.Parameter, value: str) -> StorageFormat:
    return StorageFormat(value.lower())


def _properties_callback(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> Properties:
    try:
        return parse_properties(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


def filter_options(func: F) -> F:
    """Attach the tag filter group; the command receives ``selection``."""
    decorators = (
        click.option(
            "-fpi",
            "--product-include-filter",
            "include_products",
            multiple=True,
            metavar="PATTERN",
            help="Only products matching the wildcard pattern (repeatable)",
        ),
        click.option(
            "-fpe",
            "--product-exclude-filter",
            "exclude_products",
            multiple=True,
            metavar="PATTERN",
            help="Skip products matching the wildcard pattern (repeatable)",
        ),
        click.option(
            "-fvi",
            "--version-include-filter",
            "include_versions",
            multiple=True,
            metavar="PATTERN",
            help="Only versions matching the wildcard pattern (repeatable)",
        ),
        click.option(
            "-fve",
            "--version-exclude-filter",
            "exclude_versions",
            multiple=True,
            metavar="PATTERN",
            help="Skip versions matching the wildcard pattern (repeatable)",
        ),
        click.option(
            "-sp",
            "--safety-period",
            "safety_period",
            default=None,
            metavar="DAYS",
            callback=_safety_period_callback,
            help="Minimum age in days before files may be deleted [default: from config, 30]",
        ),
    )

    @functools.wraps(func)
    def wrapper(
        *args: Any,
        include_products: tuple[str, ...],
        exclude_products: tuple[str, ...],
        include_versions: tuple[str, ...],
        exclude_versions: tuple[str, ...],
        safety_period: timedelta,
        **kwargs: Any,
    ) -> Any:
        selection = TagSelection(
            include_products=include_products,
            exclude_products=exclude_products,
            include_versions=include_versions,
            exclude_versions=exclude_versions,
            safety_period=safety_period,
        )
        return func(*args, selection=selection, **kwargs)

    decorated: Any = wrapper
    for decorator in reversed(decorators):
        decorated = decorator(decorated)
    return decorated  # type: ignore[no-any-return]


def format_options(func: F) -> F:
    """Attach ``-nsf/--new-storage-format``; the command receives ``storage_format``."""
    return click.option(  # type: ignore[no-any-return]
        "-nsf",
        "--new-storage-format",
        "storage_format",
        type=click.Choice([fmt.value for fmt in StorageFormat], case_sensitive=False),
        default=StorageFormat.NORMAL.value,
        show_default=True,
        callback=_storage_format_callback,
        help="Key casing used when a new storage is created",
    )(func)


def property_option(func: F) -> F:
    """Attach ``-p/--property``; the command receives ``properties``."""
    return click.option(  # type: ignore[no-any-return]
        "-p",
        "--property",
        "properties",
        multiple=True,
        metavar="KEY=VALUE[,KEY=VALUE]",
        callback=_properties_callback,
        help="Property recorded in the tag (repeatable)",
    )(func)


__all__ = ["filter_options", "format_options", "property_option"]
