"""Expansion of positional path arguments and ``@manifest`` tokens."""

from __future__ import annotations

from collections.abc import Iterable

INDIRECTION_MARKER = "@"


def resolve_paths(tokens: Iterable[str]) -> list[str]:
    """Expand indirection tokens in place, keeping encounter order.

    A token starting with ``@`` names a manifest file. Its non-empty lines
    replace the token; every other token is kept as is. Manifests are read
    as UTF-8 and a leading byte-order mark is ignored.

    Raises:
        OSError: If a manifest cannot be opened or read.

    Example:
        >>> resolve_paths(["a.pdb", "b.dll"])
        ['a.pdb', 'b.dll']
    """
    resolved: list[str] = []
    for token in tokens:
        if not token.startswith(INDIRECTION_MARKER):
            resolved.append(token)
            continue
        with open(token[len(INDIRECTION_MARKER) :], encoding="utf-8-sig") as manifest:
            for line in manifest:
                path = line.rstrip("\r\n")
                if path:
                    resolved.append(path)
    return resolved


__all__ = ["INDIRECTION_MARKER", "resolve_paths"]
