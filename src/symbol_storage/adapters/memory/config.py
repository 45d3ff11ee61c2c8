"""In-memory configuration adapter for testing.

Returns a Config built from literal data instead of reading files, so the
CLI falls back to the built-in storage settings.
"""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


__all__ = ["get_config_in_memory"]
