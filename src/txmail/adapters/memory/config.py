"""In-memory configuration adapter for testing.

Provides a configuration loader that satisfies the GetConfig protocol but
never touches the filesystem.
"""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an in-memory Config holding only the default hostname."""
    return Config({"hostname": "localhost"}, {})


__all__ = ["get_config_in_memory"]
