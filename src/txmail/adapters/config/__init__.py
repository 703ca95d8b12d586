"""Configuration adapter - layered configuration loading.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching and Settings parsing
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path, load_settings

__all__ = [
    "get_config",
    "get_default_config_path",
    "load_settings",
]
