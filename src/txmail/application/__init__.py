"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    GetConfig,
    InitLogging,
    LoadSettings,
    ResolveLanguage,
    SendEmail,
)

__all__ = [
    "GetConfig",
    "InitLogging",
    "LoadSettings",
    "ResolveLanguage",
    "SendEmail",
]
