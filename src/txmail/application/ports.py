"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Module-level functions and bound
methods satisfy these protocols via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``Settings``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import Lang

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.email.config import Settings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadSettings(Protocol):
    """Parse typed Settings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> Settings: ...


class SendEmail(Protocol):
    """Send one transactional HTML email."""

    async def __call__(
        self,
        subject: str,
        to_email: str,
        to_username: str,
        html: str,
        settings: Settings,
    ) -> None: ...


class ResolveLanguage(Protocol):
    """Resolve a language tag to a compiled-in catalog, falling back to English."""

    def __call__(self, tag: str) -> Lang: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "GetConfig",
    "InitLogging",
    "LoadSettings",
    "ResolveLanguage",
    "SendEmail",
]
