"""Layered configuration for txmail and its bridge to typed Settings.

Contents:
    * :func:`get_config` - cached ``lib_layered_config.read_config`` call.
    * :func:`load_settings` - ``Config`` to :class:`Settings`.
    * :func:`validate_profile` - reject unsafe profile names.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from txmail import __init__conf__
from txmail.adapters.email.config import Settings, load_settings_from_dict

_DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")


class CachedConfigLoader(Protocol):
    """``get_config`` signature plus the ``cache_clear`` hook tests rely on."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Raise ValueError unless *profile* is a safe profile name.

    Empty names, names longer than *max_length*, and path traversal are all
    refused.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml``, the lowest configuration layer.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG_FILE


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Merge defaults, app, host, user, dotenv, and environment layers.

    Args:
        profile: Optional profile such as ``"production"``, validated before
            any file is read.
        start_dir: Directory where ``.env`` discovery starts; the current
            working directory when None.

    Note:
        Results are cached per ``(profile, start_dir)``; use
        ``get_config.cache_clear()`` to re-read.
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config = cast(CachedConfigLoader, _get_config)


def load_settings(config: Config) -> Settings:
    """Parse the typed :class:`Settings` out of a loaded Config.

    Raises:
        pydantic.ValidationError: When the ``[email]`` section is malformed.
    """
    return load_settings_from_dict(config.as_dict())


__all__ = [
    "CachedConfigLoader",
    "get_config",
    "get_default_config_path",
    "load_settings",
    "validate_profile",
]
