"""Composition root: pick SMTP-backed or in-memory adapters for every port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config

# Email services
from ..adapters.email.config import load_settings_from_dict
from ..adapters.email.transport import send_email

# Logging services
from ..adapters.logging.setup import init_logging
from ..domain.language import resolve_language

# Static conformance assertions, checked by pyright
if TYPE_CHECKING:
    from ..adapters.memory.email import EmailSpy
    from ..application.ports import (
        GetConfig,
        InitLogging,
        LoadSettings,
        ResolveLanguage,
        SendEmail,
    )

    _assert_get_config: GetConfig = get_config
    _assert_load_settings: LoadSettings = load_settings_from_dict
    _assert_send_email: SendEmail = send_email
    _assert_resolve_language: ResolveLanguage = resolve_language
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The five txmail services, wired once and shared read-only."""

    get_config: GetConfig
    load_settings: LoadSettings
    send_email: SendEmail
    resolve_language: ResolveLanguage
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services that read real configuration files and talk to the SMTP relay."""
    return AppServices(
        get_config=get_config,
        load_settings=load_settings_from_dict,
        send_email=send_email,
        resolve_language=resolve_language,
        init_logging=init_logging,
    )


def build_testing(*, spy: EmailSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional EmailSpy instance for capturing sends. When None, a
            fresh EmailSpy is created. Pass your own spy to assert on
            captured emails in tests.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        EmailSpy,
        get_config_in_memory,
        init_logging_in_memory,
        load_settings_from_dict_in_memory,
    )

    email_spy = spy if spy is not None else EmailSpy()

    return AppServices(
        get_config=get_config_in_memory,
        load_settings=load_settings_from_dict_in_memory,
        send_email=email_spy.send_email,
        resolve_language=resolve_language,
        init_logging=init_logging_in_memory,
    )


__all__ = ["AppServices", "build_production", "build_testing"]
