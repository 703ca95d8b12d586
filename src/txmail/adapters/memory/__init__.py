"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no SMTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.email` - In-memory email adapters (EmailSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .email import EmailSpy, load_settings_from_dict_in_memory
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from txmail.application.ports import GetConfig, InitLogging, LoadSettings, SendEmail

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_load_settings: LoadSettings = load_settings_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_send_email: SendEmail = EmailSpy().send_email

__all__ = [
    "EmailSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_settings_from_dict_in_memory",
]
