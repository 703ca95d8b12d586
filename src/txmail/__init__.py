"""Public package surface: the mail sender, the language resolver, and wiring.

Routes imports through the architectural layers:
- Domain exports: language resolution and error types
- Adapter exports: the SMTP sender and settings models
- Composition exports: wired service containers
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.config.loader import get_config, load_settings
from .adapters.email.config import EmailConfig, Settings, load_settings_from_dict
from .adapters.email.transport import send_email

# Composition exports (wired adapters)
from .composition import AppServices, build_production, build_testing

# Domain exports
from .domain.enums import Lang, TransportSecurity
from .domain.errors import (
    ConfigurationError,
    DeliveryError,
    EmailNotConfiguredError,
    InvalidEmailAddressError,
    InvalidSmtpPortError,
    MissingSmtpHostError,
    MissingSmtpPortError,
    PlaintextConversionError,
)
from .domain.language import resolve_language

__all__ = [
    "AppServices",
    "ConfigurationError",
    "DeliveryError",
    "EmailConfig",
    "EmailNotConfiguredError",
    "InvalidEmailAddressError",
    "InvalidSmtpPortError",
    "Lang",
    "MissingSmtpHostError",
    "MissingSmtpPortError",
    "PlaintextConversionError",
    "Settings",
    "TransportSecurity",
    "build_production",
    "build_testing",
    "get_config",
    "load_settings",
    "load_settings_from_dict",
    "print_info",
    "resolve_language",
    "send_email",
]
