"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.enums` - Domain enumerations (TransportSecurity, Lang)
    * :mod:`.errors` - Domain exception types
    * :mod:`.language` - Language tag resolution
"""

from __future__ import annotations

from .enums import Lang, TransportSecurity
from .errors import (
    ConfigurationError,
    DeliveryError,
    EmailNotConfiguredError,
    InvalidEmailAddressError,
    InvalidSmtpPortError,
    MissingSmtpHostError,
    MissingSmtpPortError,
    PlaintextConversionError,
)
from .language import DEFAULT_LANG, resolve_language

__all__ = [
    # Enums
    "Lang",
    "TransportSecurity",
    # Language
    "DEFAULT_LANG",
    "resolve_language",
    # Errors
    "ConfigurationError",
    "DeliveryError",
    "EmailNotConfiguredError",
    "InvalidEmailAddressError",
    "InvalidSmtpPortError",
    "MissingSmtpHostError",
    "MissingSmtpPortError",
    "PlaintextConversionError",
]
