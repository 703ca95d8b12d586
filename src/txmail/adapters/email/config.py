"""Email configuration models and loader.

Provides the EmailConfig and Settings Pydantic models for validated,
immutable settings and the loader function to create them from
configuration dictionaries.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator

SMTP_PASSWORD_ENV_VAR = "TXMAIL_SMTP_PASSWORD"


class EmailConfig(BaseModel):
    """Validated, immutable email configuration.

    ``smtp_server`` and ``smtp_from_address`` are kept as raw strings here;
    :func:`txmail.adapters.email.transport.send_email` parses and validates
    them so that each fault surfaces as its own domain error.

    Example:
        >>> config = EmailConfig(
        ...     smtp_server="smtp.example.com:587",
        ...     smtp_from_address="noreply@example.com",
        ...     tls_type="starttls",
        ... )
        >>> config.smtp_server
        'smtp.example.com:587'
        >>> config.smtp_login is None
        True
    """

    model_config = ConfigDict(frozen=True)

    smtp_server: str
    smtp_from_address: str
    tls_type: str = "none"
    smtp_login: str | None = None
    smtp_password: str | None = None

    @field_validator("smtp_login", "smtp_password", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Coerce empty or whitespace-only strings to None.

        Treats empty strings from config files as "not configured" rather than
        explicit empty values, which prevents auth attempts with empty
        credentials.
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("tls_type", mode="before")
    @classmethod
    def _normalize_tls_type(cls, v: Any) -> str:
        """Lowercase the tag; None becomes the plain-relay tag."""
        if v is None:
            return "none"
        return str(v).strip().lower()

    def effective_smtp_password(self) -> str | None:
        """Return the SMTP password, preferring the environment override.

        ``TXMAIL_SMTP_PASSWORD`` wins over the configured value when it is
        set and non-empty.

        Example:
            >>> EmailConfig(
            ...     smtp_server="smtp.example.com:587",
            ...     smtp_from_address="noreply@example.com",
            ...     smtp_password="from-file",
            ... ).effective_smtp_password()  # doctest: +SKIP
            'from-file'
        """
        from_env = os.environ.get(SMTP_PASSWORD_ENV_VAR, "")
        if from_env.strip():
            return from_env
        return self.smtp_password

    def __repr__(self) -> str:
        """Return string representation with smtp_password redacted.

        Example:
            >>> config = EmailConfig(
            ...     smtp_server="smtp.example.com:587",
            ...     smtp_from_address="noreply@example.com",
            ...     smtp_password="secret123",
            ... )
            >>> "secret123" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "smtp_password" and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"EmailConfig({', '.join(fields)})"


class Settings(BaseModel):
    """Application settings consumed by the mail sender.

    ``hostname`` is the serving domain: it names the client in EHLO/HELO and
    forms the right-hand side of every Message-ID.
    """

    model_config = ConfigDict(frozen=True)

    hostname: str = "localhost"
    email: EmailConfig | None = None


def load_settings_from_dict(config_dict: Mapping[str, Any]) -> Settings:
    """Load Settings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed Settings
    model. A missing or empty ``[email]`` section means email is not
    configured (``email`` is None).

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        Validated settings.

    Raises:
        pydantic.ValidationError: When present values are malformed.

    Example:
        >>> settings = load_settings_from_dict(
        ...     {
        ...         "hostname": "example.org",
        ...         "email": {
        ...             "smtp_server": "smtp.example.org:465",
        ...             "smtp_from_address": "noreply@example.org",
        ...             "tls_type": "tls",
        ...         },
        ...     }
        ... )
        >>> settings.email.tls_type
        'tls'
        >>> load_settings_from_dict({}).email is None
        True
    """
    raw: dict[str, Any] = {}

    hostname: Any = config_dict.get("hostname")
    if hostname is not None:
        raw["hostname"] = hostname

    email_section: Any = config_dict.get("email")
    if isinstance(email_section, Mapping):
        if email_section:
            raw["email"] = dict(cast(Mapping[str, Any], email_section))
    elif email_section is not None:
        # Let Pydantic reject non-mapping sections (e.g. "email": "invalid")
        raw["email"] = email_section

    return Settings.model_validate(raw)


__all__ = [
    "SMTP_PASSWORD_ENV_VAR",
    "EmailConfig",
    "Settings",
    "load_settings_from_dict",
]
