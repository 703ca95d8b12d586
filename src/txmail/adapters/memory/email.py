"""In-memory email adapters for testing.

Provides email functions that satisfy the same Protocols as production
adapters but perform no SMTP operations.

Contents:
    * :class:`EmailSpy` - Captures send calls for test assertions.
    * :func:`load_settings_from_dict_in_memory` - In-memory settings loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from txmail.domain.errors import DeliveryError, EmailNotConfiguredError

from ..email.config import Settings
from ..email.message import make_message_id
from ..email.validation import validate_address


def _empty_email_list() -> list[dict[str, Any]]:
    """Create an empty typed list for email records."""
    return []


@dataclass
class EmailSpy:
    """Captures email operations for test assertions.

    Each test should create its own EmailSpy instance to avoid cross-test
    pollution. :meth:`send_email` matches the ``SendEmail`` port.

    Attributes:
        sent_emails: One record per successful call, including the generated
            ``message_id``.
        should_fail: When True, sends raise DeliveryError.
        raise_exception: When set, sends raise this exception instead.

    Example:
        >>> import asyncio
        >>> from txmail.adapters.email.config import EmailConfig, Settings
        >>> spy = EmailSpy()
        >>> settings = Settings(
        ...     email=EmailConfig(smtp_server="smtp.test.com:587", smtp_from_address="a@test.com")
        ... )
        >>> asyncio.run(spy.send_email("Hi", "b@test.com", "Bee", "<p>Hello</p>", settings))
        >>> len(spy.sent_emails)
        1
    """

    sent_emails: list[dict[str, Any]] = field(default_factory=_empty_email_list)
    should_fail: bool = False
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent_emails.clear()
        self.raise_exception = None

    async def send_email(
        self,
        subject: str,
        to_email: str,
        to_username: str,
        html: str,
        settings: Settings,
    ) -> None:
        """Validate like the real sender, then record the call.

        Raises:
            EmailNotConfiguredError: ``settings.email`` is None.
            InvalidEmailAddressError: The recipient address is invalid.
            DeliveryError: If should_fail is True.
            Exception: If raise_exception is set, raises that exception.
        """
        if settings.email is None:
            raise EmailNotConfiguredError()
        validate_address(to_email)
        if self.raise_exception is not None:
            raise self.raise_exception
        if self.should_fail:
            raise DeliveryError("EmailSpy configured to fail")
        self.sent_emails.append(
            {
                "subject": subject,
                "to_email": to_email,
                "to_username": to_username,
                "html": html,
                "settings": settings,
                "message_id": make_message_id(settings.hostname),
            }
        )


def load_settings_from_dict_in_memory(config_dict: Mapping[str, Any]) -> Settings:
    """Parse settings from dict using the real Pydantic model."""
    email_raw = config_dict.get("email") or None
    return Settings.model_validate({"hostname": config_dict.get("hostname", "localhost"), "email": email_raw})


__all__ = [
    "EmailSpy",
    "load_settings_from_dict_in_memory",
]
