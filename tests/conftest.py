"""Shared pytest fixtures for mail sender, settings, and configuration tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from email.message import Message
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, patch

import pytest
from lib_layered_config import Config

from txmail.adapters.email.config import SMTP_PASSWORD_ENV_VAR, EmailConfig, Settings

if TYPE_CHECKING:
    from txmail.adapters.memory.email import EmailSpy


@dataclass
class SmtpSink:
    """Records every message handed to ``aiosmtplib.send``.

    Stands in for the SMTP server: nothing leaves the process, and the
    connection arguments of each send stay inspectable.
    """

    send: AsyncMock

    @property
    def count(self) -> int:
        return self.send.await_count

    @property
    def messages(self) -> list[Message]:
        return [call.args[0] for call in self.send.await_args_list]

    def last_message(self) -> Message:
        return self.messages[-1]

    def last_connection(self) -> dict[str, Any]:
        """Keyword arguments of the most recent send."""
        return dict(self.send.await_args_list[-1].kwargs)

    def fail_with(self, exc: BaseException) -> None:
        """Make every following send raise *exc*."""
        self.send.side_effect = exc


def _part_text(message: Message, content_type: str) -> str:
    """Return the decoded body of the first part with *content_type*."""
    for part in message.walk():
        if part.get_content_type() == content_type:
            payload = part.get_payload(decode=True)
            assert isinstance(payload, bytes)
            return payload.decode(part.get_content_charset() or "utf-8")
    raise AssertionError(f"no {content_type} part in message")


@pytest.fixture
def read_part() -> Callable[[Message, str], str]:
    """Return a helper decoding one MIME part, e.g. ``read_part(msg, "text/html")``."""
    return _part_text


@pytest.fixture(autouse=True)
def no_password_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TXMAIL_SMTP_PASSWORD from leaking into tests."""
    monkeypatch.delenv(SMTP_PASSWORD_ENV_VAR, raising=False)


@pytest.fixture
def smtp_sink() -> Iterator[SmtpSink]:
    """Patch ``aiosmtplib.send`` with a recording sink for the test's duration.

    Example:
        def test_delivers(smtp_sink: SmtpSink, settings: Settings) -> None:
            asyncio.run(send_email("Hi", "a@example.com", "A", "<p>x</p>", settings))
            assert smtp_sink.count == 1
    """
    with patch("aiosmtplib.send", new_callable=AsyncMock) as send:
        yield SmtpSink(send=send)


@pytest.fixture
def email_config_factory() -> Callable[..., EmailConfig]:
    """Build EmailConfig instances with sensible defaults, overridable per test."""

    def _factory(**overrides: Any) -> EmailConfig:
        values: dict[str, Any] = {
            "smtp_server": "smtp.example.org:587",
            "smtp_from_address": "Example <noreply@example.org>",
            "tls_type": "starttls",
        }
        values.update(overrides)
        return EmailConfig(**values)

    return _factory


@pytest.fixture
def settings_factory(email_config_factory: Callable[..., EmailConfig]) -> Callable[..., Settings]:
    """Build Settings with hostname ``example.org`` and an overridable email section."""

    def _factory(**email_overrides: Any) -> Settings:
        return Settings(hostname="example.org", email=email_config_factory(**email_overrides))

    return _factory


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    """Settings with a STARTTLS relay and no credentials."""
    return settings_factory()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Builds actual ``lib_layered_config.Config`` objects without filesystem I/O.
    The second argument (empty dict) represents no source provenance info.
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test."""
    from txmail.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def email_spy() -> EmailSpy:
    """Provide a fresh EmailSpy per test."""
    from txmail.adapters.memory.email import EmailSpy

    return EmailSpy()
