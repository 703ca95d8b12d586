"""SMTP email transport.

Provides :func:`send_email`, which assembles a message from the configured
settings and delivers it with a single awaited ``aiosmtplib`` call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from email.errors import MessageError
from email.mime.multipart import MIMEMultipart

import aiosmtplib

from txmail.domain.enums import TransportSecurity
from txmail.domain.errors import DeliveryError, EmailNotConfiguredError

from .config import EmailConfig, Settings
from .message import build_message, html_to_plaintext, make_message_id
from .server import SmtpServer, parse_smtp_server
from .validation import build_mailbox, parse_mailbox

logger = logging.getLogger(__name__)

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "auth",
        "secret",
        "token",
        "key",
        "login",
    }
)


def _sanitize_exception_message(exc: Exception) -> str:
    """Sanitize exception message to prevent credential exposure.

    Returns a generic message when the original exception text contains
    keywords suggesting sensitive data (passwords, credentials, tokens).
    The full exception is preserved in the chain for DEBUG-level logging.

    Example:
        >>> class FakeExc(Exception): pass
        >>> _sanitize_exception_message(FakeExc("Connection failed"))
        'Connection failed'
        >>> _sanitize_exception_message(FakeExc("Auth password rejected"))
        'Email delivery failed. Check SMTP configuration.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return "Email delivery failed. Check SMTP configuration."
    return str(exc) or f"Email delivery failed: {type(exc).__name__}"


def select_transport_security(tls_type: str | None) -> TransportSecurity:
    """Map the configured ``tls_type`` tag to a transport.

    Unknown or absent tags fall back to the unencrypted relay. That is an
    accepted insecure default, so it is logged but never an error.

    Example:
        >>> select_transport_security("starttls")
        <TransportSecurity.STARTTLS: 'starttls'>
        >>> select_transport_security("bogus")
        <TransportSecurity.PLAIN: 'none'>
    """
    if tls_type == TransportSecurity.STARTTLS.value:
        return TransportSecurity.STARTTLS
    if tls_type == TransportSecurity.TLS.value:
        return TransportSecurity.TLS
    if tls_type != TransportSecurity.PLAIN.value:
        logger.warning(
            "Unrecognized tls_type, using unencrypted SMTP",
            extra={"tls_type": tls_type},
        )
    return TransportSecurity.PLAIN


def _build_credentials(config: EmailConfig) -> tuple[str, str] | None:
    """Return (login, password) tuple when both are set, else None."""
    password = config.effective_smtp_password()
    if config.smtp_login is not None and password is not None:
        return (config.smtp_login, password)
    return None


@dataclass(frozen=True, slots=True)
class SmtpTransport:
    """Connection parameters for one send.

    A fresh connection is opened per :meth:`send`; nothing is pooled.
    """

    server: SmtpServer
    security: TransportSecurity
    client_id: str
    credentials: tuple[str, str] | None = None

    @classmethod
    def from_config(cls, config: EmailConfig, *, server: SmtpServer, client_id: str) -> SmtpTransport:
        """Select security and credentials from *config*."""
        return cls(
            server=server,
            security=select_transport_security(config.tls_type),
            client_id=client_id,
            credentials=_build_credentials(config),
        )

    async def send(self, message: MIMEMultipart) -> None:
        """Deliver *message*; the only suspension point of a send.

        Raises:
            aiosmtplib.SMTPException: Protocol-level rejection.
            OSError: Connection or TLS failure.
        """
        username, password = self.credentials if self.credentials is not None else (None, None)
        await aiosmtplib.send(
            message,
            hostname=self.server.host,
            port=self.server.port,
            username=username,
            password=password,
            use_tls=self.security is TransportSecurity.TLS,
            start_tls=self.security is TransportSecurity.STARTTLS,
            local_hostname=self.client_id,
            timeout=None,
        )


async def send_email(
    subject: str,
    to_email: str,
    to_username: str,
    html: str,
    settings: Settings,
) -> None:
    """Send a transactional HTML email with a plaintext alternative.

    All validation happens before any network I/O. Nothing is retried; the
    caller owns retry policy and any deadline.

    Args:
        subject: Email subject line (UTF-8 supported).
        to_email: Recipient address.
        to_username: Recipient display name.
        html: Pre-rendered HTML body, sent verbatim.
        settings: Application settings carrying ``hostname`` and ``email``.

    Raises:
        EmailNotConfiguredError: ``settings.email`` is None.
        MissingSmtpHostError: ``smtp_server`` has no host part.
        MissingSmtpPortError: ``smtp_server`` has no port.
        InvalidSmtpPortError: The port is not a number in 1-65535.
        PlaintextConversionError: The HTML cannot be converted.
        InvalidEmailAddressError: The sender or recipient address is invalid.
        DeliveryError: The SMTP exchange failed for any reason.

    Side Effects:
        Sends email via SMTP. Logs send attempts at INFO level and the
        insecure-transport fallback at WARNING level.
    """
    email_config = settings.email
    if email_config is None:
        raise EmailNotConfiguredError()

    server = parse_smtp_server(email_config.smtp_server)
    plain_text = html_to_plaintext(html)
    sender = parse_mailbox(email_config.smtp_from_address)
    recipient = build_mailbox(to_email, to_username)

    try:
        message = build_message(
            sender=sender,
            recipient=recipient,
            subject=subject,
            plain_text=plain_text,
            html=html,
            message_id=make_message_id(settings.hostname),
        )
    except ValueError as exc:
        raise DeliveryError(f"Cannot build email message: {exc}") from exc

    transport = SmtpTransport.from_config(email_config, server=server, client_id=settings.hostname)

    logger.info(
        "Sending email",
        extra={
            "sender": sender.addr_spec,
            "recipient": recipient.addr_spec,
            "subject": subject,
            "smtp_host": server.host,
            "smtp_port": server.port,
            "security": transport.security.value,
            "authenticated": transport.credentials is not None,
        },
    )

    try:
        await transport.send(message)
    except (aiosmtplib.SMTPException, MessageError, OSError) as exc:
        logger.debug("SMTP delivery failed", exc_info=True)
        raise DeliveryError(_sanitize_exception_message(exc)) from exc

    logger.info(
        "Email sent successfully",
        extra={"recipient": recipient.addr_spec, "message_id": message["Message-ID"]},
    )


__all__ = [
    "SmtpTransport",
    "select_transport_security",
    "send_email",
]
