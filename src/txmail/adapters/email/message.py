"""Build the outbound MIME message.

Contents:
    * :func:`html_to_plaintext` - plaintext alternative from pre-rendered HTML.
    * :func:`make_message_id` - globally unique Message-ID for one send.
    * :func:`build_message` - multipart/alternative message with both parts.
"""

from __future__ import annotations

import uuid
from email.headerregistry import Address
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, formatdate

import html2text

from txmail.domain.errors import PlaintextConversionError


def html_to_plaintext(html: str) -> str:
    """Convert *html* to a plaintext rendering without re-wrapping lines.

    Line wrapping is left to the MIME layer, so the converter runs with an
    unbounded body width.

    Raises:
        PlaintextConversionError: When the markup cannot be parsed.

    Example:
        >>> html_to_plaintext("<p>Hello <b>there</b></p>").strip()
        'Hello **there**'
    """
    converter = html2text.HTML2Text()
    converter.body_width = 0
    try:
        return converter.handle(html)
    except (AssertionError, ValueError) as e:
        raise PlaintextConversionError(f"Cannot convert HTML body to plaintext: {e}") from e


def make_message_id(hostname: str) -> str:
    """Return ``<uuid4@hostname>``.

    Example:
        >>> make_message_id("example.org").endswith("@example.org>")
        True
    """
    return f"<{uuid.uuid4()}@{hostname}>"


def _format_mailbox(mailbox: Address) -> str:
    # formataddr RFC 2047-encodes non-ASCII display names but leaves the address intact
    return formataddr((mailbox.display_name, mailbox.addr_spec))


def build_message(
    *,
    sender: Address,
    recipient: Address,
    subject: str,
    plain_text: str,
    html: str,
    message_id: str,
) -> MIMEMultipart:
    """Assemble a multipart/alternative message (plain first, then HTML).

    Both parts are UTF-8 and base64 encoded, so the HTML part decodes to
    exactly the string that was passed in.

    Raises:
        ValueError: *subject* contains a line break, which would let it
            inject further headers.
    """
    if "\r" in subject or "\n" in subject:
        raise ValueError("subject must not contain line breaks")
    message = MIMEMultipart("alternative")
    message["From"] = _format_mailbox(sender)
    message["To"] = _format_mailbox(recipient)
    message["Subject"] = subject
    message["Message-ID"] = message_id
    message["Date"] = formatdate(localtime=False)
    message.attach(MIMEText(plain_text, "plain", "utf-8"))
    message.attach(MIMEText(html, "html", "utf-8"))
    return message


__all__ = ["build_message", "html_to_plaintext", "make_message_id"]
