"""Parse the configured ``host:port`` SMTP server string."""

from __future__ import annotations

from typing import NamedTuple

from txmail.domain.errors import InvalidSmtpPortError, MissingSmtpHostError, MissingSmtpPortError

_MIN_PORT = 1
_MAX_PORT = 65535


class SmtpServer(NamedTuple):
    """Parsed SMTP relay address."""

    host: str
    port: int


def parse_smtp_server(server: str) -> SmtpServer:
    """Split *server* into host and port.

    The string is split on ``:``; the first part is the host and the second
    the port. Anything after a second colon is ignored.

    Args:
        server: Configured value such as ``"smtp.example.com:587"``.

    Returns:
        The parsed host and port.

    Raises:
        MissingSmtpHostError: The host part is empty.
        MissingSmtpPortError: There is no port part.
        InvalidSmtpPortError: The port is not a number in 1-65535.

    Example:
        >>> parse_smtp_server("smtp.example.com:587")
        SmtpServer(host='smtp.example.com', port=587)
        >>> parse_smtp_server("smtp.example.com")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        MissingSmtpPortError: SMTP server needs a port: 'smtp.example.com'
    """
    parts = server.strip().split(":")
    host = parts[0]
    if not host:
        raise MissingSmtpHostError(server)
    if len(parts) < 2:
        raise MissingSmtpPortError(server)

    raw_port = parts[1]
    if not raw_port.isdigit() or not raw_port.isascii():
        raise InvalidSmtpPortError(server, raw_port)
    port = int(raw_port)
    if not _MIN_PORT <= port <= _MAX_PORT:
        raise InvalidSmtpPortError(server, raw_port)

    return SmtpServer(host=host, port=port)


__all__ = ["SmtpServer", "parse_smtp_server"]
