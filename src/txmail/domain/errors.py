"""Domain-specific exceptions for typed error handling at boundaries.

Every failure of :func:`txmail.adapters.email.transport.send_email` surfaces
as one of these types. Configuration faults share :class:`ConfigurationError`
so callers can treat "the operator must fix settings" uniformly while still
telling the individual kinds apart.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when required configuration values are absent, malformed, or
    logically inconsistent.

    Example:
        >>> from txmail.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No email settings configured")
        >>> str(err)
        'No email settings configured'
    """


class EmailNotConfiguredError(ConfigurationError):
    """No ``[email]`` section is configured, so nothing can be sent."""

    def __init__(self, message: str = "No email settings configured") -> None:
        super().__init__(message)


class MissingSmtpHostError(ConfigurationError):
    """The configured SMTP server string has no host part.

    Example:
        >>> str(MissingSmtpHostError(":587"))
        "SMTP server has no host: ':587'"
    """

    def __init__(self, server: str) -> None:
        self.server = server
        super().__init__(f"SMTP server has no host: {server!r}")


class MissingSmtpPortError(ConfigurationError):
    """The configured SMTP server string needs a ``:port`` suffix.

    Example:
        >>> str(MissingSmtpPortError("smtp.example.com"))
        "SMTP server needs a port: 'smtp.example.com'"
    """

    def __init__(self, server: str) -> None:
        self.server = server
        super().__init__(f"SMTP server needs a port: {server!r}")


class InvalidSmtpPortError(ConfigurationError, ValueError):
    """The SMTP port could not be parsed as a TCP port number (1-65535).

    Inherits from ValueError because it is a parse failure.

    Example:
        >>> err = InvalidSmtpPortError("smtp.example.com:abc", "abc")
        >>> err.port
        'abc'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, server: str, port: str) -> None:
        self.server = server
        self.port = port
        super().__init__(f"Invalid SMTP port {port!r} in {server!r}: port must be a number in 1-65535")


class InvalidEmailAddressError(ValueError):
    """Email address validation failure.

    Raised for either the configured sender or the runtime recipient. The
    offending string is kept on :attr:`address` for diagnostics.

    Example:
        >>> from txmail.domain.errors import InvalidEmailAddressError
        >>> err = InvalidEmailAddressError("not-an-email")
        >>> str(err)
        'Invalid email address: not-an-email'
        >>> err.address
        'not-an-email'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Invalid email address: {address}")


class PlaintextConversionError(ValueError):
    """The HTML body could not be converted into a plaintext alternative."""


class DeliveryError(Exception):
    """Email delivery failed at SMTP level.

    Covers every transport-level failure: connection refused, TLS negotiation
    failure, authentication rejected, recipient refused. Callers cannot tell
    transient from permanent failures; retry policy belongs to the caller.

    Example:
        >>> from txmail.domain.errors import DeliveryError
        >>> err = DeliveryError("Connection refused by smtp.example.com:587")
        >>> str(err)
        'Connection refused by smtp.example.com:587'
    """


__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "EmailNotConfiguredError",
    "InvalidEmailAddressError",
    "InvalidSmtpPortError",
    "MissingSmtpHostError",
    "MissingSmtpPortError",
    "PlaintextConversionError",
]
