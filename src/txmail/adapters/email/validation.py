"""Email address validation shared between production and test adapters.

Raises domain exceptions (InvalidEmailAddressError) rather than
library-specific exceptions.
"""

from __future__ import annotations

from email.headerregistry import Address
from email.utils import parseaddr

from btx_lib_mail import validate_email_address

from txmail.domain.errors import InvalidEmailAddressError


def validate_address(address: str) -> None:
    """Validate a bare email address.

    Args:
        address: Email address to validate.

    Raises:
        InvalidEmailAddressError: When the email address is invalid.

    Example:
        >>> validate_address("valid@example.com")  # no exception
        >>> validate_address("invalid")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidEmailAddressError: Invalid email address: invalid
    """
    if not address.strip():
        raise InvalidEmailAddressError(address)
    try:
        validate_email_address(address)
    except ValueError as e:
        raise InvalidEmailAddressError(address) from e


def build_mailbox(address: str, display_name: str = "") -> Address:
    """Return a validated mailbox for *address* with an optional display name.

    Line breaks in *display_name* are folded into single spaces so a user
    name can never start a new header line.

    Raises:
        InvalidEmailAddressError: When the address is invalid.
    """
    validate_address(address)
    display_name = " ".join(display_name.splitlines())
    try:
        return Address(display_name=display_name, addr_spec=address)
    except (ValueError, IndexError) as e:
        raise InvalidEmailAddressError(address) from e


def parse_mailbox(value: str) -> Address:
    """Parse ``addr`` or ``Name <addr>`` into a validated mailbox.

    Used for the configured sender, which may carry a display name.

    Raises:
        InvalidEmailAddressError: Carrying the full configured string.

    Example:
        >>> str(parse_mailbox("Site Admin <admin@example.com>"))
        'Site Admin <admin@example.com>'
        >>> parse_mailbox("admin@example.com").addr_spec
        'admin@example.com'
    """
    display_name, addr_spec = parseaddr(value)
    if not addr_spec:
        raise InvalidEmailAddressError(value)
    try:
        return build_mailbox(addr_spec, display_name)
    except InvalidEmailAddressError as e:
        raise InvalidEmailAddressError(value) from e


__all__ = ["build_mailbox", "parse_mailbox", "validate_address"]
