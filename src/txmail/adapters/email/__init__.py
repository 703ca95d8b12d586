"""Email adapter - SMTP email sending.

Structure:
    * :mod:`.config` - Email configuration models and loader
    * :mod:`.server` - ``host:port`` parsing
    * :mod:`.validation` - Address and mailbox validation
    * :mod:`.message` - Plaintext conversion and MIME assembly
    * :mod:`.transport` - Transport selection and the send function

Contents:
    * :class:`.config.EmailConfig` - Email configuration container
    * :class:`.config.Settings` - Hostname plus optional email configuration
    * :func:`.config.load_settings_from_dict` - Config dict loader
    * :func:`.transport.send_email` - Primary email sending interface
"""

from __future__ import annotations

from .config import EmailConfig, Settings, load_settings_from_dict
from .transport import send_email

__all__ = [
    "EmailConfig",
    "Settings",
    "load_settings_from_dict",
    "send_email",
]
