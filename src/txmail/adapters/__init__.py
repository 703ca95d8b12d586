"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems (configuration, SMTP, logging).

Contents:
    * :mod:`.config` - Layered configuration loading
    * :mod:`.email` - Email sending via SMTP
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
