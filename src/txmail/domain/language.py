"""Resolve a user's language preference to a compiled-in catalog."""

from __future__ import annotations

from .enums import Lang

DEFAULT_LANG = Lang.EN


def resolve_language(tag: str) -> Lang:
    """Return the catalog for *tag*, falling back to English.

    Total: unknown, empty, or malformed tags never raise.

    Example:
        >>> resolve_language("fr")
        <Lang.FR: 'fr'>
        >>> resolve_language("xx-nonexistent") is resolve_language("en")
        True
    """
    return Lang.from_language_id(tag) or DEFAULT_LANG


__all__ = ["DEFAULT_LANG", "resolve_language"]
