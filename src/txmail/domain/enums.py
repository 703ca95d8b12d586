"""Type-safe domain enums for transport security and translation catalogs."""

from __future__ import annotations

from enum import Enum


class TransportSecurity(str, Enum):
    """How the SMTP connection is secured.

    Values mirror the ``tls_type`` configuration tags. Inherits from str to
    allow direct string comparison.

    Attributes:
        PLAIN: Unencrypted relay. Used for unknown or absent tags.
        STARTTLS: Plaintext connection upgraded with STARTTLS (RFC 3207).
        TLS: Implicit TLS from the first byte (RFC 8314).

    Example:
        >>> TransportSecurity.STARTTLS.value
        'starttls'
        >>> TransportSecurity.TLS == "tls"
        True
    """

    PLAIN = "none"
    STARTTLS = "starttls"
    TLS = "tls"


class Lang(str, Enum):
    """Compiled-in translation catalogs, keyed by normalized language id.

    The member set is fixed at build time. Language ids are lowercase with
    an underscore separating the region or script subtag.

    Example:
        >>> Lang.EN.value
        'en'
        >>> Lang.PT_BR == "pt_br"
        True
        >>> Lang.from_language_id("DE")
        <Lang.DE: 'de'>
        >>> Lang.from_language_id("xx") is None
        True
    """

    AR = "ar"
    BG = "bg"
    CA = "ca"
    CS = "cs"
    CY = "cy"
    DA = "da"
    DE = "de"
    EL = "el"
    EN = "en"
    EO = "eo"
    ES = "es"
    ET = "et"
    EU = "eu"
    FA = "fa"
    FI = "fi"
    FR = "fr"
    GA = "ga"
    GL = "gl"
    HR = "hr"
    HU = "hu"
    ID = "id"
    IT = "it"
    JA = "ja"
    KO = "ko"
    LT = "lt"
    NL = "nl"
    OC = "oc"
    PL = "pl"
    PT = "pt"
    PT_BR = "pt_br"
    RU = "ru"
    SK = "sk"
    SV = "sv"
    TH = "th"
    TR = "tr"
    UK = "uk"
    VI = "vi"
    ZH = "zh"
    ZH_HANT = "zh_hant"

    @property
    def language_id(self) -> str:
        """Return the catalog's language id."""
        return self.value

    @classmethod
    def from_language_id(cls, language_id: str) -> Lang | None:
        """Return the catalog matching *language_id*, or None.

        The id is normalized first: surrounding whitespace stripped, lowercased,
        and ``-`` treated like ``_`` so ``pt-BR`` finds ``pt_br``.
        """
        normalized = language_id.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            return None


__all__ = [
    "Lang",
    "TransportSecurity",
]
