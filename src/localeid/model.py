"""
Core Locale Model Object

Defines LocaleRecord, the single data structure shared by every parser
and generator in this package.

ARCHITECTURAL RULE:
    LocaleRecord:
        - Knows nothing about either textual notation
        - Is immutable (frozen, variants held in a tuple)
        - Is fully serializable
        - Is only ever built from a fully accepted input
"""

from dataclasses import dataclass
from typing import Optional, Tuple


_TEXT_FIELDS = ("language", "territory", "codeset", "modifier", "script")


@dataclass(frozen=True)
class LocaleRecord:
    """
    All the pieces a locale identifier can carry, in either notation.

    Properties:
        is_root:
            True only for the Unicode "root" locale.
            Never combined with language or script, but may carry a
            territory and variants (e.g. "root_IT").

        language:
            Language code ("it", "ast"). For Gettext input any
            alphanumeric run is accepted ("Latn" is a Gettext language).

        territory:
            Region code, two letters ("IT") or three digits ("419").

        codeset:
            Gettext only ("utf8", "ISO88591").

        modifier:
            Gettext only ("euro", "latin").

        script:
            Unicode only, four letters ("Latn").

        variants:
            Unicode variant subtags in their original order.
            Duplicates are kept.

    INVARIANTS:
        - Every present text field is non-empty
        - is_root excludes language and script
        - Every variant is non-empty
    """

    is_root: bool = False
    language: Optional[str] = None
    territory: Optional[str] = None
    codeset: Optional[str] = None
    modifier: Optional[str] = None
    script: Optional[str] = None
    variants: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if value is not None and (not isinstance(value, str) or value == ""):
                raise ValueError(f"{name} must be a non-empty string or None, got {value!r}")
        if self.is_root and (self.language is not None or self.script is not None):
            raise ValueError("root locale cannot carry a language or a script")
        if not isinstance(self.variants, tuple):
            # Accept any iterable of strings, store it as a tuple
            object.__setattr__(self, "variants", tuple(self.variants))
        for variant in self.variants:
            if not isinstance(variant, str) or variant == "":
                raise ValueError(f"variants must be non-empty strings, got {variant!r}")

    @property
    def is_gettext_complete(self) -> bool:
        """True when the record can be written as a Gettext identifier."""
        return self.language is not None

    @property
    def is_unicode_complete(self) -> bool:
        """
        True when the record has a first subtag of its own.

        A record with only a modifier may still be writable as a Unicode
        tag if the modifier maps to a script; see
        localeid.backends.unicode_generator.
        """
        return self.is_root or self.language is not None or self.script is not None
