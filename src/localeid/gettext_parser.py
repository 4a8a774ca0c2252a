"""
Gettext Parser (Raw Input → LocaleRecord).

Parses POSIX/Gettext locale identifiers:

    language[_territory][.codeset][@modifier]

Syntax Notes:
    - Every chunk is one or more ASCII letters or digits
    - "_" introduces the territory, "." the codeset, "@" the modifier
    - Each separator may appear at most once, and only in that order
      ("it.utf8_IT" and "foo@bar@baz" are both rejected)
    - The language chunk is mandatory; its length is not restricted
"""

import logging
import re
from typing import Dict, Optional

from localeid.errors import InvalidLocaleIdentifier
from localeid.model import LocaleRecord


logger = logging.getLogger(__name__)

_ALNUM_RE = re.compile(r"[A-Za-z0-9]")

# Separator -> (field it introduces, rank in the mandatory order)
_SEPARATORS: Dict[str, tuple] = {
    "_": ("territory", 1),
    ".": ("codeset", 2),
    "@": ("modifier", 3),
}


def _reject(locale, reason: str) -> InvalidLocaleIdentifier:
    logger.debug("Rejected Gettext locale %r: %s", locale, reason)
    return InvalidLocaleIdentifier(
        f"Invalid Gettext locale identifier {locale!r}: {reason}",
        value=locale,
        notation="gettext",
    )


def parse_gettext_locale(locale: Optional[str]) -> LocaleRecord:
    """
    Parse a Gettext locale identifier into a LocaleRecord.

    Single left-to-right scan. Each time a separator (or the end of the
    string) is reached, the chunk before it is stored in the field named
    by the separator that opened it.

    Args:
        locale: Identifier such as "it_IT.utf8@euro"

    Returns:
        LocaleRecord with language and any of territory/codeset/modifier

    Raises:
        InvalidLocaleIdentifier: If locale is None, empty, contains a
            character outside [A-Za-z0-9_.@], has an empty chunk, or has
            separators duplicated or out of order
    """
    if locale is None:
        raise _reject(locale, "no identifier given")
    if not isinstance(locale, str):
        raise _reject(locale, f"expected a string, got {type(locale).__name__}")
    if locale == "":
        raise _reject(locale, "empty identifier")

    fields: Dict[str, str] = {}
    opened_by: Optional[str] = None  # separator that opened the current chunk
    last_rank = 0
    chunk_start = 0

    # One extra step past the end closes the final chunk
    for pos in range(len(locale) + 1):
        char = locale[pos] if pos < len(locale) else None
        if char is not None and char not in _SEPARATORS:
            if not _ALNUM_RE.fullmatch(char):
                raise _reject(locale, f"invalid character {char!r} at position {pos}")
            continue

        chunk = locale[chunk_start:pos]
        if chunk == "":
            if opened_by is None:
                raise _reject(locale, "empty language")
            raise _reject(locale, f"empty chunk after {opened_by!r}")

        if opened_by is None:
            fields["language"] = chunk
        else:
            name, rank = _SEPARATORS[opened_by]
            if rank <= last_rank:
                raise _reject(locale, f"{name} is duplicated or out of order")
            fields[name] = chunk
            last_rank = rank

        opened_by = char
        chunk_start = pos + 1

    return LocaleRecord(**fields)


__all__ = [
    "parse_gettext_locale",
]
