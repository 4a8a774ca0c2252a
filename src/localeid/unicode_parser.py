"""
Unicode Language Tag Parser (Raw Input → LocaleRecord).

Parses Unicode language identifiers:

    root[-region][-variant...]
    language[-script][-region][-variant...]
    script[-region][-variant...]

Syntax Notes:
    - "-" and "_" are interchangeable separators
    - Every subtag is one or more ASCII letters or digits
    - Classification is positional and never backtracks: a token is
      tested only against the slot the cursor is at
    - Letter/digit checks ignore case; the "root" literal does not
      ("ROOT" is not the root locale)

Grammar (slot by slot):
    root      "root", exactly
    language  2-3 letters
    script    4 letters
    region    2 letters, or 3 digits
    variant   5-8 letters/digits, or a digit followed by 3 letters/digits
"""

import logging
import re
from typing import List, Optional

from localeid.errors import InvalidLocaleIdentifier
from localeid.model import LocaleRecord


logger = logging.getLogger(__name__)

ROOT_TAG = "root"

_SEPARATOR_RE = re.compile(r"[-_]")
_SUBTAG_RE = re.compile(r"[A-Za-z0-9]+")
_LANGUAGE_RE = re.compile(r"[A-Za-z]{2,3}")
_SCRIPT_RE = re.compile(r"[A-Za-z]{4}")
_REGION_RE = re.compile(r"[A-Za-z]{2}|[0-9]{3}")
_VARIANT_RE = re.compile(r"[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3}")


def _reject(locale, reason: str) -> InvalidLocaleIdentifier:
    logger.debug("Rejected Unicode locale %r: %s", locale, reason)
    return InvalidLocaleIdentifier(
        f"Invalid Unicode locale identifier {locale!r}: {reason}",
        value=locale,
        notation="unicode",
    )


def tokenize_unicode_locale(locale: Optional[str]) -> List[str]:
    """
    Split a Unicode locale identifier into subtags.

    Args:
        locale: Identifier such as "it-Latn-IT" or "it_Latn_IT"

    Returns:
        Subtags in their original order

    Raises:
        InvalidLocaleIdentifier: If locale is None or empty, or any subtag
            is empty or not purely alphanumeric
    """
    if locale is None:
        raise _reject(locale, "no identifier given")
    if not isinstance(locale, str):
        raise _reject(locale, f"expected a string, got {type(locale).__name__}")
    if locale == "":
        raise _reject(locale, "empty identifier")

    tokens = _SEPARATOR_RE.split(locale)
    for index, token in enumerate(tokens):
        if token == "":
            raise _reject(locale, f"empty subtag at index {index}")
        if not _SUBTAG_RE.fullmatch(token):
            raise _reject(locale, f"subtag {token!r} is not alphanumeric")
    return tokens


def parse_unicode_locale(locale: Optional[str]) -> LocaleRecord:
    """
    Parse a Unicode locale identifier into a LocaleRecord.

    Args:
        locale: Identifier such as "it-Latn-IT-POSIX" or "root_IT"

    Returns:
        LocaleRecord with is_root or language and/or script, plus
        optional territory and variants

    Raises:
        InvalidLocaleIdentifier: If tokenization fails, no root/language/
            script leads the tag, or a trailing subtag is neither a region
            in region position nor a valid variant
    """
    tokens = tokenize_unicode_locale(locale)
    pos = 0

    is_root = False
    language = None
    script = None
    territory = None

    if tokens[0] == ROOT_TAG:
        is_root = True
        pos = 1
    else:
        if _LANGUAGE_RE.fullmatch(tokens[pos]):
            language = tokens[pos]
            pos += 1
        if pos < len(tokens) and _SCRIPT_RE.fullmatch(tokens[pos]):
            script = tokens[pos]
            pos += 1
        if pos == 0:
            raise _reject(locale, f"{tokens[0]!r} is neither root, a language nor a script")

    if pos < len(tokens) and _REGION_RE.fullmatch(tokens[pos]):
        territory = tokens[pos]
        pos += 1

    variants = tokens[pos:]
    for variant in variants:
        if not _VARIANT_RE.fullmatch(variant):
            raise _reject(locale, f"{variant!r} is not a valid variant subtag")

    return LocaleRecord(
        is_root=is_root,
        language=language,
        script=script,
        territory=territory,
        variants=tuple(variants),
    )


__all__ = [
    "ROOT_TAG",
    "tokenize_unicode_locale",
    "parse_unicode_locale",
]
