"""
Gettext identifier generator for LocaleRecord objects.

Output:
    language[_territory][.codeset][@modifier]

The modifier slot is filled from the record's modifier, or failing that
from its script through the crosswalk ("Latn" → "@latin").

LOSSY BY DESIGN:
    is_root and variants have no Gettext form and are dropped.
    Going Unicode → Gettext → Unicode does not give back the input.
"""

import logging
from typing import Optional

from localeid.crosswalk import script_to_modifier
from localeid.errors import MissingLocaleField
from localeid.model import LocaleRecord


logger = logging.getLogger(__name__)


def _modifier_for(record: LocaleRecord) -> Optional[str]:
    if record.modifier is not None:
        return record.modifier
    return script_to_modifier(record.script)


def generate_gettext_locale(record: LocaleRecord) -> str:
    """
    Write a LocaleRecord as a Gettext locale identifier.

    Args:
        record: Parsed locale

    Returns:
        Identifier such as "it_IT@latin"

    Raises:
        MissingLocaleField: If the record has no language
    """
    if record.language is None:
        raise MissingLocaleField("Gettext locale identifiers require a language", value=record)

    if record.is_root or record.variants:
        logger.debug("Dropping root flag/variants %r for Gettext output", record.variants)

    parts = [record.language]
    if record.territory is not None:
        parts.append("_" + record.territory)
    if record.codeset is not None:
        parts.append("." + record.codeset)
    modifier = _modifier_for(record)
    if modifier is not None:
        parts.append("@" + modifier)
    return "".join(parts)
