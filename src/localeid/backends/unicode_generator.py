"""
Unicode language tag generator for LocaleRecord objects.

Output (always joined with "_", whatever the input used):
    root[_region][_variant...]
    language[_script][_region][_variant...]
    script[_region][_variant...]

The script comes from the record's script, or failing that from its
modifier through the crosswalk ("@latin" → "Latn"). Codeset, and any
modifier without a script counterpart ("@euro"), are dropped.
"""

import logging
from typing import List, Optional

from localeid.crosswalk import modifier_to_script
from localeid.errors import MissingLocaleField
from localeid.model import LocaleRecord
from localeid.unicode_parser import ROOT_TAG


logger = logging.getLogger(__name__)

SUBTAG_SEPARATOR = "_"


def _script_for(record: LocaleRecord) -> Optional[str]:
    if record.script is not None:
        return record.script
    return modifier_to_script(record.modifier)


def generate_unicode_locale(record: LocaleRecord) -> str:
    """
    Write a LocaleRecord as a Unicode locale identifier.

    Args:
        record: Parsed locale

    Returns:
        Identifier such as "it_Latn_IT"

    Raises:
        MissingLocaleField: If the record has none of root, language or
            a script (direct or derived from the modifier)
    """
    script = _script_for(record)

    subtags: List[str] = []
    if record.is_root:
        subtags.append(ROOT_TAG)
    elif record.language is not None:
        subtags.append(record.language)
        if script is not None:
            subtags.append(script)
    elif script is not None:
        subtags.append(script)
    else:
        raise MissingLocaleField(
            "Unicode locale identifiers require root, a language or a script",
            value=record,
        )

    if record.codeset is not None:
        logger.debug("Dropping codeset %r for Unicode output", record.codeset)

    if record.territory is not None:
        subtags.append(record.territory)
    subtags.extend(record.variants)
    return SUBTAG_SEPARATOR.join(subtags)
