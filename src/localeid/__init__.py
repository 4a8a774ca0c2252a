"""
Locale Identifier Conversion Package

Converts locale identifiers between the two notations in common use:

    - Gettext / POSIX:   language[_territory][.codeset][@modifier]
    - Unicode language:  language[-script][-region][-variant...] or "root"

ARCHITECTURAL GUARANTEE:
------------------------
Both notations parse into the same LocaleRecord, and both generators
read the same LocaleRecord. Nothing in this package looks up CLDR data,
negotiates locales, or normalizes casing beyond what the grammars
require.

Parsers live at package level, generators live in `localeid.backends`.
"""

__version__ = "0.1.0"
