"""
Locale Report: read-only inspection of locale identifiers.

For one record, shows every field together with both generated forms.
For one raw string, runs both parsers and reports what each accepted.

IMPORTANT: Nothing here changes a record. Generator failures are
recorded as None plus a warning, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from localeid.backends import generate_gettext_locale, generate_unicode_locale
from localeid.crosswalk import modifier_to_script, script_to_modifier
from localeid.errors import InvalidLocaleIdentifier, MissingLocaleField
from localeid.gettext_parser import parse_gettext_locale
from localeid.model import LocaleRecord
from localeid.serialization import record_to_dict
from localeid.unicode_parser import parse_unicode_locale


@dataclass
class LocaleReport:
    """A record plus both of its textual forms."""

    record: LocaleRecord
    gettext_id: Optional[str] = None
    unicode_id: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record": record_to_dict(self.record),
            "gettext_id": self.gettext_id,
            "unicode_id": self.unicode_id,
            "warnings": list(self.warnings),
        }


@dataclass
class IdentifierReport:
    """What each grammar made of one raw identifier."""

    identifier: Optional[str]
    gettext: Optional[LocaleReport] = None
    unicode: Optional[LocaleReport] = None

    @property
    def is_gettext(self) -> bool:
        return self.gettext is not None

    @property
    def is_unicode(self) -> bool:
        return self.unicode is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "gettext": self.gettext.to_dict() if self.gettext else None,
            "unicode": self.unicode.to_dict() if self.unicode else None,
        }


def describe_record(record: LocaleRecord) -> LocaleReport:
    """
    Generate both notations for a record and flag what each one loses.

    Returns a LocaleReport; a notation the record cannot be written in
    is left as None with a warning explaining why.
    """
    report = LocaleReport(record=record)

    try:
        report.gettext_id = generate_gettext_locale(record)
    except MissingLocaleField as e:
        report.add_warning(f"No Gettext form: {e}")

    try:
        report.unicode_id = generate_unicode_locale(record)
    except MissingLocaleField as e:
        report.add_warning(f"No Unicode form: {e}")

    if report.gettext_id is not None:
        if record.is_root:
            report.add_warning("Gettext form drops the root flag")
        if record.variants:
            report.add_warning(f"Gettext form drops variants: {', '.join(record.variants)}")
        if record.modifier is None and record.script is not None and script_to_modifier(record.script) is None:
            report.add_warning(f"Script {record.script} has no Gettext modifier")

    if report.unicode_id is not None:
        if record.codeset is not None:
            report.add_warning(f"Unicode form drops codeset: {record.codeset}")
        if record.script is None and record.modifier is not None and modifier_to_script(record.modifier) is None:
            report.add_warning(f"Unicode form drops modifier: {record.modifier}")

    return report


def analyze_identifier(identifier: Optional[str]) -> IdentifierReport:
    """
    Parse one raw identifier with both grammars.

    Returns an IdentifierReport whose gettext/unicode entries are None
    for each grammar that rejected the identifier.
    """
    result = IdentifierReport(identifier=identifier)

    try:
        result.gettext = describe_record(parse_gettext_locale(identifier))
    except InvalidLocaleIdentifier:
        pass

    try:
        result.unicode = describe_record(parse_unicode_locale(identifier))
    except InvalidLocaleIdentifier:
        pass

    return result


__all__ = [
    "LocaleReport",
    "IdentifierReport",
    "describe_record",
    "analyze_identifier",
]
