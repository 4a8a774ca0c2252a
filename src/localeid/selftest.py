"""
Self-test table for both locale grammars.

Each case lists an identifier and whether the Gettext and the Unicode
parser should accept it. run_self_test() checks every case and, for
accepted identifiers, that the Unicode form is stable when re-parsed.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from localeid.backends import generate_unicode_locale
from localeid.report import IdentifierReport, analyze_identifier
from localeid.unicode_parser import parse_unicode_locale


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelfTestCase:
    identifier: Optional[str]
    gettext_ok: bool
    unicode_ok: bool


@dataclass
class SelfTestResult:
    case: SelfTestCase
    report: IdentifierReport
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _cases(gettext_ok: bool, unicode_ok: bool, *identifiers) -> List[SelfTestCase]:
    return [SelfTestCase(identifier, gettext_ok, unicode_ok) for identifier in identifiers]


SELF_TEST_CASES: List[SelfTestCase] = (
    # Gettext only
    _cases(True, False,
           "it_IT.utf8@euro", "it_IT.utf8", "it_IT@euro", "it@euro", "it.utf8", "it@latin")
    # Both
    + _cases(True, True, "it_IT", "it", "Latn", "root")
    # Unicode only: language first
    + _cases(False, True,
             "it-Latn-IT-POSIX-NYNORSK", "it-Latn-IT-POSIX", "it-Latn-IT-NYNORSK", "it-Latn-IT",
             "it-Latn-POSIX-NYNORSK", "it-Latn-POSIX", "it-Latn-NYNORSK", "it-Latn",
             "it-IT-POSIX-NYNORSK", "it-IT-POSIX", "it-IT-NYNORSK", "it-IT",
             "it-POSIX-NYNORSK", "it-POSIX", "it-NYNORSK")
    # Unicode only: script first
    + _cases(False, True,
             "Latn-IT-POSIX-NYNORSK", "Latn-IT-POSIX", "Latn-IT-NYNORSK", "Latn-IT",
             "Latn-POSIX-NYNORSK", "Latn-POSIX", "Latn-NYNORSK")
    # Unicode only: root, numeric regions, digit-led variants
    + _cases(False, True, "root-IT", "es-419", "de-DE-1996", "it-IT-1abc-1abc")
    # Neither
    + _cases(False, False,
             None, "", " ", "  ", "foo@bar@baz", "it.utf8_IT", "it__IT", "it_", "_IT",
             "root-Latn", "it-IT-abcd", "es-41a", "it--IT", "-it")
)


def run_case(case: SelfTestCase) -> SelfTestResult:
    """Check one case against both parsers."""
    result = SelfTestResult(case=case, report=analyze_identifier(case.identifier))
    report = result.report

    if report.is_gettext and not case.gettext_ok:
        result.errors.append("it has been detected as valid for Gettext, but it shouldn't")
    elif not report.is_gettext and case.gettext_ok:
        result.errors.append("it should be valid for Gettext")

    if report.is_unicode and not case.unicode_ok:
        result.errors.append("it has been detected as valid for Unicode, but it shouldn't")
    elif not report.is_unicode and case.unicode_ok:
        result.errors.append("it should be valid for Unicode")

    if report.is_unicode:
        first = report.unicode.unicode_id
        again = generate_unicode_locale(parse_unicode_locale(first))
        if again != first:
            result.errors.append(f"Unicode form is not stable: {first!r} became {again!r}")

    if result.errors:
        logger.debug("Self-test case %r failed: %s", case.identifier, "; ".join(result.errors))
    return result


def run_self_test(cases: Optional[Iterable[SelfTestCase]] = None, stop_on_failure: bool = False) -> List[SelfTestResult]:
    """
    Run the self-test table.

    Args:
        cases: Cases to run (defaults to SELF_TEST_CASES)
        stop_on_failure: Stop after the first failing case

    Returns:
        One SelfTestResult per case that was run
    """
    results = []
    for case in SELF_TEST_CASES if cases is None else cases:
        result = run_case(case)
        results.append(result)
        if stop_on_failure and not result.ok:
            break
    return results


__all__ = [
    "SelfTestCase",
    "SelfTestResult",
    "SELF_TEST_CASES",
    "run_case",
    "run_self_test",
]
