"""
Tests for the built-in self-test table.
"""

import pytest

from localeid.selftest import SELF_TEST_CASES, SelfTestCase, run_case, run_self_test


@pytest.mark.parametrize("case", SELF_TEST_CASES, ids=lambda c: repr(c.identifier))
def test_case_passes(case):
    result = run_case(case)
    assert result.ok, result.errors


def test_whole_table_passes():
    results = run_self_test()
    assert len(results) == len(SELF_TEST_CASES)
    assert all(r.ok for r in results)


def test_wrong_expectation_reported():
    result = run_case(SelfTestCase("it-IT", gettext_ok=True, unicode_ok=False))
    assert not result.ok
    assert "it should be valid for Gettext" in result.errors
    assert "it has been detected as valid for Unicode, but it shouldn't" in result.errors


def test_stop_on_failure():
    cases = [
        SelfTestCase("it", True, True),
        SelfTestCase("it", False, False),
        SelfTestCase("it_IT", True, True),
    ]
    results = run_self_test(cases, stop_on_failure=True)
    assert len(results) == 2
    assert results[0].ok and not results[1].ok
