"""
Tests for the locale report (read-only inspection).
"""

from localeid.model import LocaleRecord
from localeid.report import analyze_identifier, describe_record


class TestDescribeRecord:

    def test_both_forms(self):
        report = describe_record(LocaleRecord(language="it", script="Latn", territory="IT"))
        assert report.gettext_id == "it_IT@latin"
        assert report.unicode_id == "it_Latn_IT"
        assert report.warnings == []

    def test_lossy_gettext_form_flagged(self):
        report = describe_record(LocaleRecord(language="it", territory="IT", variants=("POSIX",)))
        assert report.gettext_id == "it_IT"
        assert any("variants" in w for w in report.warnings)

    def test_lossy_unicode_form_flagged(self):
        report = describe_record(LocaleRecord(language="it", codeset="utf8", modifier="euro"))
        assert report.unicode_id == "it"
        assert any("codeset" in w for w in report.warnings)
        assert any("euro" in w for w in report.warnings)

    def test_missing_form_is_none(self):
        report = describe_record(LocaleRecord(is_root=True, territory="IT"))
        assert report.gettext_id is None
        assert report.unicode_id == "root_IT"
        assert any("No Gettext form" in w for w in report.warnings)

    def test_to_dict(self):
        d = describe_record(LocaleRecord(language="it")).to_dict()
        assert d["gettext_id"] == "it"
        assert d["unicode_id"] == "it"
        assert d["record"]["language"] == "it"


class TestAnalyzeIdentifier:

    def test_valid_for_both(self):
        report = analyze_identifier("it_IT")
        assert report.is_gettext and report.is_unicode
        assert report.gettext.record.territory == "IT"
        assert report.unicode.record.territory == "IT"

    def test_gettext_only(self):
        report = analyze_identifier("it@latin")
        assert report.is_gettext and not report.is_unicode
        assert report.gettext.unicode_id == "it_Latn"

    def test_unicode_only(self):
        report = analyze_identifier("it-Latn-IT")
        assert report.is_unicode and not report.is_gettext
        assert report.unicode.gettext_id == "it_IT@latin"

    def test_neither(self):
        report = analyze_identifier(None)
        assert not report.is_gettext and not report.is_unicode
        assert report.to_dict() == {"identifier": None, "gettext": None, "unicode": None}
