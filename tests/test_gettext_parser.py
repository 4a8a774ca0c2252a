"""
Tests for the Gettext parser (Raw Input → LocaleRecord).

Format:
    language[_territory][.codeset][@modifier]
"""

import pytest

from localeid.errors import InvalidLocaleIdentifier, LocaleErrorKind
from localeid.gettext_parser import parse_gettext_locale


class TestValidIdentifiers:
    """Test identifiers the grammar accepts."""

    def test_all_chunks(self):
        record = parse_gettext_locale("it_IT.utf8@euro")
        assert record.language == "it"
        assert record.territory == "IT"
        assert record.codeset == "utf8"
        assert record.modifier == "euro"
        assert record.script is None
        assert record.variants == ()

    def test_language_only(self):
        record = parse_gettext_locale("it")
        assert record.language == "it"
        assert record.territory is None

    def test_language_territory(self):
        record = parse_gettext_locale("it_IT")
        assert (record.language, record.territory) == ("it", "IT")

    def test_skipped_chunks(self):
        """Optional chunks may be skipped while keeping their order."""
        assert parse_gettext_locale("it.utf8").codeset == "utf8"
        assert parse_gettext_locale("it@latin").modifier == "latin"
        record = parse_gettext_locale("it_IT@euro")
        assert record.territory == "IT"
        assert record.codeset is None
        assert record.modifier == "euro"

    def test_long_language_allowed(self):
        """The language chunk is any alphanumeric run."""
        assert parse_gettext_locale("Latn").language == "Latn"
        assert parse_gettext_locale("root").language == "root"

    def test_root_is_not_special(self):
        assert parse_gettext_locale("root").is_root is False


class TestInvalidIdentifiers:
    """Test identifiers the grammar rejects."""

    @pytest.mark.parametrize("locale", [None, "", " ", "  "])
    def test_absent_or_blank(self, locale):
        with pytest.raises(InvalidLocaleIdentifier):
            parse_gettext_locale(locale)

    def test_not_a_string(self):
        with pytest.raises(InvalidLocaleIdentifier):
            parse_gettext_locale(42)

    @pytest.mark.parametrize("locale", ["it-IT", "it_IT.utf-8", "it IT", "ité", "it_IT\n"])
    def test_invalid_characters(self, locale):
        with pytest.raises(InvalidLocaleIdentifier):
            parse_gettext_locale(locale)

    @pytest.mark.parametrize("locale", ["_IT", "it_", "it__IT", "it_.utf8", "it@", "it_IT."])
    def test_empty_chunks(self, locale):
        with pytest.raises(InvalidLocaleIdentifier):
            parse_gettext_locale(locale)

    @pytest.mark.parametrize("locale", ["it.utf8_IT", "it@euro_IT", "it@euro.utf8"])
    def test_out_of_order(self, locale):
        """Territory precedes codeset precedes modifier."""
        with pytest.raises(InvalidLocaleIdentifier):
            parse_gettext_locale(locale)

    @pytest.mark.parametrize("locale", ["foo@bar@baz", "it_IT_CH", "it.utf8.latin1"])
    def test_duplicated_separator(self, locale):
        with pytest.raises(InvalidLocaleIdentifier):
            parse_gettext_locale(locale)

    def test_error_details(self):
        """The error carries its kind, the input and the notation."""
        with pytest.raises(InvalidLocaleIdentifier) as exc_info:
            parse_gettext_locale("it.utf8_IT")
        err = exc_info.value
        assert err.kind == LocaleErrorKind.INVALID_IDENTIFIER
        assert err.value == "it.utf8_IT"
        assert err.notation == "gettext"
        assert isinstance(err, ValueError)
        assert "territory" in str(err)
