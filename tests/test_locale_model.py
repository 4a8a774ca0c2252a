"""
Tests for the LocaleRecord model.

These tests verify:
    - Default construction
    - Invariants enforced at construction
    - Immutability
    - Completeness properties
"""

import dataclasses

import pytest

from localeid.model import LocaleRecord


class TestLocaleRecordCreation:
    """Test building records."""

    def test_defaults(self):
        """Every field is optional."""
        record = LocaleRecord()
        assert record.is_root is False
        assert record.language is None
        assert record.variants == ()

    def test_variants_list_becomes_tuple(self):
        """Variants are stored as a tuple, order and duplicates kept."""
        record = LocaleRecord(language="it", variants=["1abc", "POSIX", "1abc"])
        assert record.variants == ("1abc", "POSIX", "1abc")

    def test_root_with_territory_and_variants(self):
        """Root may carry a region override and variants."""
        record = LocaleRecord(is_root=True, territory="IT", variants=("POSIX",))
        assert record.is_root
        assert record.territory == "IT"


class TestLocaleRecordInvariants:
    """Test construction-time validation."""

    @pytest.mark.parametrize("name", ["language", "territory", "codeset", "modifier", "script"])
    def test_empty_text_field_rejected(self, name):
        """Present text fields must be non-empty."""
        with pytest.raises(ValueError):
            LocaleRecord(**{name: ""})

    def test_root_with_language_rejected(self):
        """Root never has a language."""
        with pytest.raises(ValueError):
            LocaleRecord(is_root=True, language="it")

    def test_root_with_script_rejected(self):
        """Root never has a script."""
        with pytest.raises(ValueError):
            LocaleRecord(is_root=True, script="Latn")

    def test_empty_variant_rejected(self):
        """Variants must be non-empty."""
        with pytest.raises(ValueError):
            LocaleRecord(language="it", variants=("POSIX", ""))

    def test_record_is_frozen(self):
        """Records cannot be modified after creation."""
        record = LocaleRecord(language="it")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.language = "de"


class TestCompleteness:
    """Test the notation completeness properties."""

    def test_gettext_complete_needs_language(self):
        assert LocaleRecord(language="it").is_gettext_complete
        assert not LocaleRecord(script="Latn").is_gettext_complete

    def test_unicode_complete(self):
        assert LocaleRecord(is_root=True).is_unicode_complete
        assert LocaleRecord(language="it").is_unicode_complete
        assert LocaleRecord(script="Latn").is_unicode_complete
        assert not LocaleRecord(territory="IT", modifier="latin").is_unicode_complete
