"""Generators that write a LocaleRecord in each supported notation."""

from .gettext_generator import generate_gettext_locale
from .unicode_generator import generate_unicode_locale

__all__ = ["generate_gettext_locale", "generate_unicode_locale"]
