"""
Bilingual (English/Arabic) text support.

- translator: dotted-key lookup with interpolation and soft misses
- locale: immutable LocaleConfig plus the persisted LanguageManager
"""

from functools import cache

from storefront_ui.i18n.locale import (
    ARABIC,
    ENGLISH,
    LANGUAGE_NAMES,
    PREFERENCE_KEY,
    LanguageManager,
    LocaleConfig,
)
from storefront_ui.i18n.translator import Translator, interpolate, load_translations


@cache
def default_translator() -> Translator:
    """Return an English translator over the bundled documents (loaded once)."""
    return Translator(load_translations())


__all__ = [
    "ARABIC",
    "ENGLISH",
    "LANGUAGE_NAMES",
    "PREFERENCE_KEY",
    "LanguageManager",
    "LocaleConfig",
    "Translator",
    "default_translator",
    "interpolate",
    "load_translations",
]
