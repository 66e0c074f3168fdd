"""
Active language handling.

LocaleConfig is the immutable bundle (language, direction, translator)
passed to anything that renders text. LanguageManager owns the current
LocaleConfig and the persisted ``language`` preference.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from storefront_ui.i18n.translator import Translator
from storefront_ui.lib import logs

LOG = logs.logger(__file__)

PREFERENCE_KEY = "language"

ENGLISH = "en"
ARABIC = "ar"
RTL_LANGUAGES = frozenset({ARABIC})

LANGUAGE_NAMES = {
    ENGLISH: "English",
    ARABIC: "العربية",
}


class PreferenceStore(Protocol):
    """Key-value storage the language preference is written to."""

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """
    Immutable locale bundle.

    Attributes:
        language: Language code ('en' or 'ar').
        translator: Translator bound to the language.
    """

    language: str
    translator: Translator

    @property
    def is_rtl(self) -> bool:
        """True for right-to-left languages."""
        return self.language in RTL_LANGUAGES

    @property
    def direction(self) -> str:
        """CSS/HTML text direction."""
        return "rtl" if self.is_rtl else "ltr"

    def t(self, key: str, **params: Any) -> str:
        """Translate a dotted key in this locale."""
        return self.translator.t(key, **params)

    @classmethod
    def for_language(cls, translator: Translator, language: str) -> "LocaleConfig":
        """Build a LocaleConfig re-binding the translator to language."""
        return cls(language=language, translator=translator.with_language(language))


class LanguageManager:
    """
    Tracks the active language and persists changes.

    The initial language is the device language. A stored preference
    that differs from it is applied on startup. Writing the preference is
    best effort: a failure is logged and the in-memory language still
    changes for the session.
    """

    def __init__(
        self,
        translator: Translator,
        store: PreferenceStore | None = None,
        device_language: str = ENGLISH,
    ) -> None:
        self._store = store
        self._supported = translator.languages
        initial = device_language if device_language in self._supported else ENGLISH
        self._locale = LocaleConfig.for_language(translator, initial)
        self.is_loading = False
        self._apply_saved_language()

    @property
    def locale(self) -> LocaleConfig:
        """The current immutable locale bundle."""
        return self._locale

    @property
    def current_language(self) -> str:
        return self._locale.language

    @property
    def is_rtl(self) -> bool:
        return self._locale.is_rtl

    @property
    def supported_languages(self) -> tuple[str, ...]:
        return self._supported

    def language_name(self, language: str | None = None) -> str:
        """Display name of a language (defaults to the current one)."""
        return LANGUAGE_NAMES.get(language or self.current_language, LANGUAGE_NAMES[ENGLISH])

    def change_language(self, language: str) -> LocaleConfig:
        """
        Switch the active language and persist the choice.

        Raises:
            ValueError: if the language has no translations.
        """
        if language not in self._supported:
            raise ValueError(f"Unsupported language: {language}")
        LOG.info("Changing language from %s to %s", self.current_language, language)
        self.is_loading = True
        try:
            self._save(language)
            self._locale = LocaleConfig.for_language(self._locale.translator, language)
        finally:
            self.is_loading = False
        return self._locale

    def toggle_language(self) -> LocaleConfig:
        """Switch between English and Arabic."""
        return self.change_language(ARABIC if self.current_language == ENGLISH else ENGLISH)

    def _save(self, language: str) -> None:
        if self._store is None:
            return
        try:
            self._store.set(PREFERENCE_KEY, language)
        except Exception:
            LOG.error("Failed to save language preference: %s", language, exc_info=True)

    def _saved_language(self) -> str | None:
        if self._store is None:
            return None
        try:
            stored = self._store.get(PREFERENCE_KEY)
        except Exception:
            LOG.warning("Failed to read language preference", exc_info=True)
            return None
        # DiskStore wraps values, plain mappings do not
        value = getattr(stored, "value", stored)
        return value if isinstance(value, str) else None

    def _apply_saved_language(self) -> None:
        saved = self._saved_language()
        LOG.info(
            "Initial language check - saved:%s current:%s", saved, self.current_language
        )
        if not saved or saved == self.current_language:
            return
        if saved not in self._supported:
            LOG.warning("Ignoring unsupported saved language: %s", saved)
            return
        self.change_language(saved)
