"""
Dotted-key translation lookup.

Translation documents are nested JSON objects (one per language) such as

    {"checkout": {"tax": "Tax ({{rate}}%)"}}

looked up as ``translator.t("checkout.tax", rate=5)``. Lookups never
raise: a key missing from the active language falls back to English, and
a key missing everywhere is returned unchanged.
"""

import json
import re
from pathlib import Path
from typing import Any, Mapping

from storefront_ui.lib import logs

LOG = logs.logger(__file__)

TRANSLATIONS_DIR = Path(__file__).parent / "translations"
FALLBACK_LANGUAGE = "en"

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")

Resources = Mapping[str, Mapping[str, Any]]


def load_translations(
    directory: Path = TRANSLATIONS_DIR, languages: tuple[str, ...] = ("en", "ar")
) -> dict[str, dict[str, Any]]:
    """
    Read ``<language>.json`` for each language in the directory.

    Raises:
        FileNotFoundError: if a translation document is missing.
    """
    resources: dict[str, dict[str, Any]] = {}
    for language in languages:
        path = directory / f"{language}.json"
        with path.open(encoding="utf-8") as handle:
            resources[language] = json.load(handle)
    return resources


class Translator:
    """
    Immutable translation function bound to one language.

    Attributes:
        language: Active language code.
        fallback: Language consulted when a key is missing.
    """

    __slots__ = ("language", "fallback", "_resources")

    def __init__(
        self,
        resources: Resources,
        language: str = FALLBACK_LANGUAGE,
        fallback: str = FALLBACK_LANGUAGE,
    ) -> None:
        if language not in resources:
            raise ValueError(f"No translations for language: {language}")
        self.language = language
        self.fallback = fallback
        self._resources = resources

    @property
    def languages(self) -> tuple[str, ...]:
        """Languages with a translation document."""
        return tuple(self._resources)

    def with_language(self, language: str) -> "Translator":
        """Return a translator for another language sharing the same documents."""
        return Translator(self._resources, language, self.fallback)

    def t(self, key: str, **params: Any) -> str:
        """
        Translate a dotted key, interpolating ``{{name}}`` placeholders.

        Args:
            key: Dotted key such as ``dashboard.sales``.
            **params: Values for named placeholders.

        Returns:
            The translated text, or the key itself when it is unknown.
        """
        text = self._lookup(self.language, key)
        if text is None and self.fallback != self.language:
            text = self._lookup(self.fallback, key)
        if text is None:
            LOG.debug("Missing translation - language:%s key:%s", self.language, key)
            return key
        return interpolate(text, params) if params else text

    __call__ = t

    def has(self, key: str) -> bool:
        """True when the key resolves in the active or fallback language."""
        return (
            self._lookup(self.language, key) is not None
            or self._lookup(self.fallback, key) is not None
        )

    def flatten(self) -> dict[str, str]:
        """
        Return every key of the active language as a flat dotted mapping.

        Keys only present in the fallback language are included so the UI
        never shows a hole.
        """
        flat = _flatten(self._resources.get(self.fallback, {}))
        flat.update(_flatten(self._resources[self.language]))
        return flat

    def _lookup(self, language: str, key: str) -> str | None:
        node: Any = self._resources.get(language)
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None


def interpolate(text: str, params: Mapping[str, Any]) -> str:
    """Replace ``{{name}}`` placeholders; unknown names are left as written."""

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        return str(params[name]) if name in params else match.group(0)

    return _PLACEHOLDER.sub(_replace, text)


def _flatten(node: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for name, value in node.items():
        key = f"{prefix}{name}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{key}."))
        elif isinstance(value, str):
            flat[key] = value
    return flat
