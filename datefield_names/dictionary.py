"""Locale-resolving lookup over the bundled translation tables."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from .locale_utils import DEFAULT_LOCALE, normalize_locale

logger = logging.getLogger(__name__)

TRANSLATIONS_DIR = Path(__file__).parent / "translations"

Strings = Dict[str, str]


class DisplayNamesError(Exception):
    """Base class for errors raised by this package."""


class MissingTranslationError(DisplayNamesError, KeyError):
    """The resolved table for a locale has no usable string for a key."""

    def __init__(self, key: str, locale: str):
        super().__init__(f"Could not find message {key!r} in {locale} locale")
        self.key = key
        self.locale = locale

    def __str__(self) -> str:
        return self.args[0]


class LocalizedStringDictionary:
    """
    Maps (key, locale) to a translated string.

    ``messages`` is ``{locale: {key: string}}``. A requested locale is resolved
    to one table: the exact locale, then the bare language, then any locale
    sharing the language, then ``default_locale``.
    """

    _bundled: Optional["LocalizedStringDictionary"] = None

    def __init__(
        self,
        messages: Mapping[str, Mapping[str, str]],
        default_locale: str = DEFAULT_LOCALE,
    ):
        self.default_locale = normalize_locale(default_locale)

        # Tables keyed by normalised locale; empty tables are dropped
        self._strings: Dict[str, Strings] = {}
        for locale_code, table in messages.items():
            if not table:
                continue
            self._strings[normalize_locale(locale_code)] = dict(table)

        # Cache: { requested locale: resolved table }
        self._resolved: Dict[str, Strings] = {}

    # ----------------------------------------------------------------------
    # Construction from disk
    # ----------------------------------------------------------------------
    @classmethod
    def from_directory(
        cls,
        translations_dir: Union[str, Path],
        default_locale: str = DEFAULT_LOCALE,
    ) -> "LocalizedStringDictionary":
        """Load every ``<locale>.json`` in ``translations_dir``."""
        messages: Dict[str, Strings] = {}
        for path in sorted(Path(translations_dir).glob("*.json")):
            try:
                with open(path, "r", encoding="utf-8") as fh:
                    data = json.load(fh)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load translations from {path.name}: {e}")
                continue

            if not isinstance(data, dict):
                logger.error("Ignoring %s: expected a JSON object", path.name)
                continue

            try:
                locale_code = normalize_locale(path.stem)
            except ValueError:
                logger.error("Ignoring %s: file name is not a locale", path.name)
                continue
            messages[locale_code] = data

        logger.debug("Loaded %d translation tables from %s", len(messages), translations_dir)
        return cls(messages, default_locale)

    @classmethod
    def bundled(cls) -> "LocalizedStringDictionary":
        """Return the dictionary over the tables shipped with this package."""
        if cls._bundled is None:
            cls._bundled = cls.from_directory(TRANSLATIONS_DIR)
        return cls._bundled

    @property
    def locales(self) -> List[str]:
        return sorted(self._strings)

    # ----------------------------------------------------------------------
    # Lookup
    # ----------------------------------------------------------------------
    def get_strings_for_locale(self, locale_code: str) -> Strings:
        """Return the table that best matches ``locale_code``."""
        strings = self._resolved.get(locale_code)
        if strings is None:
            strings = self._resolve(locale_code)
            self._resolved[locale_code] = strings
        return strings

    def get_string_for_locale(self, key: str, locale_code: str) -> str:
        strings = self.get_strings_for_locale(locale_code)
        value = strings.get(key)
        if not value:
            raise MissingTranslationError(key, locale_code)
        return value

    def _resolve(self, locale_code: str) -> Strings:
        try:
            normalized = normalize_locale(locale_code)
        except ValueError:
            logger.warning(
                "Unrecognised locale %r, using %s strings", locale_code, self.default_locale
            )
            return self._strings.get(self.default_locale, {})

        # try full locale
        if normalized in self._strings:
            return self._strings[normalized]

        # try language-only
        language = normalized.split("-", 1)[0]
        if language in self._strings:
            return self._strings[language]

        # try any locale of the same language (e.g. fr-CA -> fr-FR)
        for candidate in sorted(self._strings):
            if candidate.startswith(f"{language}-"):
                return self._strings[candidate]

        logger.debug("No strings for %s, using %s", normalized, self.default_locale)
        return self._strings.get(self.default_locale, {})
