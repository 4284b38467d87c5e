import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .dictionary import TRANSLATIONS_DIR, LocalizedStringDictionary
from .display_names import DisplayNames, FieldLike, create_display_names
from .fields import FieldKind
from .locale_utils import DEFAULT_LOCALE, detect_system_locale, try_normalize_locale
from .settings import DisplayNamesSettings


logger = logging.getLogger(__name__)


class DisplayNamesManager:
    """
    Keeps the display names for the current locale.

    The provider is built on first use and reused for every lookup until the
    locale changes; a locale change throws it away and the next lookup builds
    a fresh one.
    """

    def __init__(
        self,
        default_locale: Optional[str] = None,
        translations_dir: Optional[Union[str, Path]] = None,
        prefer_native: Optional[bool] = None,
        settings: Optional[DisplayNamesSettings] = None,
    ):
        self.settings = settings or DisplayNamesSettings()

        self.prefer_native = (
            self.settings.prefer_native if prefer_native is None else prefer_native
        )

        # Where translations live
        translations_dir = translations_dir or self.settings.translations_dir
        fallback_locale = try_normalize_locale(self.settings.fallback_locale)
        if fallback_locale is None:
            logger.warning(
                "Bad fallback locale %r, using %s", self.settings.fallback_locale, DEFAULT_LOCALE
            )
            fallback_locale = DEFAULT_LOCALE
        if translations_dir or fallback_locale != DEFAULT_LOCALE:
            self.dictionary = LocalizedStringDictionary.from_directory(
                translations_dir or TRANSLATIONS_DIR, fallback_locale
            )
        else:
            self.dictionary = LocalizedStringDictionary.bundled()

        # Caller's choice first, then settings, then whatever the system says
        self._current_locale = (
            try_normalize_locale(default_locale)
            or try_normalize_locale(self.settings.default_locale)
            or detect_system_locale(self.dictionary.default_locale)
        )
        self._display_names: Optional[DisplayNames] = None

    @property
    def current_locale(self) -> str:
        return self._current_locale

    # ----------------------------------------------------------------------
    # Public: Set locale
    # ----------------------------------------------------------------------
    def set_locale(self, locale_code: str) -> bool:
        """Switch to ``locale_code``. Returns False if it is not a locale."""
        normalized = try_normalize_locale(locale_code)
        if normalized is None:
            return False

        if normalized != self._current_locale:
            logger.debug("Locale changed %s -> %s", self._current_locale, normalized)
            self._current_locale = normalized
            self._display_names = None
        return True

    # ----------------------------------------------------------------------
    # Lookup
    # ----------------------------------------------------------------------
    @property
    def display_names(self) -> DisplayNames:
        if self._display_names is None:
            self._display_names = create_display_names(
                self._current_locale, self.dictionary, self.prefer_native
            )
        return self._display_names

    def of(self, field: FieldLike) -> str:
        return self.display_names.of(FieldKind.parse(field))

    def labels(self) -> Dict[FieldKind, str]:
        """Display names for every field kind in the current locale."""
        names = self.display_names
        return {kind: names.of(kind) for kind in FieldKind}
