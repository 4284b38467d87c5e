"""Localized display names for date/time fields.

Use :func:`create_display_names` for a one-off provider bound to a locale,
or :class:`DisplayNamesManager` to follow a changing current locale. Labels
come from ICU when PyICU can provide them, otherwise from the JSON tables in
the ``translations`` directory.
"""

from .dictionary import DisplayNamesError, LocalizedStringDictionary, MissingTranslationError
from .display_names import (
    BundledDisplayNames,
    DisplayNames,
    NativeDisplayNames,
    PlatformUnsupportedError,
    create_display_names,
)
from .fields import FieldKind
from .locale_utils import DEFAULT_LOCALE, detect_system_locale, normalize_locale
from .manager import DisplayNamesManager
from .settings import DisplayNamesSettings, load_settings, settings_from_file

__all__ = [
    "BundledDisplayNames",
    "DEFAULT_LOCALE",
    "DisplayNames",
    "DisplayNamesError",
    "DisplayNamesManager",
    "DisplayNamesSettings",
    "FieldKind",
    "LocalizedStringDictionary",
    "MissingTranslationError",
    "NativeDisplayNames",
    "PlatformUnsupportedError",
    "create_display_names",
    "detect_system_locale",
    "load_settings",
    "normalize_locale",
    "settings_from_file",
]
