"""
Localized display names for date/time fields.

Two interchangeable strategies implement :class:`DisplayNames`:

* :class:`NativeDisplayNames` asks ICU (through PyICU) for the CLDR field
  names of the locale.
* :class:`BundledDisplayNames` reads the JSON tables shipped in
  ``translations/`` through :class:`LocalizedStringDictionary`.

:func:`create_display_names` picks one per locale. PyICU may be missing, or
linked against an ICU that predates field display names (added in ICU 61),
so the native strategy is probed by constructing it rather than by checking
for the module.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Any, Dict, Optional, Protocol, Union

from .dictionary import DisplayNamesError, LocalizedStringDictionary
from .fields import FieldKind

logger = logging.getLogger(__name__)

FieldLike = Union[FieldKind, str]

# FieldKind -> name of the matching icu.UDateTimePatternField constant
ICU_FIELDS: Dict[FieldKind, str] = {
    FieldKind.ERA: "ERA_FIELD",
    FieldKind.YEAR: "YEAR_FIELD",
    FieldKind.QUARTER: "QUARTER_FIELD",
    FieldKind.MONTH: "MONTH_FIELD",
    FieldKind.WEEK: "WEEK_OF_YEAR_FIELD",
    FieldKind.WEEKDAY: "WEEKDAY_FIELD",
    FieldKind.DAY: "DAY_FIELD",
    FieldKind.DAY_PERIOD: "DAYPERIOD_FIELD",
    FieldKind.HOUR: "HOUR_FIELD",
    FieldKind.MINUTE: "MINUTE_FIELD",
    FieldKind.SECOND: "SECOND_FIELD",
    FieldKind.TIME_ZONE_NAME: "ZONE_FIELD",
}


class PlatformUnsupportedError(DisplayNamesError):
    """ICU is unavailable or cannot provide date/time field names."""


class DisplayNames(Protocol):
    locale: str

    def of(self, field: FieldLike) -> str:
        ...


def _import_icu() -> ModuleType:
    try:
        import icu
    except ImportError as e:
        raise PlatformUnsupportedError("PyICU is not installed") from e
    return icu


class NativeDisplayNames:
    """Field names straight from ICU's DateTimePatternGenerator."""

    def __init__(self, locale: str):
        icu = _import_icu()

        generator_cls = icu.DateTimePatternGenerator
        if not hasattr(generator_cls, "getFieldDisplayName") or not hasattr(
            icu, "UDateTimePGDisplayWidth"
        ):
            version = getattr(icu, "ICU_VERSION", "unknown")
            raise PlatformUnsupportedError(
                f"ICU {version} does not provide date/time field display names"
            )

        self.locale = locale
        self._generator = generator_cls.createInstance(icu.Locale.forLanguageTag(locale))
        self._width = icu.UDateTimePGDisplayWidth.WIDE
        self._fields: Dict[FieldKind, Any] = {
            kind: getattr(icu.UDateTimePatternField, name)
            for kind, name in ICU_FIELDS.items()
        }

        # One real lookup so an unusable generator fails here, not in of()
        self.of(FieldKind.YEAR)

    def of(self, field: FieldLike) -> str:
        kind = FieldKind.parse(field)
        return str(self._generator.getFieldDisplayName(self._fields[kind], self._width))

    def __repr__(self) -> str:
        return f"NativeDisplayNames({self.locale!r})"


class BundledDisplayNames:
    """Field names from the bundled translation tables."""

    def __init__(self, locale: str, dictionary: Optional[LocalizedStringDictionary] = None):
        self.locale = locale
        self.dictionary = dictionary or LocalizedStringDictionary.bundled()

    def of(self, field: FieldLike) -> str:
        return self.dictionary.get_string_for_locale(FieldKind.parse(field).value, self.locale)

    def __repr__(self) -> str:
        return f"BundledDisplayNames({self.locale!r})"


def create_display_names(
    locale: str,
    dictionary: Optional[LocalizedStringDictionary] = None,
    prefer_native: bool = True,
) -> DisplayNames:
    """
    Return a :class:`DisplayNames` bound to ``locale``.

    Args:
        locale: Locale tag the names are wanted in.
        dictionary: Tables for the bundled strategy. Defaults to the package's
            own translations.
        prefer_native: Try ICU first. When False the bundled tables are always
            used.

    Returns:
        DisplayNames: The native strategy if it could be constructed, otherwise
        the bundled one. The choice is final for the returned object.
    """
    if prefer_native:
        try:
            native = NativeDisplayNames(locale)
        except Exception as e:
            logger.debug("Native display names unavailable for %s: %s", locale, e)
        else:
            logger.debug("Using ICU display names for %s", locale)
            return native

    logger.debug("Using bundled display names for %s", locale)
    return BundledDisplayNames(locale, dictionary)
