"""
Locale identifier helpers.

Callers hand us whatever their environment produces: BCP-47 tags from a
browser or config file ("fr-CA"), POSIX names from the OS ("fr_CA.UTF-8",
"sr_RS@latin"), or the odd lowercase variant. Everything is normalised to
BCP-47 so the rest of the package only ever compares one spelling.
"""

import locale as _locale
import logging
from typing import Optional

from babel.core import default_locale, parse_locale

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"


def normalize_locale(locale_str: str) -> str:
    """
    Normalise a locale string to ``language[-Script][-REGION]``.

    Args:
        locale_str: Raw locale string in BCP-47 or POSIX form.

    Returns:
        str: Normalised locale tag, e.g. ``"zh-Hant-TW"``.

    Raises:
        ValueError: If the string is empty or not a locale identifier.
    """
    if not locale_str or not locale_str.strip():
        raise ValueError("empty locale identifier")

    parts = parse_locale(locale_str.strip().replace("_", "-"), sep="-")
    language, territory, script = parts[0], parts[1], parts[2]

    tag = language
    if script:
        tag += f"-{script}"
    if territory:
        tag += f"-{territory}"
    return tag


def get_language(locale_str: str) -> str:
    """Return the bare language subtag of a locale, e.g. ``"fr"`` for ``"fr-CA"``."""
    return normalize_locale(locale_str).split("-", 1)[0]


def detect_system_locale(fallback: str = DEFAULT_LOCALE) -> str:
    """
    Detect the user's locale from the environment.

    Tries, in order, the POSIX environment variables (LANGUAGE, LC_ALL,
    LC_CTYPE, LANG) through Babel and then Python's ``locale`` module.

    Returns:
        str: Normalised locale tag, or ``fallback`` when nothing usable is set.
    """
    candidates = []

    # Method 1: environment variables
    try:
        candidates.append(default_locale())
    except Exception as e:
        logger.debug("Babel could not read the environment locale: %s", e)

    # Method 2: Python locale module
    try:
        candidates.append(_locale.getlocale()[0])
    except (ValueError, TypeError) as e:
        logger.debug("locale.getlocale() failed: %s", e)

    for candidate in candidates:
        if not candidate or candidate in ("C", "POSIX"):
            continue
        try:
            return normalize_locale(candidate)
        except ValueError:
            logger.debug("Ignoring unusable system locale %r", candidate)

    return fallback


def try_normalize_locale(locale_str: Optional[str]) -> Optional[str]:
    """Like :func:`normalize_locale` but returns ``None`` instead of raising."""
    if not locale_str:
        return None
    try:
        return normalize_locale(locale_str)
    except ValueError:
        logger.warning("Unrecognised locale identifier: %r", locale_str)
        return None
