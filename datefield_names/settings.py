# settings.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .locale_utils import DEFAULT_LOCALE, try_normalize_locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayNamesSettings:
    """Knobs for :class:`~datefield_names.manager.DisplayNamesManager`."""

    default_locale: Optional[str] = None
    fallback_locale: str = DEFAULT_LOCALE
    prefer_native: bool = True
    translations_dir: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DisplayNamesSettings":
        """Build settings from a dict, skipping unknown keys and mistyped values."""
        expected = {
            "default_locale": str,
            "fallback_locale": str,
            "prefer_native": bool,
            "translations_dir": str,
        }
        known = {f.name for f in fields(cls)}

        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.debug("Ignoring unknown setting %r", key)
                continue
            if not isinstance(value, expected[key]):
                logger.warning("Ignoring setting %r: expected %s", key, expected[key].__name__)
                continue
            if key == "fallback_locale" and try_normalize_locale(value) is None:
                logger.warning("Ignoring setting %r: %r is not a locale", key, value)
                continue
            kwargs[key] = value
        return cls(**kwargs)


def load_settings(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a JSON settings file, returning {} if missing or invalid."""
    path = Path(path)
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        # Broken JSON? Just ignore and use defaults.
        logger.warning("Could not read settings from %s: %s", path, e)
        return {}


def settings_from_file(path: Union[str, Path]) -> DisplayNamesSettings:
    return DisplayNamesSettings.from_dict(load_settings(path))
