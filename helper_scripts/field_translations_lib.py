"""Library helpers for maintaining the bundled field-name tables.

The CLI wrappers live in `helper_scripts/check_field_translations.py` and
`helper_scripts/fill_field_translations.py`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from datefield_names import FieldKind
from datefield_names.dictionary import TRANSLATIONS_DIR

LOG = logging.getLogger("field_translations")

REFERENCE_LOCALE = "en-US"
FIELD_KEYS = [kind.value for kind in FieldKind]

# For each language code (from filename, e.g. "sr" from "sr-SP.json"),
# try these candidates *in order* as LibreTranslate "target" codes.
LANGUAGE_FALLBACKS: Dict[str, List[str]] = {
    "bg": ["bg", "ru", "en"],
    "cs": ["cs", "sk", "en"],
    "da": ["da", "nb", "sv", "en"],
    "et": ["et", "fi", "en"],
    "hr": ["hr", "sr", "en"],
    "lv": ["lv", "lt", "en"],
    "nb": ["nb", "nn", "sv", "en"],
    "nl": ["nl", "de", "en"],
    "pt": ["pt", "es", "en"],
    "sk": ["sk", "cs", "en"],
    "sl": ["sl", "hr", "en"],
    "sr": ["sr", "hr", "ru", "en"],
    "sv": ["sv", "nb", "da", "en"],
    "uk": ["uk", "ru", "en"],
    "zh": ["zh-Hans", "zh", "zh-Hant", "en"],
}


@dataclass
class TableReport:
    """What is wrong (or suspicious) about one locale table."""

    locale: str
    missing: List[str] = field(default_factory=list)
    unknown: List[str] = field(default_factory=list)
    same_as_reference: int = 0
    compared: int = 0
    error: Optional[str] = None

    @property
    def complete(self) -> bool:
        return not self.missing and self.error is None

    @property
    def reference_fraction(self) -> float:
        return self.same_as_reference / self.compared if self.compared else 0.0


def default_translations_dir() -> Path:
    return TRANSLATIONS_DIR


def load_json(path: Path) -> Dict[str, str]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_json(path: Path, data: Dict[str, str]) -> None:
    temp_path = path.with_suffix(path.suffix + ".tmp")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.write("\n")
    temp_path.replace(path)


def locale_files(translations_dir: Path) -> List[Path]:
    return sorted(translations_dir.glob("*.json"))


def missing_keys(table: Dict[str, str]) -> List[str]:
    """Field keys with no entry or an empty label, in field order."""
    return [key for key in FIELD_KEYS if not table.get(key)]


def ordered_table(table: Dict[str, str]) -> Dict[str, str]:
    """Field keys first in field order, anything else after, sorted."""
    ordered = {key: table[key] for key in FIELD_KEYS if key in table}
    for key in sorted(set(table) - set(FIELD_KEYS)):
        ordered[key] = table[key]
    return ordered


def check_table(locale: str, table: Dict[str, str], reference: Dict[str, str]) -> TableReport:
    report = TableReport(locale=locale)
    report.missing = missing_keys(table)
    report.unknown = sorted(set(table) - set(FIELD_KEYS))

    # English-likeness only means something for other languages
    if locale.split("-")[0] != REFERENCE_LOCALE.split("-")[0]:
        for key, ref_value in reference.items():
            if key in FIELD_KEYS and table.get(key):
                report.compared += 1
                if table[key] == ref_value:
                    report.same_as_reference += 1
    return report


def resolve_target_language(lang: str, supported: List[str]) -> str:
    supported_set = set(supported)
    candidates = LANGUAGE_FALLBACKS.get(lang, [lang, "en"])
    for cand in candidates:
        if cand in supported_set:
            LOG.debug("Resolved language '%s' -> target '%s'", lang, cand)
            return cand

    LOG.warning(
        "No candidate target language for '%s' found in supported set; "
        "falling back to 'en'",
        lang,
    )
    return "en"
