#!/usr/bin/env python3
"""
Fill missing date/time field labels in the bundled locale tables.

Labels can come from ICU (`--source icu`, needs PyICU) or from a local
LibreTranslate server (`--source libretranslate`). Only missing or empty keys
are filled unless `--force` is given. Run from the project root:

    python -m helper_scripts.fill_field_translations --source icu
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from datefield_names import NativeDisplayNames, PlatformUnsupportedError
from helper_scripts.field_translations_lib import (
    FIELD_KEYS,
    REFERENCE_LOCALE,
    default_translations_dir,
    load_json,
    locale_files,
    missing_keys,
    ordered_table,
    resolve_target_language,
    save_json,
)
from helper_scripts.libretranslate_client import LibreTranslateClient

LOG = logging.getLogger("fill_field_translations")

# (locale, keys) -> {key: label}
LabelSource = Callable[[str, List[str]], Dict[str, str]]


def icu_source(locale: str, keys: List[str]) -> Dict[str, str]:
    names = NativeDisplayNames(locale)
    return {key: names.of(key) for key in keys}


def libretranslate_source(
    client: LibreTranslateClient, reference: Dict[str, str]
) -> LabelSource:
    supported = client.get_supported_codes()

    def translate(locale: str, keys: List[str]) -> Dict[str, str]:
        if locale == REFERENCE_LOCALE:
            return {key: reference[key] for key in keys if reference.get(key)}
        known = [key for key in keys if reference.get(key)]
        for key in sorted(set(keys) - set(known)):
            LOG.warning("No %s label for %s, cannot translate it", REFERENCE_LOCALE, key)
        if not known:
            return {}
        target = resolve_target_language(locale.split("-")[0], supported)
        texts = [reference[key] for key in known]
        return dict(zip(known, client.translate_batch(texts, "en", target)))

    return translate


def fill_table(
    path: Path,
    source: LabelSource,
    force: bool = False,
    dry_run: bool = False,
) -> List[str]:
    """Fill one table in place. Returns the keys that got (or would get) a label."""
    locale = path.stem
    current = load_json(path)

    keys = list(FIELD_KEYS) if force else missing_keys(current)
    if not keys:
        LOG.debug("All field keys present for %s", path.name)
        return []

    labels = source(locale, keys)
    written = []
    for key in keys:
        label = labels.get(key)
        if label:
            current[key] = label
            written.append(key)
        else:
            LOG.warning("No label for %s in %s", key, locale)

    if not written:
        return written
    if dry_run:
        LOG.info("[dry-run] would update %s: %s", path.name, ", ".join(written))
    else:
        save_json(path, ordered_table(current))
        LOG.info("Saved %d labels for %s", len(written), path.name)
    return written


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--translations-dir",
        default=str(default_translations_dir()),
        help="Directory containing locale JSON files (default: %(default)s)",
    )
    parser.add_argument(
        "--source",
        choices=("icu", "libretranslate"),
        default="icu",
        help="Where new labels come from (default: %(default)s)",
    )
    parser.add_argument(
        "--api-url",
        default=os.environ.get("LT_API_URL", "http://localhost:5000"),
        help="LibreTranslate API base URL (default: %(default)s or LT_API_URL env)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Replace every field label, not only missing ones.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Do everything except writing files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging (DEBUG).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    translations_dir = Path(args.translations_dir).resolve()
    LOG.info("Using translations directory: %s", translations_dir)

    if args.source == "icu":
        source: LabelSource = icu_source
    else:
        reference_file = translations_dir / f"{REFERENCE_LOCALE}.json"
        if not reference_file.is_file():
            raise SystemExit(f"Reference file not found: {reference_file}")
        client = LibreTranslateClient(base_url=args.api_url)
        source = libretranslate_source(client, load_json(reference_file))

    failures = 0
    for path in locale_files(translations_dir):
        try:
            fill_table(path, source, force=args.force, dry_run=args.dry_run)
        except PlatformUnsupportedError as exc:
            raise SystemExit(f"ICU cannot provide field names: {exc}")
        except Exception as exc:
            failures += 1
            LOG.error("Error processing %s: %s", path.name, exc)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
