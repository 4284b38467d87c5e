#!/usr/bin/env python3
"""
Report on the bundled date/time field tables.

For every `<locale>.json` the script lists:
- field keys that are missing or empty (the table is then "incomplete"),
- keys that are not field kinds at all,
- the fraction of labels identical to the en-US reference, which usually
  means somebody pasted English in instead of translating.

Exit status is 1 when any table is incomplete, so this can gate CI.

Run from the project root:

    python -m helper_scripts.check_field_translations
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from helper_scripts.field_translations_lib import (
    FIELD_KEYS,
    REFERENCE_LOCALE,
    TableReport,
    check_table,
    default_translations_dir,
    load_json,
    locale_files,
)

LOG = logging.getLogger("check_field_translations")

# Flag a table as "probably English" at this fraction or higher.
THRESHOLD = 0.75


def check_directory(translations_dir: Path) -> List[TableReport]:
    reference_file = translations_dir / f"{REFERENCE_LOCALE}.json"
    if not reference_file.is_file():
        raise SystemExit(f"Reference file not found: {reference_file}")

    try:
        reference = load_json(reference_file)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Reference file unreadable: {reference_file}: {exc}")
    reports = []
    for path in locale_files(translations_dir):
        try:
            table = load_json(path)
        except (OSError, ValueError) as exc:
            reports.append(TableReport(path.stem, missing=list(FIELD_KEYS), error=str(exc)))
            continue
        if not isinstance(table, dict):
            reports.append(
                TableReport(path.stem, missing=list(FIELD_KEYS), error="not a JSON object")
            )
            continue
        reports.append(check_table(path.stem, table, reference))
    return reports


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--translations-dir",
        default=str(default_translations_dir()),
        help="Directory containing locale JSON files (default: %(default)s)",
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

    reports = check_directory(translations_dir)
    incomplete = 0
    for report in reports:
        LOG.debug(
            "%-7s same=%2d/%2d frac=%0.2f",
            report.locale,
            report.same_as_reference,
            report.compared,
            report.reference_fraction,
        )
        if report.error:
            incomplete += 1
            LOG.error("%s is unreadable: %s", report.locale, report.error)
            continue
        if report.missing:
            incomplete += 1
            LOG.error("%s is missing: %s", report.locale, ", ".join(report.missing))
        if report.unknown:
            LOG.warning("%s has unknown keys: %s", report.locale, ", ".join(report.unknown))
        if report.reference_fraction >= THRESHOLD:
            LOG.warning(
                "%s looks untranslated (%0.0f%% identical to %s)",
                report.locale,
                report.reference_fraction * 100,
                REFERENCE_LOCALE,
            )

    LOG.info("Checked %d tables, %d incomplete.", len(reports), incomplete)
    return 1 if incomplete else 0


if __name__ == "__main__":
    sys.exit(main())
