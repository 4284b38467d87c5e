"""Closed set of date/time field kinds that can be given a display name."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Union


class FieldKind(str, Enum):
    """A date/time component whose label is shown in the UI.

    Values double as the keys of the bundled translation tables.
    """

    ERA = "era"
    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "weekOfYear"
    WEEKDAY = "weekday"
    DAY = "day"
    DAY_PERIOD = "dayPeriod"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    TIME_ZONE_NAME = "timeZoneName"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["FieldKind", str]) -> "FieldKind":
        """Return the field kind named by ``value``.

        Accepts a member, its value (``"dayPeriod"``), its name
        (``"DAY_PERIOD"``) or a spelled-out alias such as ``"day-period"``,
        ``"week"`` or ``"day of week"``.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Not a date/time field kind: {value!r}")

        key = "".join(ch for ch in value.lower() if ch.isalnum())
        try:
            return _LOOKUP[key]
        except KeyError:
            raise ValueError(f"Not a date/time field kind: {value!r}") from None


def _build_lookup() -> Dict[str, FieldKind]:
    lookup: Dict[str, FieldKind] = {}
    for kind in FieldKind:
        lookup[kind.value.lower()] = kind
        lookup[kind.name.lower().replace("_", "")] = kind

    # Common spellings that match neither the value nor the member name
    aliases = {
        "week": FieldKind.WEEK,
        "weekofyear": FieldKind.WEEK,
        "dayofweek": FieldKind.WEEKDAY,
        "dayoftheweek": FieldKind.WEEKDAY,
        "ampm": FieldKind.DAY_PERIOD,
        "timezone": FieldKind.TIME_ZONE_NAME,
        "zone": FieldKind.TIME_ZONE_NAME,
    }
    lookup.update(aliases)
    return lookup


_LOOKUP = _build_lookup()
