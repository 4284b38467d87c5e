from __future__ import annotations

from types import SimpleNamespace

import pytest

from datefield_names import display_names as display_names_module
from datefield_names.display_names import ICU_FIELDS, PlatformUnsupportedError

# Labels the fake ICU hands out, keyed by language then ICU field constant
FAKE_ICU_LABELS = {
    "en": {name: name.replace("_FIELD", "").lower() for name in ICU_FIELDS.values()},
    "fr": {"YEAR_FIELD": "année", "MONTH_FIELD": "mois", "DAY_FIELD": "jour"},
    "de": {"YEAR_FIELD": "Jahr", "MONTH_FIELD": "Monat", "DAY_FIELD": "Tag"},
}


class FakeLocale:
    def __init__(self, tag):
        self.tag = tag

    @classmethod
    def forLanguageTag(cls, tag):
        return cls(tag)


class FakeGenerator:
    def __init__(self, locale):
        self.locale = locale
        self.calls = []

    def getFieldDisplayName(self, field, width):
        assert width == "WIDE"
        self.calls.append(field)
        language = self.locale.tag.split("-")[0]
        labels = FAKE_ICU_LABELS.get(language, FAKE_ICU_LABELS["en"])
        return labels.get(field, FAKE_ICU_LABELS["en"][field])


def make_fake_icu(with_display_names=True):
    generators = []

    def create_instance(locale):
        generator = FakeGenerator(locale)
        generators.append(generator)
        return generator

    if with_display_names:
        generator_cls = type("DateTimePatternGenerator", (FakeGenerator,), {})
    else:
        # An ICU older than 61 has the generator but not the field names
        generator_cls = type("DateTimePatternGenerator", (), {})
    generator_cls.createInstance = staticmethod(create_instance)

    module = SimpleNamespace(
        ICU_VERSION="74.2" if with_display_names else "60.2",
        Locale=FakeLocale,
        DateTimePatternGenerator=generator_cls,
        UDateTimePatternField=SimpleNamespace(**{name: name for name in ICU_FIELDS.values()}),
        generators=generators,
    )
    if with_display_names:
        module.UDateTimePGDisplayWidth = SimpleNamespace(WIDE="WIDE")
    return module


@pytest.fixture
def fake_icu(monkeypatch):
    """Pretend PyICU is installed and can name date/time fields."""
    module = make_fake_icu()
    monkeypatch.setattr(display_names_module, "_import_icu", lambda: module)
    return module


@pytest.fixture
def old_icu(monkeypatch):
    """Pretend PyICU is installed but linked against an ICU without field names."""
    module = make_fake_icu(with_display_names=False)
    monkeypatch.setattr(display_names_module, "_import_icu", lambda: module)
    return module


@pytest.fixture
def no_icu(monkeypatch):
    """Pretend PyICU is not installed."""

    def _raise():
        raise PlatformUnsupportedError("PyICU is not installed")

    monkeypatch.setattr(display_names_module, "_import_icu", _raise)
