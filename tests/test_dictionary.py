from __future__ import annotations

import json

import pytest

from datefield_names import FieldKind, LocalizedStringDictionary, MissingTranslationError

MESSAGES = {
    "en-US": {"month": "month", "year": "year"},
    "fr-FR": {"month": "mois", "year": "année"},
    "pt": {"month": "mês"},
    "de-DE": {},
}


@pytest.fixture
def dictionary():
    return LocalizedStringDictionary(MESSAGES)


def test_exact_locale(dictionary):
    assert dictionary.get_string_for_locale("month", "fr-FR") == "mois"


def test_posix_spelling_is_normalised(dictionary):
    assert dictionary.get_string_for_locale("month", "fr_FR.UTF-8") == "mois"


def test_region_falls_back_to_same_language(dictionary):
    assert dictionary.get_string_for_locale("month", "fr-CA") == "mois"


def test_region_falls_back_to_bare_language(dictionary):
    assert dictionary.get_string_for_locale("month", "pt-BR") == "mês"


@pytest.mark.parametrize("locale", ["xx-ZZ", "ja-JP", "not a locale!"])
def test_unknown_locale_uses_default(dictionary, locale):
    assert dictionary.get_string_for_locale("year", locale) == "year"


def test_empty_tables_are_dropped(dictionary):
    assert "de-DE" not in dictionary.locales
    assert dictionary.get_string_for_locale("year", "de-DE") == "year"


def test_missing_key_raises(dictionary):
    with pytest.raises(MissingTranslationError) as excinfo:
        dictionary.get_string_for_locale("year", "pt-BR")

    assert excinfo.value.key == "year"
    assert excinfo.value.locale == "pt-BR"
    assert isinstance(excinfo.value, KeyError)


def test_resolved_table_is_memoised(dictionary):
    first = dictionary.get_strings_for_locale("fr-CA")
    assert dictionary.get_strings_for_locale("fr-CA") is first


def test_custom_default_locale():
    dictionary = LocalizedStringDictionary(MESSAGES, default_locale="fr_FR")
    assert dictionary.get_string_for_locale("month", "xx-ZZ") == "mois"


def test_from_directory_skips_broken_files(tmp_path, caplog):
    (tmp_path / "en-US.json").write_text(json.dumps({"day": "day"}), encoding="utf-8")
    (tmp_path / "it_IT.json").write_text(json.dumps({"day": "giorno"}), encoding="utf-8")
    (tmp_path / "fr-FR.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "es-ES.json").write_text(json.dumps(["día"]), encoding="utf-8")

    dictionary = LocalizedStringDictionary.from_directory(tmp_path)

    assert dictionary.locales == ["en-US", "it-IT"]
    assert dictionary.get_string_for_locale("day", "it") == "giorno"
    assert "fr-FR.json" in caplog.text
    assert "es-ES.json" in caplog.text


def test_bundled_tables_cover_every_field_kind():
    dictionary = LocalizedStringDictionary.bundled()

    assert len(dictionary.locales) == 34
    for locale in dictionary.locales:
        strings = dictionary.get_strings_for_locale(locale)
        missing = [kind.value for kind in FieldKind if not strings.get(kind.value)]
        assert not missing, f"{locale} is missing {missing}"


def test_bundled_is_loaded_once():
    assert LocalizedStringDictionary.bundled() is LocalizedStringDictionary.bundled()
