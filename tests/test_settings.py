from __future__ import annotations

import json

from datefield_names import DisplayNamesSettings, load_settings, settings_from_file


def test_load_settings_missing_file_is_empty(tmp_path):
    assert load_settings(tmp_path / "settings.json") == {}


def test_load_settings_broken_json_is_empty(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("{broken", encoding="utf-8")

    assert load_settings(settings_file) == {}


def test_load_settings_non_object_is_empty(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(["fr-FR"]), encoding="utf-8")

    assert load_settings(settings_file) == {}


def test_settings_from_file(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(
        json.dumps({"default_locale": "fr-FR", "prefer_native": False}), encoding="utf-8"
    )

    settings = settings_from_file(settings_file)

    assert settings.default_locale == "fr-FR"
    assert settings.prefer_native is False
    assert settings.fallback_locale == "en-US"
    assert settings.translations_dir is None


def test_unknown_and_mistyped_values_are_skipped():
    settings = DisplayNamesSettings.from_dict(
        {"prefer_native": "no", "theme": "dark", "fallback_locale": "de-DE"}
    )

    assert settings == DisplayNamesSettings(fallback_locale="de-DE")


def test_fallback_locale_that_is_not_a_locale_is_skipped(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"fallback_locale": "not a locale!"}), encoding="utf-8")

    assert settings_from_file(settings_file).fallback_locale == "en-US"
