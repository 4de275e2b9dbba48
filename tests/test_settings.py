"""Tests for settings persistence and preference cycling."""

import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from config.settings import (
    Settings,
    get_default_settings,
    load_settings,
    next_theme,
    next_view_type,
    save_settings,
)
from constants import API_BASE_URL


def test_defaults():
    defaults = get_default_settings()
    assert defaults["api_base_url"] == API_BASE_URL
    assert defaults["view_type"] == "grid"
    assert defaults["theme"] == "system"
    assert defaults["filter_uploads"] is False


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "config" / "config.json"

    settings = load_settings(str(path))

    assert settings == get_default_settings()
    assert path.exists()
    assert json.loads(path.read_text()) == get_default_settings()


def test_round_trip(tmp_path):
    path = str(tmp_path / "config.json")
    settings = get_default_settings()
    settings.update(theme="dark", view_type="list", filter_uploads=True)

    assert save_settings(settings, path) is True
    assert load_settings(path) == settings


def test_unknown_keys_dropped_and_missing_keys_filled(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "light", "roms_dir": "/old/app"}))

    settings = load_settings(str(path))

    assert "roms_dir" not in settings
    assert settings["theme"] == "light"
    assert settings["web_companion_port"] == get_default_settings()["web_companion_port"]


def test_invalid_choices_fall_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "neon", "view_type": "carousel"}))

    settings = load_settings(str(path))

    assert settings["theme"] == "system"
    assert settings["view_type"] == "grid"


def test_corrupt_file_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_settings(str(path)) == get_default_settings()


def test_from_dict_filters_unknown_keys():
    settings = Settings.from_dict({"view_type": "list", "bogus": 1})
    assert settings.view_type == "list"
    assert not hasattr(settings, "bogus")


def test_theme_cycle():
    assert next_theme("light") == "dark"
    assert next_theme("dark") == "system"
    assert next_theme("system") == "light"
    assert next_theme("unknown") == "light"


def test_view_toggle():
    assert next_view_type("grid") == "list"
    assert next_view_type("list") == "grid"
