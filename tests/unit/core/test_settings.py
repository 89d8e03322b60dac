"""Tests for settings loading."""

import pytest

from softbreak.core.config import Settings

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings()
    assert settings.DEFAULT_LANG == "ja"
    assert settings.THRESHOLD == 1000
    assert settings.SEPARATOR == "|"
    assert settings.MODEL_DIR is None
    assert settings.HTML_PARSER == "html.parser"
    assert settings.LOG_LEVEL == "info"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SOFTBREAK_THRESHOLD", "1500")
    monkeypatch.setenv("SOFTBREAK_DEFAULT_LANG", "th")
    settings = Settings()
    assert settings.THRESHOLD == 1500
    assert settings.DEFAULT_LANG == "th"


def test_yaml_config_file_below_env(tmp_path, monkeypatch):
    path = tmp_path / "softbreak.yaml"
    path.write_text("THRESHOLD: 1200\nSEPARATOR: /\n", encoding="utf-8")
    monkeypatch.setenv("SOFTBREAK_SEPARATOR", "+")

    settings = Settings.load_config(str(path))
    assert settings.THRESHOLD == 1200
    assert settings.SEPARATOR == "+"


def test_toml_config_file(tmp_path):
    path = tmp_path / "softbreak.toml"
    path.write_text('DEFAULT_LANG = "zh-hans"\nMAX_INPUT_CHARS = 10\n', encoding="utf-8")

    settings = Settings.load_config(str(path))
    assert settings.DEFAULT_LANG == "zh-hans"
    assert settings.MAX_INPUT_CHARS == 10


def test_auto_discovery(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".softbreak.yml").write_text("LOG_FORMAT: json\n", encoding="utf-8")
    assert Settings.load_config().LOG_FORMAT == "json"


def test_missing_config_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Settings.load_config().THRESHOLD == 1000
