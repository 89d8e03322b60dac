"""Tests for structured logging setup."""

import json

import pytest
import structlog

from softbreak import loader
from softbreak.core.logging import configure_default, log, setup_logging

pytestmark = pytest.mark.unit


def test_json_logs_go_to_stderr(capsys):
    setup_logging("json")
    log.info("model_loaded", language="ja", entries=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "model_loaded"
    assert record["level"] == "info"
    assert record["language"] == "ja"
    assert "timestamp" in record


def test_plain_logs(capsys):
    setup_logging("plain")
    log.warning("model_unavailable", language="th")

    err = capsys.readouterr().err
    assert "model_unavailable" in err
    assert "language=th" in err


def test_auto_uses_json_in_ci(capsys, monkeypatch):
    monkeypatch.setenv("CI", "1")
    setup_logging("auto")
    log.info("html_translated", chars=10)

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["event"] == "html_translated"


def test_library_default_keeps_stdout_clean(capsys, model_file):
    structlog.reset_defaults()
    configure_default()

    loader.load_file(model_file)
    log.info("html_translated", chars=10)
    log.warning("model_unavailable", language="th")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "model_loaded" not in captured.err
    assert "html_translated" not in captured.err
    assert "model_unavailable" in captured.err


def test_default_leaves_existing_configuration(capsys):
    setup_logging("json")
    configure_default()
    log.info("model_loaded", language="ja")

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["event"] == "model_loaded"


def test_level_filters_debug(capsys, model_file):
    setup_logging("json", level="info")
    loader.load_file(model_file)
    assert "model_loaded" not in capsys.readouterr().err

    setup_logging("json", level="debug")
    loader.load_file(model_file)
    assert "model_loaded" in capsys.readouterr().err


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="unknown log level"):
        setup_logging("plain", level="loud")
