"""Global test configuration for softbreak tests."""

import json

import pytest
import structlog

from softbreak import loader
from softbreak.core import config
from softbreak.core.logging import configure_default
from softbreak.segmentation import Model, Parser


@pytest.fixture(autouse=True)
def isolate_globals(monkeypatch):
    """Fresh settings, model cache and logging config for every test."""
    monkeypatch.setattr(config, "SETTINGS", config.Settings())
    loader.clear_cache()
    yield
    loader.clear_cache()
    structlog.reset_defaults()
    configure_default()


@pytest.fixture
def break_before_b():
    """Model that breaks before every 'b' and nowhere else."""
    return Model({"UW4": {"b": 10_000}})


@pytest.fixture
def b_parser(break_before_b):
    return Parser(break_before_b)


@pytest.fixture
def model_file(tmp_path):
    """Upstream-style table (no BASE) written to disk."""
    path = tmp_path / "model.json"
    path.write_text(json.dumps({"UW4": {"b": 10_000}}), encoding="utf-8")
    return path


@pytest.fixture
def ja_parser():
    pytest.importorskip("budoux")
    return loader.load_parser("ja")
