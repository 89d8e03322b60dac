"""Tests for the immutable weight table."""

import pytest

from softbreak.segmentation.model import FeatureKey, Model

pytestmark = pytest.mark.unit


def test_get_returns_weight():
    model = Model({FeatureKey.UW4: {"a": 42}, "BW2": {"ab": -7}})
    assert model.get(FeatureKey.UW4, "a") == 42
    assert model.get("BW2", "ab") == -7


def test_get_defaults_to_zero():
    model = Model({"UW4": {"a": 42}})
    assert model.get(FeatureKey.UW4, "b") == 0
    assert model.get(FeatureKey.TW1, "abc") == 0
    assert model.get("NOPE", "a") == 0
    assert Model().get(FeatureKey.BASE, "") == 0


def test_unknown_category_rejected_at_construction():
    with pytest.raises(ValueError, match="unknown feature category"):
        Model({"UW7": {"a": 1}})


def test_model_is_read_only():
    source = {"UW4": {"a": 1}}
    model = Model(source)
    source["UW4"]["a"] = 999
    assert model.get("UW4", "a") == 1

    with pytest.raises(TypeError):
        model.weights(FeatureKey.UW4)["a"] = 5  # type: ignore[index]


def test_totals_and_introspection():
    model = Model({"UW1": {"a": 3, "b": -1}, "TW2": {"abc": 10}})
    assert model.total_weight() == 12
    assert len(model) == 3
    assert set(model.categories()) == {FeatureKey.UW1, FeatureKey.TW2}
    assert not model.has_base()
    assert model.to_dict() == {"UW1": {"a": 3, "b": -1}, "TW2": {"abc": 10}}
    assert Model(model.to_dict()) == model


def test_feature_key_is_closed():
    names = [key.value for key in FeatureKey]
    assert names == [
        "UW1", "UW2", "UW3", "UW4", "UW5", "UW6",
        "BW1", "BW2", "BW3",
        "TW1", "TW2", "TW3", "TW4",
        "BASE",
    ]
