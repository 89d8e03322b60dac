"""Model ingestion: JSON weight tables, model files and the vendored languages.

Vendored tables come from ``MODEL_DIR`` when configured, otherwise from the
``budoux`` distribution, which packages the upstream tables as
``budoux/models/<lang>.json``. Upstream tables carry no ``BASE`` entry;
their decision rule is ``sum(weights) > total / 2``. :func:`with_derived_base`
folds that rule into a ``BASE`` weight so the ``> threshold`` comparison
accepts exactly the same boundaries.
"""

from __future__ import annotations

import functools
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import StrictInt, TypeAdapter, ValidationError

from .core import config
from .core.errors import InvalidModelFormat, ModelUnavailable
from .core.logging import log
from .segmentation.model import EMPTY, FeatureKey, Model
from .segmentation.parser import DEFAULT_THRESHOLD, Parser

LANGUAGES = ("ja", "zh-hans", "zh-hant", "th")

_TABLE = TypeAdapter(Dict[FeatureKey, Dict[str, StrictInt]])


def load_from_data(data: Union[str, bytes, Mapping[str, Any]]) -> Model:
    """Build a Model from JSON text or an already-decoded mapping.

    Raises:
        InvalidModelFormat: malformed JSON, unknown category, non-object
            category value or non-integer weight.
    """
    try:
        if isinstance(data, (str, bytes, bytearray)):
            table = _TABLE.validate_json(data)
        else:
            table = _TABLE.validate_python(data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise InvalidModelFormat(
            f"invalid model data at {where}: {first['msg']}"
        ) from e
    return Model(table)


def with_derived_base(model: Model, threshold: int = DEFAULT_THRESHOLD) -> Model:
    """Return ``model`` with a BASE weight equivalent to the upstream rule.

    ``s > total / 2`` holds for integer ``s`` exactly when
    ``s > total // 2``, so ``BASE = threshold - total // 2``.
    Models that already define BASE are returned unchanged.
    """
    if model.has_base():
        return model
    base = threshold - model.total_weight() // 2
    log.debug("model_base_derived", base=base, threshold=threshold)
    table = model.to_dict()
    table[FeatureKey.BASE.value] = {EMPTY: base}
    return Model(table)


def load_file(
    path: Union[str, Path],
    threshold: int = DEFAULT_THRESHOLD,
    derive_base: bool = True,
) -> Model:
    """Load a model JSON file.

    Raises:
        ModelUnavailable: the file does not exist or cannot be read.
        InvalidModelFormat: the file is not a valid weight table.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ModelUnavailable(
            f"cannot read model file {path}: {e.strerror or e}", source=str(path)
        ) from e

    try:
        model = load_from_data(raw)
    except InvalidModelFormat as e:
        e.source = str(path)
        raise
    if derive_base:
        model = with_derived_base(model, threshold)
    log.debug("model_loaded", source=str(path), entries=len(model))
    return model


def _read_vendored(language: str, model_dir: Optional[str]) -> tuple[bytes, str]:
    if model_dir:
        candidate = Path(model_dir) / f"{language}.json"
        if candidate.is_file():
            return candidate.read_bytes(), str(candidate)

    try:
        resource = resources.files("budoux") / "models" / f"{language}.json"
    except ModuleNotFoundError as e:
        raise ModelUnavailable(
            f"no bundled model for {language!r}: install softbreak[vendored] "
            "or set SOFTBREAK_MODEL_DIR",
            source=language,
        ) from e
    if not resource.is_file():
        raise ModelUnavailable(
            f"bundled model for {language!r} is missing", source=language
        )
    return resource.read_bytes(), f"budoux:models/{language}.json"


@functools.lru_cache(maxsize=None)
def _load_vendored(language: str, threshold: int, model_dir: Optional[str]) -> Model:
    raw, source = _read_vendored(language, model_dir)
    model = with_derived_base(load_from_data(raw), threshold)
    log.debug("model_loaded", language=language, source=source, entries=len(model))
    return model


def load(
    language: str,
    threshold: int = DEFAULT_THRESHOLD,
    model_dir: Optional[str] = None,
) -> Model:
    """Return the vendored Model for ``language``.

    Args:
        language: one of :data:`LANGUAGES`.
        threshold: threshold the derived BASE weight is calibrated for.
        model_dir: directory checked for ``<language>.json`` first;
            defaults to ``SETTINGS.MODEL_DIR``.

    Raises:
        ModelUnavailable: unknown language or the table is not bundled.
    """
    if language not in LANGUAGES:
        raise ModelUnavailable(
            f"unknown language {language!r}; available: {', '.join(LANGUAGES)}",
            source=language,
        )
    if model_dir is None:
        model_dir = config.SETTINGS.MODEL_DIR
    return _load_vendored(language, threshold, model_dir)


def load_parser(language: str, threshold: int = DEFAULT_THRESHOLD) -> Parser:
    return Parser(load(language, threshold), threshold)


def load_default_parsers(threshold: int = DEFAULT_THRESHOLD) -> Dict[str, Parser]:
    """Parsers for every vendored language whose table is available."""
    parsers = {}
    for language in LANGUAGES:
        try:
            parsers[language] = load_parser(language, threshold)
        except ModelUnavailable as e:
            log.warning("model_unavailable", language=language, error=str(e))
    return parsers


def clear_cache() -> None:
    _load_vendored.cache_clear()
