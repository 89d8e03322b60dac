"""Soft line-break hints for text written without spaces."""

from .segmentation import DEFAULT_THRESHOLD, FeatureKey, Model, Parser, parse

__version__ = "0.1.0"

__all__ = ["DEFAULT_THRESHOLD", "FeatureKey", "Model", "Parser", "parse", "__version__"]
