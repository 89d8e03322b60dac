"""
Softbreak Segmentation Package

Feature-weighted boundary scoring over immutable weight tables. This
package depends only on the standard library.
"""

from .features import extract_features
from .model import FeatureKey, Model
from .parser import DEFAULT_THRESHOLD, Parser, parse

__all__ = ["extract_features", "FeatureKey", "Model", "DEFAULT_THRESHOLD", "Parser", "parse"]
