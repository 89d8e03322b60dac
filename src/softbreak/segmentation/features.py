"""
Character-window features around a candidate boundary.

Boundary ``i`` sits between ``text[i - 1]`` and ``text[i]``. The window
offsets must match the ones the weight tables were trained with.
"""

from typing import Tuple

from .model import EMPTY, FeatureKey

Feature = Tuple[FeatureKey, str]

# (category, start offset, end offset) relative to the boundary
WINDOWS: Tuple[Tuple[FeatureKey, int, int], ...] = (
    (FeatureKey.UW1, -3, -2),
    (FeatureKey.UW2, -2, -1),
    (FeatureKey.UW3, -1, 0),
    (FeatureKey.UW4, 0, 1),
    (FeatureKey.UW5, 1, 2),
    (FeatureKey.UW6, 2, 3),
    (FeatureKey.BW1, -2, 0),
    (FeatureKey.BW2, -1, 1),
    (FeatureKey.BW3, 0, 2),
    (FeatureKey.TW1, -3, 0),
    (FeatureKey.TW2, -2, 1),
    (FeatureKey.TW3, -1, 2),
    (FeatureKey.TW4, 0, 3),
)


def window(text: str, start: int, end: int) -> str:
    """Slice ``text[start:end]`` with both offsets clamped to the text.

    A window hanging over either edge keeps only its in-text part, so
    ``window("abc", -1, 1) == "a"``.
    """
    return text[max(start, 0) : max(end, 0)]


def extract_features(text: str, i: int) -> Tuple[Feature, ...]:
    """Return the ordered (category, value) pairs for boundary ``i``."""
    features = [(key, window(text, i + start, i + end)) for key, start, end in WINDOWS]
    features.append((FeatureKey.BASE, EMPTY))
    return tuple(features)
