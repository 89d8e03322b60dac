"""
Boundary scoring over a weight table.
"""

from typing import List

from .features import extract_features
from .model import Model

DEFAULT_THRESHOLD = 1000


class Parser:
    """Splits text into chunks at positions whose feature score beats the threshold.

    Parsers hold no mutable state; one instance can serve any number of
    concurrent calls.
    """

    def __init__(self, model: Model, threshold: int = DEFAULT_THRESHOLD):
        self.model = model
        self.threshold = threshold

    def score(self, text: str, i: int) -> int:
        """Summed feature weight for the boundary before ``text[i]``."""
        return sum(self.model.get(key, value) for key, value in extract_features(text, i))

    def parse_boundaries(self, text: str) -> List[int]:
        """Interior boundary positions, in code points, ascending."""
        return [i for i in range(1, len(text)) if self.score(text, i) > self.threshold]

    def parse(self, text: str) -> List[str]:
        """Split ``text`` into chunks; ``"".join(result) == text``."""
        if not text:
            return []
        return split_at(text, self.parse_boundaries(text))

    def __repr__(self) -> str:
        return f"Parser(model={self.model!r}, threshold={self.threshold})"


def split_at(text: str, boundaries: List[int]) -> List[str]:
    """Cut ``text`` at ascending interior positions."""
    chunks = []
    start = 0
    for boundary in boundaries:
        chunks.append(text[start:boundary])
        start = boundary
    chunks.append(text[start:])
    return chunks


def parse(text: str, model: Model, threshold: int = DEFAULT_THRESHOLD) -> List[str]:
    """One-shot ``Parser(model, threshold).parse(text)``."""
    return Parser(model, threshold).parse(text)
