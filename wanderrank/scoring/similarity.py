from __future__ import annotations

from typing import Iterable


def jaccard(a: Iterable[str], b: Iterable[str]) -> float:
    """Return ``|a ∩ b| / |a ∪ b|``; two empty collections give 0.0."""
    set_a, set_b = set(a), set(b)
    union = len(set_a | set_b) or 1
    return len(set_a & set_b) / union
