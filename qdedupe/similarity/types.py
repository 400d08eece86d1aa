"""Type definitions for question similarity pairs.

A SimilarityPair is an unordered, scored edge between two question ids as
produced by a nearest-neighbour search over question embeddings. This module
validates pairs at the boundary and collapses repeated edges to one canonical
record per unordered pair.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

PairKey = tuple[str, str]
PairLike = Union["SimilarityPair", Mapping[str, Any], tuple[str, str, float]]


@dataclass(frozen=True)
class SimilarityPair:
    """A scored edge between two distinct question ids.

    Attributes:
        a_id: First question id
        b_id: Second question id
        score: Similarity score in [0,1]

    """

    a_id: str
    b_id: str
    score: float

    def __post_init__(self) -> None:
        """Validate pair data after initialization."""
        for name, value in (("a_id", self.a_id), ("b_id", self.b_id)):
            if not isinstance(value, str) or not value:
                raise ValueError(f"Pair {name} must be a non-empty string, got {value!r}")
        if self.a_id == self.b_id:
            raise ValueError(f"Self-pair is not allowed: {self.a_id!r}")
        if isinstance(self.score, bool) or not isinstance(self.score, (int, float)):
            raise ValueError(f"Pair score must be a number, got {self.score!r}")
        if math.isnan(self.score) or not 0 <= self.score <= 1:
            raise ValueError(
                f"Pair score {self.score} must be in [0,1] for ({self.a_id}, {self.b_id})"
            )

    @property
    def key(self) -> PairKey:
        """Canonical (sorted) id tuple for this pair."""
        if self.a_id <= self.b_id:
            return (self.a_id, self.b_id)
        return (self.b_id, self.a_id)

    def canonical(self) -> SimilarityPair:
        """Return this pair with its ids in lexicographic order."""
        a_id, b_id = self.key
        if a_id == self.a_id:
            return self
        return SimilarityPair(a_id, b_id, self.score)


def to_pair(raw: PairLike) -> SimilarityPair:
    """Coerce a pair-like value into a validated SimilarityPair.

    Accepts a SimilarityPair, an ``(a_id, b_id, score)`` tuple, or a mapping
    with ``a_id``/``b_id``/``score`` keys (``aId``/``bId`` are accepted too).

    Args:
        raw: Pair-like value

    Returns:
        Validated SimilarityPair

    Raises:
        ValueError: If the value is malformed

    """
    if isinstance(raw, SimilarityPair):
        return raw

    if isinstance(raw, Mapping):
        a_id = raw.get("a_id", raw.get("aId"))
        b_id = raw.get("b_id", raw.get("bId"))
        score = raw.get("score")
        if score is None:
            raise ValueError(f"Pair is missing a score: {dict(raw)!r}")
        return SimilarityPair(a_id, b_id, score)  # type: ignore[arg-type]

    if isinstance(raw, (tuple, list)) and len(raw) == 3:
        a_id, b_id, score = raw
        return SimilarityPair(a_id, b_id, score)

    raise ValueError(f"Unsupported pair format: {raw!r}")


def dedupe_pairs(pairs: Iterable[PairLike]) -> dict[PairKey, float]:
    """Validate pairs and collapse them to one score per unordered pair.

    When the same unordered pair appears more than once (for example found by
    the neighbour search from both endpoints), the highest score is kept.
    Every pair is validated before anything is returned.

    Args:
        pairs: Iterable of pair-like values

    Returns:
        Dict mapping canonical (sorted) id tuples to their max score,
        in first-seen order

    Raises:
        ValueError: If any pair is malformed

    """
    best: dict[PairKey, float] = {}
    total = 0
    for raw in pairs:
        pair = to_pair(raw)
        total += 1
        key = pair.key
        score = float(pair.score)
        existing = best.get(key)
        if existing is None or score > existing:
            best[key] = score

    if total != len(best):
        logger.debug(f"Collapsed {total} pairs to {len(best)} unique edges")

    return best


def canonical_pairs(pairs: Iterable[PairLike]) -> list[SimilarityPair]:
    """Return de-duplicated pairs in canonical form.

    Args:
        pairs: Iterable of pair-like values

    Returns:
        List of SimilarityPair with sorted ids and max score per unordered pair

    """
    return [SimilarityPair(a, b, s) for (a, b), s in dedupe_pairs(pairs).items()]
