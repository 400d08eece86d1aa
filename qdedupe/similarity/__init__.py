"""Similarity pair types and normalisation."""

from .types import SimilarityPair, canonical_pairs, dedupe_pairs, to_pair

__all__ = ["SimilarityPair", "canonical_pairs", "dedupe_pairs", "to_pair"]
