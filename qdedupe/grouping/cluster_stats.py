"""Cluster statistics for question clustering.

Metrics are computed only from edges that were actually observed between
members of a cluster, never from a recomputed all-pairs similarity.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from qdedupe.utils.logging_utils import get_logger

if TYPE_CHECKING:
    from .similarity_clusters import QuestionCluster

logger = get_logger(__name__)

SUMMARY_COLUMNS = [
    "cluster_id",
    "size",
    "avg_similarity",
    "max_similarity",
    "min_similarity",
    "std_dev_similarity",
    "edge_count",
    "possible_edge_count",
    "density",
    "status",
    "question_ids",
]


def edges_within(
    member_ids: Collection[str],
    edge_scores: Mapping[tuple[str, str], float],
) -> list[float]:
    """Collect scores of edges whose endpoints both fall inside member_ids.

    Args:
        member_ids: Question ids in the cluster
        edge_scores: Canonical (sorted) id tuple -> score

    Returns:
        List of in-cluster edge scores

    """
    members = set(member_ids)
    if len(members) < 2:
        return []

    # Iterate whichever side is smaller
    possible = len(members) * (len(members) - 1) // 2
    if len(edge_scores) <= possible:
        return [s for (a, b), s in edge_scores.items() if a in members and b in members]

    ordered = sorted(members)
    scores = []
    for i, a in enumerate(ordered):
        for b in ordered[i + 1 :]:
            score = edge_scores.get((a, b))
            if score is not None:
                scores.append(score)
    return scores


def compute_cluster_metrics(
    member_ids: Collection[str],
    edge_scores: Mapping[tuple[str, str], float],
) -> dict[str, Any]:
    """Compute similarity metrics for a set of cluster members.

    Args:
        member_ids: Question ids in the cluster
        edge_scores: Canonical (sorted) id tuple -> score

    Returns:
        Dict with avg/max/min/std-dev similarity, edge counts and density.
        Similarity metrics are 0.0 when no in-cluster edge was observed.

    """
    n = len(set(member_ids))
    scores = np.asarray(edges_within(member_ids, edge_scores), dtype=float)
    possible = n * (n - 1) // 2

    if scores.size == 0:
        avg = max_sim = min_sim = std = 0.0
    else:
        avg = float(scores.mean())
        max_sim = float(scores.max())
        min_sim = float(scores.min())
        std = float(scores.std())

    return {
        "avg_similarity": avg,
        "max_similarity": max_sim,
        "min_similarity": min_sim,
        "std_dev_similarity": std,
        "edge_count": int(scores.size),
        "possible_edge_count": possible,
        "density": float(scores.size / possible) if possible else 0.0,
    }


def clusters_to_frame(clusters: Sequence[QuestionCluster]) -> pd.DataFrame:
    """Build a one-row-per-cluster summary table.

    Args:
        clusters: Clusters to summarise

    Returns:
        DataFrame with SUMMARY_COLUMNS, members joined by ';'

    """
    rows = [
        {
            "cluster_id": c.id,
            "size": c.size,
            "avg_similarity": c.avg_similarity,
            "max_similarity": c.max_similarity,
            "min_similarity": c.min_similarity,
            "std_dev_similarity": c.std_dev_similarity,
            "edge_count": c.edge_count,
            "possible_edge_count": c.possible_edge_count,
            "density": c.density,
            "status": c.status,
            "question_ids": ";".join(c.question_ids),
        }
        for c in clusters
    ]
    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    logger.debug(f"Built cluster summary with {len(df)} rows")
    return df
