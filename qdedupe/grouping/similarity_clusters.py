"""Similarity-based clustering of near-duplicate questions.

This module groups questions into clusters from pairwise similarity scores.
Clustering is single-linkage: two questions land in the same cluster when any
chain of above-threshold edges connects them, even if their own direct
similarity was never observed. Every cluster is a candidate for human review.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Literal, Optional, get_args

from qdedupe.similarity.types import PairKey, PairLike, dedupe_pairs
from qdedupe.utils.hash_utils import stable_cluster_id
from qdedupe.utils.union_find import DisjointSet

from .cluster_stats import compute_cluster_metrics

logger = logging.getLogger(__name__)

ClusterStatus = Literal["pending", "approved_duplicates", "approved_variants", "split"]
CLUSTER_STATUSES: tuple[str, ...] = get_args(ClusterStatus)

IdFactory = Callable[[Sequence[str]], str]


@dataclass(frozen=True)
class QuestionCluster:
    """A group of question ids believed to be near-duplicates.

    Attributes:
        id: Cluster identifier
        question_ids: Member question ids, sorted and unique
        avg_similarity: Mean score of observed in-cluster edges [0,1]
        max_similarity: Highest observed in-cluster edge score [0,1]
        min_similarity: Lowest observed in-cluster edge score [0,1]
        std_dev_similarity: Population std-dev of observed in-cluster edge scores
        edge_count: Number of observed in-cluster edges
        possible_edge_count: n*(n-1)/2 for n members
        density: edge_count / possible_edge_count
        status: Review status; the clusterer only produces "pending"
    """

    id: str
    question_ids: list[str]
    avg_similarity: float
    max_similarity: float = 0.0
    min_similarity: float = 0.0
    std_dev_similarity: float = 0.0
    edge_count: int = 0
    possible_edge_count: int = 0
    density: float = 0.0
    status: ClusterStatus = "pending"

    def __post_init__(self):
        """Validate cluster data after initialization."""
        if len(set(self.question_ids)) != len(self.question_ids):
            raise ValueError(f"Cluster {self.id} has duplicate question ids")
        for name in ("avg_similarity", "max_similarity", "min_similarity", "density"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"{name} {value} must be in [0,1]")
        if self.status not in CLUSTER_STATUSES:
            raise ValueError(f"Status must be one of {CLUSTER_STATUSES}, got {self.status!r}")

    @property
    def size(self) -> int:
        """Number of member questions."""
        return len(self.question_ids)


def _validate_params(min_cluster_size: int, threshold: float) -> None:
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ValueError(f"Threshold must be a number, got {threshold!r}")
    if not 0 <= threshold <= 1:
        raise ValueError(f"Threshold {threshold} must be in [0,1]")
    if isinstance(min_cluster_size, bool) or not isinstance(min_cluster_size, int):
        raise ValueError(f"min_cluster_size must be an integer, got {min_cluster_size!r}")
    if min_cluster_size < 2:
        raise ValueError(f"min_cluster_size must be >= 2, got {min_cluster_size}")


def _build_cluster(
    member_ids: Iterable[str],
    edge_scores: Mapping[PairKey, float],
    id_factory: IdFactory,
) -> QuestionCluster:
    members = sorted(set(member_ids))
    metrics = compute_cluster_metrics(members, edge_scores)
    return QuestionCluster(
        id=id_factory(members),
        question_ids=members,
        status="pending",
        **metrics,
    )


def _sort_key(c: QuestionCluster) -> tuple[float, int, str]:
    # avg desc, size desc, smallest member asc
    return (-c.avg_similarity, -c.size, c.question_ids[0] if c.question_ids else "")


def cluster(
    pairs: Iterable[PairLike],
    min_cluster_size: int = 2,
    threshold: float = 0.85,
    id_factory: Optional[IdFactory] = None,
) -> list[QuestionCluster]:
    """Group questions into near-duplicate clusters.

    Pairs are validated, collapsed to one max score per unordered pair, and
    filtered to ``score >= threshold``. Connected components of the remaining
    graph become clusters when they have at least ``min_cluster_size`` members.

    Args:
        pairs: Similarity edges as SimilarityPair, ``(a_id, b_id, score)``
            tuples or mappings
        min_cluster_size: Minimum members for a cluster to be returned (>= 2)
        threshold: Minimum score for an edge to participate [0,1]
        id_factory: Callable mapping sorted member ids to a cluster id;
            defaults to a deterministic hash of the members

    Returns:
        Clusters sorted by avg_similarity desc, then size desc, then smallest
        member id

    Raises:
        ValueError: If any pair or parameter is invalid

    """
    _validate_params(min_cluster_size, threshold)
    make_id = id_factory or stable_cluster_id

    edge_scores = {k: s for k, s in dedupe_pairs(pairs).items() if s >= threshold}
    if not edge_scores:
        logger.debug(f"No edges at or above threshold {threshold}")
        return []

    ds = DisjointSet()
    for a_id, b_id in edge_scores:
        ds.make_set(a_id)
        ds.make_set(b_id)
        ds.union(a_id, b_id)

    logger.info(
        f"Built union-find over {len(ds)} questions and {len(edge_scores)} edges "
        f"above threshold {threshold}"
    )

    # Each edge lies in exactly one component; bucket once by root
    edges_by_root: dict[str, dict[PairKey, float]] = defaultdict(dict)
    for key, score in edge_scores.items():
        edges_by_root[ds.find(key[0])][key] = score

    clusters = [
        _build_cluster(group, edges_by_root[ds.find(group[0])], make_id)
        for group in ds.groups()
        if len(group) >= min_cluster_size
    ]
    clusters.sort(key=_sort_key)

    logger.info(
        f"Found {len(clusters)} clusters from {ds.get_set_count()} components "
        f"(min_cluster_size={min_cluster_size})"
    )
    return clusters


def split_cluster(
    source: QuestionCluster,
    pairs: Iterable[PairLike],
    split_threshold: float = 0.9,
    min_cluster_size: int = 2,
    id_factory: Optional[IdFactory] = None,
) -> list[QuestionCluster]:
    """Split a cluster by re-clustering its members at a stricter threshold.

    Only edges with both endpoints inside the cluster are considered.

    Args:
        source: Cluster to split
        pairs: Similarity edges (may include edges outside the cluster)
        split_threshold: Threshold for the re-clustering [0,1]
        min_cluster_size: Minimum size for each resulting sub-cluster
        id_factory: Optional cluster id factory

    Returns:
        Sub-clusters, possibly empty

    """
    members = set(source.question_ids)
    inside = [
        (a, b, s) for (a, b), s in dedupe_pairs(pairs).items() if a in members and b in members
    ]
    logger.debug(f"Splitting cluster {source.id} using {len(inside)} in-cluster edges")
    return cluster(inside, min_cluster_size, split_threshold, id_factory=id_factory)


def merge_clusters(
    clusters: Sequence[QuestionCluster],
    pairs: Iterable[PairLike],
    id_factory: Optional[IdFactory] = None,
) -> QuestionCluster:
    """Merge clusters into one, recomputing metrics from the given pairs.

    Pairs are de-duplicated but not threshold-filtered. Metrics are 0.0 when
    no edge among the merged members was observed.

    Args:
        clusters: Clusters to merge (may overlap)
        pairs: Similarity edges used to compute metrics
        id_factory: Optional cluster id factory

    Returns:
        Merged cluster with status "pending"

    """
    members = {qid for c in clusters for qid in c.question_ids}
    merged = _build_cluster(members, dedupe_pairs(pairs), id_factory or stable_cluster_id)
    logger.debug(f"Merged {len(clusters)} clusters into {merged.id} ({merged.size} members)")
    return merged
