"""Grouping algorithms for question de-duplication.

This package provides:
- Single-linkage similarity clustering over a union-find
- Cluster split and merge operations for review workflows
- Per-cluster statistics
"""

from .cluster_stats import clusters_to_frame, compute_cluster_metrics
from .similarity_clusters import (
    CLUSTER_STATUSES,
    QuestionCluster,
    cluster,
    merge_clusters,
    split_cluster,
)

__all__ = [
    "CLUSTER_STATUSES",
    "QuestionCluster",
    "cluster",
    "clusters_to_frame",
    "compute_cluster_metrics",
    "merge_clusters",
    "split_cluster",
]
