"""Near-duplicate question clustering.

Groups question ids into clusters of near-duplicates from precomputed
pairwise similarity scores.
"""

from .grouping import QuestionCluster, cluster, merge_clusters, split_cluster
from .similarity import SimilarityPair

__version__ = "0.3.0"

__all__ = [
    "QuestionCluster",
    "SimilarityPair",
    "cluster",
    "merge_clusters",
    "split_cluster",
]
