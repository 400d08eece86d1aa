"""Utility modules for question clustering.
"""

from .hash_utils import random_cluster_id, stable_cluster_id
from .logging_utils import get_logger, setup_logging
from .union_find import DisjointSet

__all__ = [
    "DisjointSet",
    "get_logger",
    "random_cluster_id",
    "setup_logging",
    "stable_cluster_id",
]
