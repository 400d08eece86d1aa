"""Hash utilities for question clustering.

This module derives cluster ids, either deterministically from the member
set or at random.
"""

import hashlib
import json
import uuid
from collections.abc import Iterable

CLUSTER_ID_PREFIX = "cluster_"


def stable_cluster_id(member_ids: Iterable[str], n: int = 10) -> str:
    """Generate a stable, deterministic cluster id from its members.

    The id depends only on the set of members, so regenerating clusters over
    the same pairs yields the same ids regardless of member order.

    Args:
        member_ids: Question ids in the cluster
        n: Number of hex characters in the hash part (default 10)

    Returns:
        Cluster id of the form ``cluster_<hex>``

    """
    payload = {"members": sorted(set(map(str, member_ids)))}
    payload_str = json.dumps(payload, separators=(",", ":"), sort_keys=True)
    hash_obj = hashlib.sha1(payload_str.encode())
    return f"{CLUSTER_ID_PREFIX}{hash_obj.hexdigest()[:n]}"


def random_cluster_id(member_ids: Iterable[str] = ()) -> str:
    """Generate a random UUID cluster id, ignoring the members."""
    return str(uuid.uuid4())
