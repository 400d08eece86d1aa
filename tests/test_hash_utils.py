"""Tests for cluster id generation."""

import uuid

from qdedupe.utils.hash_utils import random_cluster_id, stable_cluster_id


class TestStableClusterId:
    def test_deterministic(self):
        assert stable_cluster_id(["q1", "q2"]) == stable_cluster_id(["q1", "q2"])

    def test_order_independent(self):
        assert stable_cluster_id(["q3", "q1", "q2"]) == stable_cluster_id(["q1", "q2", "q3"])

    def test_members_change_id(self):
        assert stable_cluster_id(["q1", "q2"]) != stable_cluster_id(["q1", "q3"])

    def test_length(self):
        assert stable_cluster_id(["q1"], n=6).startswith("cluster_")
        assert len(stable_cluster_id(["q1"], n=6)) == len("cluster_") + 6


class TestRandomClusterId:
    def test_is_uuid(self):
        assert uuid.UUID(random_cluster_id(["q1", "q2"]))

    def test_unique(self):
        assert random_cluster_id() != random_cluster_id()
