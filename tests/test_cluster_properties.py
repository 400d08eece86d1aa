"""Property-based tests for question clustering using Hypothesis."""

import pytest
from hypothesis import given, settings, strategies as st

from qdedupe.grouping.similarity_clusters import cluster

QUESTION_IDS = [f"q{i}" for i in range(10)]

pair_strategy = st.tuples(
    st.sampled_from(QUESTION_IDS),
    st.sampled_from(QUESTION_IDS),
    st.floats(min_value=0.0, max_value=1.0),
).filter(lambda p: p[0] != p[1])

pairs_strategy = st.lists(pair_strategy, max_size=30)
threshold_strategy = st.floats(min_value=0.0, max_value=1.0)
min_size_strategy = st.integers(min_value=2, max_value=5)


def _clustered_ids(clusters):
    return {qid for c in clusters for qid in c.question_ids}


class TestClusterProperties:
    """Invariants that hold for any valid input."""

    @pytest.mark.hypothesis
    @given(pairs=pairs_strategy, min_size=min_size_strategy, threshold=threshold_strategy)
    def test_idempotent(self, pairs, min_size, threshold):
        first = cluster(pairs, min_size, threshold)
        second = cluster(pairs, min_size, threshold)

        assert [c.question_ids for c in first] == [c.question_ids for c in second]
        assert [c.avg_similarity for c in first] == [c.avg_similarity for c in second]

    @pytest.mark.hypothesis
    @given(
        pairs=pairs_strategy,
        min_size=min_size_strategy,
        t1=threshold_strategy,
        t2=threshold_strategy,
    )
    def test_threshold_monotonicity(self, pairs, min_size, t1, t2):
        low, high = sorted((t1, t2))

        ids_low = _clustered_ids(cluster(pairs, min_size, low))
        ids_high = _clustered_ids(cluster(pairs, min_size, high))

        assert ids_high <= ids_low

    @pytest.mark.hypothesis
    @given(pairs=pairs_strategy, threshold=threshold_strategy)
    def test_transitivity(self, pairs, threshold):
        clusters = cluster(pairs, 2, threshold)
        owner = {qid: c.id for c in clusters for qid in c.question_ids}

        # Every surviving edge keeps its endpoints together, so chains do too
        for a, b, score in pairs:
            if score >= threshold:
                assert owner[a] == owner[b]

    @pytest.mark.hypothesis
    @given(pairs=pairs_strategy, min_size=min_size_strategy, threshold=threshold_strategy)
    def test_min_size_and_disjoint_membership(self, pairs, min_size, threshold):
        clusters = cluster(pairs, min_size, threshold)
        seen = set()

        for c in clusters:
            assert c.size >= min_size
            assert not seen & set(c.question_ids)
            seen.update(c.question_ids)

    @pytest.mark.hypothesis
    @given(pairs=pairs_strategy, threshold=threshold_strategy)
    @settings(max_examples=100)
    def test_metrics_bounds_and_order(self, pairs, threshold):
        clusters = cluster(pairs, 2, threshold)

        for c in clusters:
            assert threshold <= c.min_similarity <= c.max_similarity <= 1
            assert c.min_similarity - 1e-9 <= c.avg_similarity <= c.max_similarity + 1e-9
            assert c.edge_count >= c.size - 1
            assert 0 < c.density <= 1

        keys = [(-c.avg_similarity, -c.size, c.question_ids[0]) for c in clusters]
        assert keys == sorted(keys)
