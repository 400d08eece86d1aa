from __future__ import annotations

import random

import numpy as np
import pytest
from hypothesis import settings

from qdedupe.utils.io_utils import load_settings


# ---- Deterministic Testing Configuration ---------------------

DETERMINISTIC_SEED = 42


@pytest.fixture(autouse=True)
def set_deterministic_seed():
    """Set deterministic seed for all tests"""
    random.seed(DETERMINISTIC_SEED)
    np.random.seed(DETERMINISTIC_SEED)
    yield
    random.seed()
    np.random.seed()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests"""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture
def counter_ids():
    """Id factory returning c0, c1, ... in call order."""
    calls = iter(range(1_000_000))
    return lambda members: f"c{next(calls)}"


# Hypothesis settings for all property-based tests
settings.register_profile(
    "deterministic",
    deadline=None,
    max_examples=200,
    derandomize=True,
    database=None,
)
settings.load_profile("deterministic")
