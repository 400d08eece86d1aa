"""IO utilities for settings, pair files and cluster output."""

from __future__ import annotations

import copy
import functools
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional, Sequence

import pandas as pd
import yaml

from qdedupe.grouping.cluster_stats import clusters_to_frame
from qdedupe.grouping.similarity_clusters import QuestionCluster
from qdedupe.similarity.types import SimilarityPair
from qdedupe.utils.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_SETTINGS_PATH = Path("config") / "settings.yaml"

DEFAULTS: dict[str, Any] = {
    "clustering": {
        "threshold": 0.85,
        "min_cluster_size": 2,
        "max_cluster_size_param": 10,
        "id_length": 10,
    },
    "logging": {"level": "INFO"},
}

PAIR_COLUMN_ALIASES = {"aId": "a_id", "bId": "b_id"}
REQUIRED_PAIR_COLUMNS = ["a_id", "b_id", "score"]


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@functools.lru_cache(maxsize=4)
def load_settings(path: str = str(DEFAULT_SETTINGS_PATH)) -> dict[str, Any]:
    """Load settings from YAML file with defaults.

    This function is cached to prevent repeated file I/O and parsing.
    Use reload_settings() to force a fresh load. A missing file yields the
    defaults.

    Args:
        path: Path to settings YAML file

    Returns:
        Dictionary with settings (user config merged over defaults)

    """
    settings_path = Path(path)
    if not settings_path.exists():
        logger.warning(f"Settings file {path} not found, using defaults")
        return copy.deepcopy(DEFAULTS)

    with open(settings_path, encoding="utf-8") as f:
        user_settings = yaml.safe_load(f) or {}

    if not isinstance(user_settings, dict):
        raise ValueError(f"Settings file {path} must contain a mapping at the top level")

    logger.debug(f"Settings loaded from {path}")
    return _deep_merge(DEFAULTS, user_settings)


def reload_settings(path: str = str(DEFAULT_SETTINGS_PATH)) -> dict[str, Any]:
    """Clear the settings cache and load settings again."""
    load_settings.cache_clear()
    return load_settings(path)


def clamp_clustering_params(
    threshold: Optional[float],
    min_cluster_size: Optional[int],
    settings: Optional[dict[str, Any]] = None,
) -> tuple[float, int]:
    """Clamp caller-supplied clustering parameters into their allowed ranges.

    A missing or zero threshold falls back to the configured default, then is
    clamped to [0,1]. A missing min_cluster_size falls back to the configured
    default, then is clamped to [2, max_cluster_size_param].

    Args:
        threshold: Requested threshold, or None
        min_cluster_size: Requested minimum cluster size, or None
        settings: Settings dict; defaults to DEFAULTS

    Returns:
        Tuple of (threshold, min_cluster_size)

    """
    cfg = (settings or DEFAULTS).get("clustering", {})
    default_threshold = float(cfg.get("threshold", 0.85))
    default_min_size = int(cfg.get("min_cluster_size", 2))
    max_min_size = int(cfg.get("max_cluster_size_param", 10))

    t = float(threshold) if threshold else default_threshold
    t = max(0.0, min(1.0, t))

    m = int(min_cluster_size) if min_cluster_size else default_min_size
    m = min(max(m, 2), max_min_size)

    return t, m


def read_pairs(path: str | Path) -> list[SimilarityPair]:
    """Read similarity pairs from a CSV, JSON or Excel file.

    The file must provide ``a_id``, ``b_id`` and ``score`` columns
    (``aId``/``bId`` are accepted as aliases).

    Args:
        path: Path to the pair file

    Returns:
        List of validated SimilarityPair

    Raises:
        ValueError: If the format is unsupported, columns are missing, or a
            row is not a valid pair

    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()

    # Ids are read as text with no NA markers so ids like "NA" keep their exact
    # form; only empty cells count as missing
    if suffix == ".csv":
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    elif suffix == ".json":
        df = pd.read_json(file_path, orient="records", dtype=False, precise_float=True)
    elif suffix in (".xlsx", ".xls"):
        df = pd.read_excel(file_path, dtype=str, keep_default_na=False)
    else:
        raise ValueError(f"Unsupported pair file format: {suffix}")

    if df.empty:
        logger.info(f"Pair file {path} contains no rows")
        return []

    df = df.rename(columns=PAIR_COLUMN_ALIASES)
    missing = [c for c in REQUIRED_PAIR_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Pair file {path} is missing columns: {missing}")

    pairs = []
    for row_num, (a_id, b_id, score) in enumerate(
        df[REQUIRED_PAIR_COLUMNS].itertuples(index=False, name=None), start=1
    ):
        try:
            pairs.append(
                SimilarityPair(
                    str(a_id) if pd.notna(a_id) else "",
                    str(b_id) if pd.notna(b_id) else "",
                    float(score),
                )
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid pair at row {row_num} of {path}: {e}") from e

    logger.info(f"Read {len(pairs)} pairs from {path}")
    return pairs


def write_clusters(clusters: Sequence[QuestionCluster], path: str | Path) -> Path:
    """Write clusters to JSON (full records) or CSV (summary table).

    Args:
        clusters: Clusters to write
        path: Output path ending in .json or .csv

    Returns:
        Path written

    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    suffix = out_path.suffix.lower()

    if suffix == ".json":
        records = [asdict(c) for c in clusters]
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
    elif suffix == ".csv":
        clusters_to_frame(clusters).to_csv(out_path, index=False)
    else:
        raise ValueError(f"Unsupported output format: {suffix}")

    logger.info(f"Wrote {len(clusters)} clusters to {out_path}")
    return out_path
