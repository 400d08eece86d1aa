"""Command line entry point for batch question clustering.

Usage:
    qdedupe-cluster --pairs data/pairs.csv --out data/clusters.json
    qdedupe-cluster --pairs pairs.xlsx --out clusters.csv --threshold 0.9 --min-cluster-size 3
"""

import argparse
import os
import sys
from typing import Optional, Sequence

from qdedupe.grouping.similarity_clusters import cluster
from qdedupe.utils.hash_utils import stable_cluster_id
from qdedupe.utils.io_utils import (
    DEFAULT_SETTINGS_PATH,
    clamp_clustering_params,
    load_settings,
    read_pairs,
    write_clusters,
)
from qdedupe.utils.logging_utils import LOG_LEVELS, get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for qdedupe-cluster."""
    parser = argparse.ArgumentParser(
        description="Cluster near-duplicate questions from pairwise similarity scores",
    )
    parser.add_argument("--pairs", required=True, help="Pair file path (CSV/JSON/XLSX)")
    parser.add_argument("--out", required=True, help="Output path (.json or .csv)")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_SETTINGS_PATH),
        help="Configuration file path",
    )
    parser.add_argument("--threshold", type=float, help="Similarity threshold [0,1]")
    parser.add_argument("--min-cluster-size", type=int, help="Minimum cluster size (>= 2)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (overrides config)",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def run_clustering(
    pairs_path: str,
    out_path: str,
    config_path: str = str(DEFAULT_SETTINGS_PATH),
    threshold: Optional[float] = None,
    min_cluster_size: Optional[int] = None,
) -> int:
    """Read pairs, cluster them and write the result.

    Args:
        pairs_path: Pair file path
        out_path: Output path
        config_path: Settings YAML path
        threshold: Optional threshold override
        min_cluster_size: Optional minimum cluster size override

    Returns:
        Number of clusters written

    """
    settings = load_settings(config_path)
    cfg = settings["clustering"]
    t, m = clamp_clustering_params(threshold, min_cluster_size, settings)
    id_length = int(cfg.get("id_length", 10))

    logger.info(
        f"Clustering {pairs_path} with threshold={t} min_cluster_size={m} id_length={id_length}"
    )

    pairs = read_pairs(pairs_path)
    clusters = cluster(
        pairs,
        min_cluster_size=m,
        threshold=t,
        id_factory=lambda members: stable_cluster_id(members, n=id_length),
    )
    write_clusters(clusters, out_path)
    return len(clusters)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        setup_logging(args.log_level or settings["logging"].get("level", "INFO"), args.log_file)
    except ValueError as e:
        setup_logging("INFO", args.log_file)
        logger.error(f"Invalid configuration: {e}")
        return 2

    if not os.path.exists(args.pairs):
        logger.error(f"Pair file not found: {args.pairs}")
        return 1

    try:
        count = run_clustering(
            pairs_path=args.pairs,
            out_path=args.out,
            config_path=args.config,
            threshold=args.threshold,
            min_cluster_size=args.min_cluster_size,
        )
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 2

    logger.info(f"Done: {count} clusters")
    return 0


if __name__ == "__main__":
    sys.exit(main())
