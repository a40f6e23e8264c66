"""CLI wrapper for the metrics pipeline.

This module provides a command-line interface: load (or generate) a dataset,
narrow it to a date window, compute metrics, print them and optionally write
CSV exports. All metric logic is in bitex_analytics.metrics.

Examples:
    Metrics for the last week of a dataset file:
        python -m bitex_analytics.pipeline --file data/dataset.json --window last-7-days

    Demo on generated data, with both CSV exports:
        python -m bitex_analytics.pipeline --sample --seed 42 --export-orders --export-metrics
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime

from bitex_analytics.config import DataPaths
from bitex_analytics.dataset import generate_sample_dataset, load_dataset
from bitex_analytics.dataset.loaders import parse_timestamp
from bitex_analytics.exceptions import BiteXError
from bitex_analytics.export import export_metrics, export_orders
from bitex_analytics.filtering import DateWindow, filter_by_window
from bitex_analytics.formatters import format_metrics_for_console
from bitex_analytics.metrics import compute_metrics

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute BiteX dashboard metrics.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file",
        type=str,
        help="Path to the dataset JSON. Defaults to <data-root>/dataset.json.",
    )
    source.add_argument(
        "--sample",
        action="store_true",
        help="Use a generated sample dataset instead of a file",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --sample")
    parser.add_argument(
        "--data-root",
        type=str,
        default="data",
        help="Root directory for data and exports (default: data)",
    )
    parser.add_argument(
        "--window",
        type=str,
        default=DateWindow.ALL_TIME.value,
        choices=[w.value for w in DateWindow],
        help="Date window to aggregate (default: all-time)",
    )
    parser.add_argument(
        "--now",
        type=str,
        default=None,
        help="Evaluation instant in ISO-8601 (default: current local time)",
    )
    parser.add_argument("--export-orders", action="store_true", help="Write the orders CSV")
    parser.add_argument("--export-metrics", action="store_true", help="Write the metrics CSV")
    parser.add_argument("--export-dir", type=str, help="Directory for CSV exports")
    parser.add_argument("--json", action="store_true", help="Print metrics as JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an order total disagrees with its items",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point for the metrics pipeline.

    Returns:
        Process exit code: 0 on success, 1 on a BiteXError.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    # The only wall-clock read; everything downstream receives ``now``
    now = parse_timestamp(args.now) if args.now else datetime.now()

    paths = DataPaths.from_root(args.data_root, args.file, args.export_dir)

    try:
        if args.sample:
            dataset = generate_sample_dataset(now, seed=args.seed)
        else:
            dataset = load_dataset(paths.dataset_json)

        orders = filter_by_window(dataset.orders, args.window, now)
        logger.info("Window %s: %s of %s orders", args.window, len(orders), len(dataset.orders))

        metrics = compute_metrics(orders, dataset.menu_items, now, strict=args.strict)

        if args.json:
            print(json.dumps(metrics.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(format_metrics_for_console(metrics))

        if args.export_orders:
            export_orders(paths, orders, now.date())
        if args.export_metrics:
            export_metrics(paths, metrics, now.date())

    except (BiteXError, FileNotFoundError) as e:
        logger.error("Pipeline failed: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
