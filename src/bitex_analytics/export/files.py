"""Writing CSV exports to disk.

Exports are named ``<prefix>_<YYYY-MM-DD>.csv`` and written under the
configured exports directory.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from bitex_analytics.exceptions import ExportError
from bitex_analytics.export.tables import metrics_to_table, orders_to_table, serialize

if TYPE_CHECKING:
    from bitex_analytics.config import DataPaths
    from bitex_analytics.metrics.types import DerivedMetrics
    from bitex_analytics.types import Order

logger = logging.getLogger(__name__)

ORDERS_PREFIX = "bitex_orders"
METRICS_PREFIX = "bitex_metrics"


def export_filename(prefix: str, day: date) -> str:
    """Build the download file name.

    Examples:
        >>> export_filename("bitex_orders", date(2025, 1, 31))
        'bitex_orders_2025-01-31.csv'
    """
    return f"{prefix}_{day.isoformat()}.csv"


def write_export(text: str, directory: Path, prefix: str, day: date) -> Path:
    """Write CSV text to ``directory`` and return the file path.

    Raises:
        ExportError: If the file cannot be written.
    """
    path = Path(directory) / export_filename(prefix, day)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the CRLF terminators exactly as serialized
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as e:
        raise ExportError(f"Could not write export {path}: {e}") from e

    logger.info("Wrote export: %s", path)
    return path


def export_orders(paths: DataPaths, orders: Sequence[Order], day: date) -> Path:
    """Export raw orders as ``bitex_orders_<day>.csv``."""
    return write_export(serialize(orders_to_table(orders)), paths.exports, ORDERS_PREFIX, day)


def export_metrics(paths: DataPaths, metrics: DerivedMetrics, day: date) -> Path:
    """Export the headline KPIs as ``bitex_metrics_<day>.csv``."""
    return write_export(serialize(metrics_to_table(metrics)), paths.exports, METRICS_PREFIX, day)
