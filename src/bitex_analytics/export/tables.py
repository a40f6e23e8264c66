"""Flat tables and CSV text for downloads.

Rows are plain dicts; the header is taken from the first row's keys.

Quoting follows csv.QUOTE_MINIMAL, the same mode used for every CSV the
pipeline writes: a field containing a comma, a double quote, CR or LF is
wrapped in double quotes and embedded quotes are doubled. For a plain
comma-containing string this gives ``"a, b"``.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

import pandas as pd

from bitex_analytics.metrics.types import DerivedMetrics
from bitex_analytics.types import Order

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\r\n"

ORDER_EXPORT_COLUMNS = [
    "OrderID",
    "Timestamp",
    "CustomerID",
    "TotalAmount",
    "GuestCount",
    "Rating",
    "ItemsCount",
]


def _as_text(value: Any) -> Any:
    """Render dates in ISO-8601; everything else keeps its natural form."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def orders_to_table(orders: Sequence[Order]) -> list[dict[str, Any]]:
    """Flatten orders into one export row each, preserving input order."""
    return [
        {
            "OrderID": o.id,
            "Timestamp": o.timestamp.isoformat(),
            "CustomerID": o.customer_id,
            "TotalAmount": o.total_amount,
            "GuestCount": o.guest_count,
            "Rating": o.rating,
            "ItemsCount": len(o.items),
        }
        for o in orders
    ]


def metrics_to_table(metrics: DerivedMetrics) -> list[dict[str, Any]]:
    """Flatten the headline KPIs of a metrics snapshot into a single row.

    Examples:
        >>> row = metrics_to_table(metrics)[0]
        >>> row["RepeatRate"]
        '50.00%'
    """
    top = metrics.contribution_data[0].name if metrics.contribution_data else "N/A"
    return [
        {
            "DailySales": metrics.total_daily_sales,
            "AverageOrderValue": metrics.aov,
            "RepeatRate": f"{metrics.repeat_rate:.2f}%",
            "AverageRating": f"{metrics.avg_rating:.2f}",
            "TopCategory": top,
        }
    ]


def serialize(rows: Sequence[dict[str, Any]]) -> str:
    """Serialize rows to CSV text with CRLF line endings.

    Args:
        rows: Rows to write. The first row's keys are the header; keys missing
            from later rows are written as empty fields and extra keys are dropped.

    Returns:
        CSV text, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    columns = list(rows[0].keys())
    df = pd.DataFrame.from_records(
        [{col: _as_text(row.get(col)) for col in columns} for row in rows],
        columns=columns,
    )
    text = df.to_csv(index=False, lineterminator=LINE_TERMINATOR, quoting=csv.QUOTE_MINIMAL)
    logger.debug("Serialized %s row(s) x %s column(s)", len(df), len(columns))
    return text
