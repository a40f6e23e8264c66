"""CSV export of orders and metrics snapshots.

Example:
    >>> from bitex_analytics.export import orders_to_table, serialize
    >>>
    >>> text = serialize(orders_to_table(dataset.orders))
"""

from bitex_analytics.export.files import (
    export_filename,
    export_metrics,
    export_orders,
    write_export,
)
from bitex_analytics.export.tables import metrics_to_table, orders_to_table, serialize

__all__ = [
    "export_filename",
    "export_metrics",
    "export_orders",
    "metrics_to_table",
    "orders_to_table",
    "serialize",
    "write_export",
]
