"""BiteX Analytics - restaurant point-of-sale metrics.

This package turns raw POS records (orders, menu items, customers) into the
metrics behind the BiteX executive dashboard:

- **Filter**: narrow orders to a trailing window (last 7 / 30 days, all time)
- **Metrics**: revenue and trend, AOV, loyalty, peak hours, basket and party
  sizes, item rankings and the menu-engineering matrix
- **Export**: CSV downloads of orders and headline KPIs

Module Structure:
    bitex_analytics.types: Domain records (Order, MenuItem, Customer, Dataset)
    bitex_analytics.dataset: JSON loading, sample generation, manual entry
    bitex_analytics.filtering: Date-range filter
    bitex_analytics.metrics: Metrics engine (compute_metrics)
    bitex_analytics.export: CSV tables and files
    bitex_analytics.qa: Order-total reconciliation
    bitex_analytics.formatters: Console output
    bitex_analytics.config: DataPaths configuration

Quick Start:
    >>> from datetime import datetime
    >>> from bitex_analytics import DataPaths, compute_metrics, filter_by_window
    >>> from bitex_analytics.dataset import load_dataset
    >>>
    >>> paths = DataPaths.from_root("data")
    >>> dataset = load_dataset(paths.dataset_json)
    >>> now = datetime(2025, 1, 31, 22, 0)
    >>>
    >>> orders = filter_by_window(dataset.orders, "last-30-days", now)
    >>> metrics = compute_metrics(orders, dataset.menu_items, now)
    >>> print(metrics.aov, metrics.repeat_rate)
"""

__version__ = "0.1.0"

from bitex_analytics.config import DataPaths
from bitex_analytics.exceptions import BiteXError, ConfigError, DataQualityError, ExportError
from bitex_analytics.filtering import DateWindow, filter_by_window
from bitex_analytics.metrics import DerivedMetrics, compute_metrics

__all__ = [
    "BiteXError",
    "ConfigError",
    "DataPaths",
    "DataQualityError",
    "DateWindow",
    "DerivedMetrics",
    "ExportError",
    "__version__",
    "compute_metrics",
    "filter_by_window",
]
