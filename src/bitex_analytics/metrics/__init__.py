"""Metrics engine.

Pure functions turning an order set and the menu catalog into dashboard
metrics:

- **Revenue** (``metrics.revenue``): daily sales and trend, AOV, peak hours,
  basket sizes, week-over-week day comparison.
- **Guests** (``metrics.customers``): repeat rate, average rating, party sizes.
- **Menu** (``metrics.menu``): item performance, rankings, revenue
  contribution, menu-engineering matrix.

Example:
    >>> from datetime import datetime
    >>> from bitex_analytics.filtering import filter_by_window
    >>> from bitex_analytics.metrics import compute_metrics
    >>>
    >>> now = datetime(2025, 1, 31, 22, 0)
    >>> orders = filter_by_window(dataset.orders, "last-7-days", now)
    >>> metrics = compute_metrics(orders, dataset.menu_items, now)
    >>> print(metrics.aov, metrics.repeat_rate)
"""

from bitex_analytics.metrics.api import compute_metrics
from bitex_analytics.metrics.types import DerivedMetrics

__all__ = ["DerivedMetrics", "compute_metrics"]
