"""Public API for the metrics engine.

This module provides the single entry point that turns an order set and the
menu catalog into a DerivedMetrics snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from bitex_analytics.dataset.preparation import (
    menu_to_frame,
    order_items_to_frame,
    orders_to_frame,
)
from bitex_analytics.metrics.customers import (
    average_rating,
    party_size_distribution,
    repeat_rate,
)
from bitex_analytics.metrics.menu import (
    build_item_performance,
    menu_engineering_matrix,
    most_ordered_items,
    revenue_contribution,
    top_profit_items,
)
from bitex_analytics.metrics.revenue import (
    average_order_value,
    basket_distribution,
    daily_revenue_and_trend,
    peak_hour_profile,
    seven_day_comparison,
)
from bitex_analytics.metrics.types import DerivedMetrics
from bitex_analytics.qa.reconciliation import DEFAULT_TOLERANCE, check_order_totals
from bitex_analytics.types import MenuItem, Order

logger = logging.getLogger(__name__)


def compute_metrics(
    orders: Sequence[Order],
    menu_items: Sequence[MenuItem],
    now: datetime,
    *,
    reconcile: bool = True,
    strict: bool = False,
    tolerance: float = DEFAULT_TOLERANCE,
) -> DerivedMetrics:
    """Compute every dashboard metric for an order set.

    This function:
    - does NOT read or write any files,
    - does NOT read the wall clock (``now`` is the evaluation instant),
    - does NOT mutate ``orders`` or ``menu_items``,
    - MAY log progress and reconciliation warnings via the logging module.

    Degenerate input (no orders, empty catalog, zero totals) yields zero
    values rather than NaN.

    Args:
        orders: Orders to aggregate, typically already narrowed by
            ``filter_by_window``.
        menu_items: Menu catalog, in display order.
        now: Evaluation instant for "today", "yesterday" and the seven-day
            comparison.
        reconcile: Check each order's total against its lines and warn on
            mismatches.
        strict: Raise DataQualityError on a reconciliation mismatch instead
            of warning. Implies reconcile.
        tolerance: Largest total/lines difference treated as rounding.

    Returns:
        DerivedMetrics snapshot.

    Raises:
        DataQualityError: If strict is True and order totals disagree with
            their lines.

    Examples:
        >>> from datetime import datetime
        >>> metrics = compute_metrics([], [], datetime(2025, 1, 31, 12, 0))
        >>> metrics.aov, metrics.repeat_rate
        (0.0, 0.0)
    """
    reconciliation = None
    if reconcile or strict:
        reconciliation = check_order_totals(orders, strict=strict, tolerance=tolerance).summary

    orders_df = orders_to_frame(orders)
    items_df = order_items_to_frame(orders)
    menu_df = menu_to_frame(menu_items)

    logger.info(
        "Computing metrics for %s orders and %s menu items at %s",
        len(orders_df),
        len(menu_df),
        now.isoformat(),
    )

    total_daily_sales, sales_trend = daily_revenue_and_trend(orders_df, now)

    perf = build_item_performance(menu_df, items_df)
    matrix_data, avg_qty, avg_profit = menu_engineering_matrix(perf)

    return DerivedMetrics(
        total_daily_sales=total_daily_sales,
        sales_trend=sales_trend,
        aov=average_order_value(orders_df),
        repeat_rate=repeat_rate(orders_df),
        peak_hour_data=peak_hour_profile(orders_df),
        avg_rating=average_rating(orders_df),
        sorted_profit_items=top_profit_items(perf),
        most_ordered_items=most_ordered_items(perf),
        contribution_data=revenue_contribution(perf),
        buckets=basket_distribution(orders_df),
        day_averages=seven_day_comparison(orders_df, now),
        party_size_dist=party_size_distribution(orders_df),
        matrix_data=matrix_data,
        avg_qty=avg_qty,
        avg_profit=avg_profit,
        metadata={
            "evaluated_at": now.isoformat(),
            "order_count": len(orders_df),
            "menu_item_count": len(menu_df),
            "reconciliation": reconciliation,
        },
    )
