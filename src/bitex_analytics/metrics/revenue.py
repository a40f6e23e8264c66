"""Revenue metrics computed from the order-grain frame.

All functions take the frame built by
``bitex_analytics.dataset.preparation.orders_to_frame`` and an explicit
evaluation instant where a calendar is involved. Totals always come from the
order's stated ``total_amount``.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

import pandas as pd

from bitex_analytics.metrics.config import (
    BASKET_BUCKETS,
    COMPARISON_DAYS,
    DAY_ABBREVIATIONS,
    HOURS_IN_DAY,
    PREV_WEEK_FALLBACK_RATIO,
)
from bitex_analytics.metrics.types import BasketBucket, DayAverage, HourlySales

logger = logging.getLogger(__name__)


def _orders_on(orders_df: pd.DataFrame, day: date) -> pd.DataFrame:
    return orders_df[orders_df["order_date"] == pd.Timestamp(day)]


def daily_sales(orders_df: pd.DataFrame, day: date) -> float:
    """Sum of order totals on a calendar day."""
    return float(_orders_on(orders_df, day)["total_amount"].sum())


def percent_change(current: float, previous: float) -> float:
    """Percentage change from previous to current, 0 when previous is 0.

    Examples:
        >>> percent_change(150.0, 100.0)
        50.0
        >>> percent_change(150.0, 0.0)
        0.0
    """
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100


def daily_revenue_and_trend(orders_df: pd.DataFrame, now: datetime) -> tuple[float, float]:
    """Today's sales and the percent change against yesterday.

    Days are matched by calendar date against ``now``, not by a rolling
    24 hour window.

    Returns:
        Tuple of (total_daily_sales, sales_trend).
    """
    today = now.date()
    today_total = daily_sales(orders_df, today)
    yesterday_total = daily_sales(orders_df, today - timedelta(days=1))
    return today_total, percent_change(today_total, yesterday_total)


def average_order_value(orders_df: pd.DataFrame) -> float:
    """Mean order total across every order in the frame, 0 when empty."""
    if orders_df.empty:
        return 0.0
    return float(orders_df["total_amount"].mean())


def peak_hour_profile(orders_df: pd.DataFrame) -> tuple[HourlySales, ...]:
    """Sales per hour of day over the whole frame.

    Always returns 24 entries. ``intensity`` is each hour's share of the
    busiest hour and is 0 everywhere when no hour has sales.
    """
    hourly = (
        orders_df.groupby("hour")["total_amount"]
        .sum()
        .reindex(range(HOURS_IN_DAY), fill_value=0.0)
        .astype("float64")
    )
    peak = float(hourly.max())

    return tuple(
        HourlySales(
            hour=f"{hour}:00",
            sales=float(sales),
            intensity=float(sales) / peak if peak > 0 else 0.0,
        )
        for hour, sales in hourly.items()
    )


def basket_distribution(orders_df: pd.DataFrame) -> tuple[BasketBucket, ...]:
    """Count orders per basket-size bucket.

    Buckets are half-open [min, max) so 500 lands in the 500-1k bucket.
    """
    amounts = orders_df["total_amount"]
    return tuple(
        BasketBucket(
            range=label,
            min=low,
            max=high,
            count=int(((amounts >= low) & (amounts < high)).sum()),
        )
        for label, low, high in BASKET_BUCKETS
    )


def seven_day_comparison(orders_df: pd.DataFrame, now: datetime) -> tuple[DayAverage, ...]:
    """AOV for each of the last seven days against the same weekday a week earlier.

    Days run oldest first and end on ``now``'s date. When the earlier day
    has no orders, ``prev_aov`` is PREV_WEEK_FALLBACK_RATIO times the day's
    AOV and the record is flagged with ``prev_is_estimate``.
    """
    per_day = orders_df.groupby("order_date")["total_amount"].mean()
    today = pd.Timestamp(now.date())

    def day_aov(day: pd.Timestamp) -> float | None:
        if day not in per_day.index:
            return None
        return float(per_day.loc[day])

    results = []
    for offset in range(COMPARISON_DAYS - 1, -1, -1):
        day = today - pd.Timedelta(days=offset)
        prev_day = day - pd.Timedelta(days=7)
        aov = day_aov(day) or 0.0
        prev_aov = day_aov(prev_day)

        if prev_aov is None:
            logger.debug("No orders on %s; estimating previous-week AOV", prev_day.date())
            results.append(
                DayAverage(
                    day=DAY_ABBREVIATIONS[day.weekday()],
                    aov=aov,
                    prev_aov=aov * PREV_WEEK_FALLBACK_RATIO,
                    prev_is_estimate=True,
                )
            )
        else:
            results.append(
                DayAverage(day=DAY_ABBREVIATIONS[day.weekday()], aov=aov, prev_aov=prev_aov)
            )

    return tuple(results)
