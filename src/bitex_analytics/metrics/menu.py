"""Menu performance: per-item sales, rankings and the engineering matrix.

Pricing policy:
    ``total_revenue`` and ``total_profit`` are reported at the current catalog
    ``selling_price`` and ``cost_price`` so revenue and margin are measured on
    the same basis as the menu-engineering matrix. Order lines also store the
    price actually charged; that figure is kept alongside as
    ``snapshot_revenue``.

Order lines whose ``menu_item_id`` is not in the catalog are ignored.
"""

from __future__ import annotations

import logging

import pandas as pd

from bitex_analytics.metrics.config import DOG, PLOWHORSE, PUZZLE, STAR, TOP_N
from bitex_analytics.metrics.types import (
    ItemPerformance,
    MatrixPoint,
    PopularItem,
    RevenueContribution,
)

logger = logging.getLogger(__name__)


def build_item_performance(menu_df: pd.DataFrame, items_df: pd.DataFrame) -> pd.DataFrame:
    """Join catalog items with the quantities sold on order lines.

    Args:
        menu_df: Catalog frame from ``menu_to_frame``.
        items_df: Order-line frame from ``order_items_to_frame``.

    Returns:
        One row per catalog item, in catalog order, with added columns
        quantity_sold, profit_per_item, total_profit, total_revenue and
        snapshot_revenue.
    """
    lines = items_df.assign(line_total=items_df["quantity"] * items_df["price_at_order"])
    by_item = lines.groupby("menu_item_id")
    quantity_by_item = by_item["quantity"].sum()
    revenue_by_item = by_item["line_total"].sum()

    unknown = ~lines["menu_item_id"].isin(menu_df["menu_item_id"])
    if unknown.any():
        logger.debug(
            "Ignoring %s order line(s) with unknown menu items: %s",
            int(unknown.sum()),
            sorted(lines.loc[unknown, "menu_item_id"].unique()),
        )

    perf = menu_df.copy()
    perf["quantity_sold"] = perf["menu_item_id"].map(quantity_by_item).fillna(0).astype("int64")
    perf["snapshot_revenue"] = (
        perf["menu_item_id"].map(revenue_by_item).fillna(0.0).astype("float64")
    )
    perf["profit_per_item"] = perf["selling_price"] - perf["cost_price"]
    perf["total_profit"] = perf["profit_per_item"] * perf["quantity_sold"]
    perf["total_revenue"] = perf["selling_price"] * perf["quantity_sold"]
    return perf


def _ranked(perf: pd.DataFrame, column: str, n: int) -> pd.DataFrame:
    # Stable sort keeps catalog order among ties
    return perf.sort_values(column, ascending=False, kind="stable").head(n)


def _to_performance(row: pd.Series) -> ItemPerformance:
    return ItemPerformance(
        id=row["menu_item_id"],
        name=row["name"],
        category=row["category"],
        selling_price=float(row["selling_price"]),
        cost_price=float(row["cost_price"]),
        quantity_sold=int(row["quantity_sold"]),
        profit_per_item=float(row["profit_per_item"]),
        total_profit=float(row["total_profit"]),
        total_revenue=float(row["total_revenue"]),
        snapshot_revenue=float(row["snapshot_revenue"]),
    )


def top_profit_items(perf: pd.DataFrame, n: int = TOP_N) -> tuple[ItemPerformance, ...]:
    """Items with the highest total profit."""
    return tuple(_to_performance(row) for _, row in _ranked(perf, "total_profit", n).iterrows())


def most_ordered_items(perf: pd.DataFrame, n: int = TOP_N) -> tuple[PopularItem, ...]:
    """Items with the most units sold."""
    return tuple(
        PopularItem(
            name=row["name"],
            orders=int(row["quantity_sold"]),
            revenue=float(row["total_revenue"]),
        )
        for _, row in _ranked(perf, "quantity_sold", n).iterrows()
    )


def revenue_contribution(perf: pd.DataFrame, n: int = TOP_N) -> tuple[RevenueContribution, ...]:
    """Top items by revenue with their share of revenue across the whole catalog.

    The share is formatted with one decimal place and is "0.0" when the
    catalog sold nothing.
    """
    total_revenue = float(perf["total_revenue"].sum())

    results = []
    for _, row in _ranked(perf, "total_revenue", n).iterrows():
        value = float(row["total_revenue"])
        share = value / total_revenue * 100 if total_revenue > 0 else 0.0
        results.append(RevenueContribution(name=row["name"], value=value, percentage=f"{share:.1f}"))
    return tuple(results)


def classify_quadrant(
    quantity_sold: float,
    profit_per_item: float,
    avg_qty: float,
    avg_profit: float,
) -> str:
    """Place an item in the menu-engineering matrix.

    Values equal to the average count as high.

    Examples:
        >>> classify_quadrant(10, 300, avg_qty=5, avg_profit=200)
        'Star'
        >>> classify_quadrant(5, 199, avg_qty=5, avg_profit=200)
        'Plowhorse'
    """
    high_qty = quantity_sold >= avg_qty
    high_profit = profit_per_item >= avg_profit
    if high_qty and high_profit:
        return STAR
    if high_qty:
        return PLOWHORSE
    if high_profit:
        return PUZZLE
    return DOG


def menu_engineering_matrix(
    perf: pd.DataFrame,
) -> tuple[tuple[MatrixPoint, ...], float, float]:
    """Classify every catalog item against catalog-wide averages.

    Returns:
        Tuple of (matrix points in catalog order, avg_qty, avg_profit).
        Averages are 0 for an empty catalog.
    """
    if perf.empty:
        return (), 0.0, 0.0

    avg_qty = float(perf["quantity_sold"].mean())
    avg_profit = float(perf["profit_per_item"].mean())

    points = tuple(
        MatrixPoint(
            name=name,
            x=int(qty),
            y=float(profit),
            quadrant=classify_quadrant(qty, profit, avg_qty, avg_profit),
        )
        for name, qty, profit in zip(
            perf["name"], perf["quantity_sold"], perf["profit_per_item"], strict=False
        )
    )
    return points, avg_qty, avg_profit
