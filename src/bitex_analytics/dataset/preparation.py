"""Frame preparation for the metrics engine.

This module turns the domain records into typed pandas DataFrames. Every
frame keeps the same columns and dtypes when the input is empty so the
aggregations downstream never need a special case for missing columns.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from bitex_analytics.types import MenuItem, Order

ORDER_COLUMNS = [
    "order_id",
    "timestamp",
    "customer_id",
    "total_amount",
    "guest_count",
    "rating",
    "item_count",
    "order_date",
    "hour",
]

ORDER_ITEM_COLUMNS = ["order_id", "menu_item_id", "quantity", "price_at_order"]

MENU_COLUMNS = ["menu_item_id", "name", "category", "selling_price", "cost_price"]


def orders_to_frame(orders: Sequence[Order]) -> pd.DataFrame:
    """Build the order-grain frame (one row per order).

    Adds two helper columns derived from ``timestamp``: ``order_date``
    (midnight of the calendar day) and ``hour`` (0-23).

    Args:
        orders: Orders with naive local timestamps.

    Returns:
        DataFrame with ORDER_COLUMNS, rows in input order.
    """
    df = pd.DataFrame(
        {
            "order_id": pd.Series([o.id for o in orders], dtype="object"),
            "timestamp": pd.Series([o.timestamp for o in orders], dtype="datetime64[ns]"),
            "customer_id": pd.Series([o.customer_id for o in orders], dtype="object"),
            "total_amount": pd.Series([o.total_amount for o in orders], dtype="float64"),
            "guest_count": pd.Series([o.guest_count for o in orders], dtype="int64"),
            "rating": pd.Series([o.rating for o in orders], dtype="float64"),
            "item_count": pd.Series([len(o.items) for o in orders], dtype="int64"),
        }
    )
    df["order_date"] = df["timestamp"].dt.normalize()
    df["hour"] = df["timestamp"].dt.hour.astype("int64")
    return df[ORDER_COLUMNS]


def order_items_to_frame(orders: Sequence[Order]) -> pd.DataFrame:
    """Build the order-line frame (one row per order item)."""
    rows = [
        (order.id, item.menu_item_id, item.quantity, item.price_at_order)
        for order in orders
        for item in order.items
    ]
    df = pd.DataFrame(rows, columns=ORDER_ITEM_COLUMNS)
    return df.astype(
        {
            "order_id": "object",
            "menu_item_id": "object",
            "quantity": "int64",
            "price_at_order": "float64",
        }
    )


def menu_to_frame(menu_items: Sequence[MenuItem]) -> pd.DataFrame:
    """Build the catalog frame, preserving catalog order in a RangeIndex."""
    rows = [
        (mi.id, mi.name, mi.category, mi.selling_price, mi.cost_price) for mi in menu_items
    ]
    df = pd.DataFrame(rows, columns=MENU_COLUMNS)
    return df.astype(
        {
            "menu_item_id": "object",
            "name": "object",
            "category": "object",
            "selling_price": "float64",
            "cost_price": "float64",
        }
    )
