"""Shared fixtures for the BiteX Analytics test suite."""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

import pytest

from bitex_analytics.types import MenuItem, Order, OrderItem

# Wednesday evening
NOW = datetime(2025, 1, 15, 20, 30)


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation instant."""
    return NOW


@pytest.fixture
def menu() -> list[MenuItem]:
    """Small catalog with distinct prices and margins.

    Profit per item: Biryani 870, Butter Chicken 630, Paneer Tikka 400, Lassi 220.
    """
    return [
        MenuItem("m1", "Awadhi Mutton Biryani", "Main", 1250, 380),
        MenuItem("m2", "Old Delhi Butter Chicken", "Main", 850, 220),
        MenuItem("m3", "Paneer Tikka Multani", "Appetizer", 550, 150),
        MenuItem("m4", "Mango Lassi Supreme", "Beverage", 280, 60),
    ]


@pytest.fixture
def make_order() -> Callable[..., Order]:
    """Factory for orders; total_amount defaults to the sum of the items."""

    counter = {"n": 0}

    def _make(
        timestamp: datetime = NOW,
        customer_id: str = "c1",
        total_amount: float | None = None,
        items: list[tuple[str, int, float]] | None = None,
        guest_count: int = 2,
        rating: float = 4.0,
        order_id: str | None = None,
        **overrides: Any,
    ) -> Order:
        counter["n"] += 1
        lines = tuple(OrderItem(mid, qty, price) for mid, qty, price in (items or []))
        if total_amount is None:
            total_amount = float(sum(line.line_total for line in lines))
        return Order(
            id=order_id or f"order-{counter['n']}",
            timestamp=timestamp,
            customer_id=customer_id,
            items=lines,
            total_amount=total_amount,
            order_placed_at=overrides.get("order_placed_at", timestamp),
            order_served_at=overrides.get("order_served_at", timestamp + timedelta(minutes=25)),
            guest_count=guest_count,
            rating=rating,
        )

    return _make
