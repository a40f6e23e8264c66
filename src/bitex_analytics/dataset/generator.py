"""Synthetic dataset generation.

Produces a realistic month of restaurant traffic for demos and tests:
weekend-heavy volume, lunch and dinner peaks, larger family parties and a
fixed 20-item catalog. All randomness comes from a seeded numpy Generator
so the same seed and ``now`` always yield the same dataset.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

import numpy as np

from bitex_analytics.dataset.config import (
    CUSTOMER_NAMES,
    DINNER_HOURS,
    FIRST_VISIT_LOOKBACK_DAYS,
    ITEMS_PER_ORDER,
    LUNCH_HOURS,
    PREP_MINUTES,
    RATING_RANGE,
    SAMPLE_CUSTOMERS,
    SAMPLE_DAYS,
    SAMPLE_MENU,
    WEEKDAY_ORDERS,
    WEEKEND_ORDERS,
    WEEKEND_WEEKDAYS,
)
from bitex_analytics.types import Customer, Dataset, Order, OrderItem

logger = logging.getLogger(__name__)


def _pick_hour(rng: np.random.Generator) -> int:
    """Dinner 40%, lunch 30%, any hour 30%."""
    roll = rng.random()
    if roll > 0.6:
        return int(rng.integers(*DINNER_HOURS))
    if roll > 0.3:
        return int(rng.integers(*LUNCH_HOURS))
    return int(rng.integers(0, 24))


def _pick_guest_count(rng: np.random.Generator) -> int:
    # Family groups of 4-9 make up about 30% of tables
    if rng.random() > 0.7:
        return int(rng.integers(4, 10))
    return int(rng.integers(1, 4))


def generate_sample_dataset(
    now: datetime,
    seed: int | None = None,
    days: int = SAMPLE_DAYS,
    customer_count: int = SAMPLE_CUSTOMERS,
) -> Dataset:
    """Generate a synthetic dataset ending on ``now``'s day.

    Args:
        now: Evaluation instant; orders are generated for the ``days`` calendar
            days ending on this date.
        seed: Seed for numpy's random Generator. None draws fresh entropy.
        days: Number of days of orders.
        customer_count: Number of customers to draw orders from.

    Returns:
        Dataset with the sample catalog, generated customers and orders.

    Raises:
        ValueError: If days or customer_count is not positive.
    """
    if days < 1:
        raise ValueError(f"days must be positive, got {days}")
    if customer_count < 1:
        raise ValueError(f"customer_count must be positive, got {customer_count}")

    rng = np.random.default_rng(seed)
    menu = SAMPLE_MENU

    lookback_seconds = FIRST_VISIT_LOOKBACK_DAYS * 24 * 60 * 60
    customers = tuple(
        Customer(
            id=f"cust-{i}",
            name=f"{CUSTOMER_NAMES[i % len(CUSTOMER_NAMES)]} {i + 1}",
            first_visit=now - timedelta(seconds=float(rng.uniform(0, lookback_seconds))),
        )
        for i in range(customer_count)
    )

    orders: list[Order] = []
    for d in range(days):
        day = now - timedelta(days=d)
        if day.weekday() in WEEKEND_WEEKDAYS:
            order_count = int(rng.integers(*WEEKEND_ORDERS))
        else:
            order_count = int(rng.integers(*WEEKDAY_ORDERS))

        for o in range(order_count):
            placed = day.replace(
                hour=_pick_hour(rng), minute=int(rng.integers(0, 60)), second=0, microsecond=0
            )
            served = placed + timedelta(minutes=int(rng.integers(*PREP_MINUTES)))
            guest_count = _pick_guest_count(rng)
            customer = customers[int(rng.integers(len(customers)))]

            n_items = min(int(rng.integers(*ITEMS_PER_ORDER)), len(menu))
            picks = rng.choice(len(menu), size=n_items, replace=False)
            items = tuple(
                OrderItem(
                    menu_item_id=menu[i].id,
                    # Mostly 1, sometimes 2
                    quantity=2 if rng.random() > 0.8 else 1,
                    price_at_order=menu[i].selling_price,
                )
                for i in picks
            )

            orders.append(
                Order(
                    id=f"order-{d}-{o}",
                    timestamp=placed,
                    customer_id=customer.id,
                    items=items,
                    total_amount=float(sum(item.line_total for item in items)),
                    order_placed_at=placed,
                    order_served_at=served,
                    guest_count=guest_count,
                    rating=round(float(rng.uniform(*RATING_RANGE)), 1),
                )
            )

    logger.info(
        "Generated %s orders over %s days for %s customers (seed=%s)",
        len(orders),
        days,
        len(customers),
        seed,
    )
    return Dataset(orders=tuple(orders), menu_items=menu, customers=customers)
