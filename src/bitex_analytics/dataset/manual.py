"""Manual order entry and history reset.

Both operations return a new Dataset; the input dataset is left untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta

from bitex_analytics.dataset.config import MANUAL_SERVICE_MINUTES
from bitex_analytics.types import Customer, Dataset, Order

logger = logging.getLogger(__name__)


def add_manual_order(
    dataset: Dataset,
    customer_name: str,
    amount: float,
    guest_count: int,
    rating: float,
    now: datetime,
) -> Dataset:
    """Record a walk-in order entered by hand.

    Creates a new walk-in customer and an un-itemized order stamped at ``now``.
    The order is prepended so it shows first in the history.

    Args:
        dataset: Current dataset.
        customer_name: Name typed by staff.
        amount: Order total.
        guest_count: Party size.
        rating: Guest rating.
        now: Entry instant; also used to derive the record ids.

    Returns:
        New Dataset containing the extra customer and order.
    """
    stamp = int(now.timestamp() * 1000)
    customer = Customer(id=f"walk-in-{stamp}", name=customer_name, first_visit=now)
    order = Order(
        id=f"manual-{stamp}",
        timestamp=now,
        customer_id=customer.id,
        items=(),
        total_amount=float(amount),
        order_placed_at=now,
        order_served_at=now + timedelta(minutes=MANUAL_SERVICE_MINUTES),
        guest_count=int(guest_count),
        rating=float(rating),
    )
    logger.info("Recorded manual order %s for %s (amount=%s)", order.id, customer_name, amount)
    return replace(
        dataset,
        orders=(order, *dataset.orders),
        customers=(*dataset.customers, customer),
    )


def clear_orders(dataset: Dataset) -> Dataset:
    """Wipe transaction history, keeping only the menu catalog."""
    logger.info("Clearing %s orders and %s customers", len(dataset.orders), len(dataset.customers))
    return Dataset(orders=(), menu_items=dataset.menu_items, customers=())
