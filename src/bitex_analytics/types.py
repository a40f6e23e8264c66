"""Domain records for point-of-sale data.

These are the read-only inputs of the metrics engine. Timestamps are naive
``datetime`` values in restaurant-local wall-clock time; the dataset loader
is responsible for converting offset-aware input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

MENU_CATEGORIES = ("Appetizer", "Main", "Dessert", "Beverage")


@dataclass(frozen=True)
class MenuItem:
    """A catalog entry.

    Attributes:
        id: Unique item identifier.
        name: Display name.
        category: One of MENU_CATEGORIES.
        selling_price: Current menu price.
        cost_price: Current unit cost (not enforced to be <= selling_price).
    """

    id: str
    name: str
    category: str
    selling_price: float
    cost_price: float


@dataclass(frozen=True)
class OrderItem:
    """A line on an order, with the price charged at transaction time."""

    menu_item_id: str
    quantity: int
    price_at_order: float

    @property
    def line_total(self) -> float:
        return self.price_at_order * self.quantity


@dataclass(frozen=True)
class Order:
    """A single point-of-sale transaction.

    Attributes:
        id: Order identifier.
        timestamp: Instant the order is attributed to.
        customer_id: Foreign key into Customer.
        items: Order lines. Manual entries carry no lines.
        total_amount: Stated transaction total, authoritative for revenue metrics.
        order_placed_at: When the order was placed.
        order_served_at: When the order was served.
        guest_count: Party size (>= 1).
        rating: Guest rating between 1.0 and 5.0.
    """

    id: str
    timestamp: datetime
    customer_id: str
    items: tuple[OrderItem, ...]
    total_amount: float
    order_placed_at: datetime
    order_served_at: datetime
    guest_count: int
    rating: float

    @property
    def items_total(self) -> float:
        """Sum of line totals at the prices charged."""
        return sum(item.line_total for item in self.items)


@dataclass(frozen=True)
class Customer:
    id: str
    name: str
    first_visit: datetime


@dataclass(frozen=True)
class Dataset:
    """In-memory form of the {orders, menuItems, customers} input document."""

    orders: tuple[Order, ...] = field(default_factory=tuple)
    menu_items: tuple[MenuItem, ...] = field(default_factory=tuple)
    customers: tuple[Customer, ...] = field(default_factory=tuple)
