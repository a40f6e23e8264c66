"""Loading and dumping the JSON dataset document.

The document has three top-level arrays using camelCase field names:
``orders``, ``menuItems`` and ``customers``. Timestamps are ISO-8601 strings.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd

from bitex_analytics.dataset.config import LOCAL_TIMEZONE
from bitex_analytics.exceptions import DataQualityError
from bitex_analytics.types import Customer, Dataset, MenuItem, Order, OrderItem

logger = logging.getLogger(__name__)


def parse_timestamp(value: str | datetime, tz: str = LOCAL_TIMEZONE) -> datetime:
    """Parse an ISO timestamp into a naive local datetime.

    Offset-aware values (e.g. "2025-01-15T08:30:00Z") are converted to ``tz``
    first; naive values are taken as already local.

    Examples:
        >>> parse_timestamp("2025-01-15T08:30:00Z")
        datetime.datetime(2025, 1, 15, 14, 0)
        >>> parse_timestamp("2025-01-15T14:00:00")
        datetime.datetime(2025, 1, 15, 14, 0)
    """
    ts = pd.Timestamp(value)
    if ts.tzinfo is not None:
        ts = ts.tz_convert(tz).tz_localize(None)
    return ts.to_pydatetime()


def _menu_item(record: dict[str, Any]) -> MenuItem:
    return MenuItem(
        id=str(record["id"]),
        name=record["name"],
        category=record["category"],
        selling_price=float(record["sellingPrice"]),
        cost_price=float(record["costPrice"]),
    )


def _order(record: dict[str, Any], tz: str) -> Order:
    items = tuple(
        OrderItem(
            menu_item_id=str(item["menuItemId"]),
            quantity=int(item["quantity"]),
            price_at_order=float(item["priceAtOrder"]),
        )
        for item in record.get("items", [])
    )
    return Order(
        id=str(record["id"]),
        timestamp=parse_timestamp(record["timestamp"], tz),
        customer_id=str(record["customerId"]),
        items=items,
        total_amount=float(record["totalAmount"]),
        order_placed_at=parse_timestamp(record["orderPlacedAt"], tz),
        order_served_at=parse_timestamp(record["orderServedAt"], tz),
        guest_count=int(record["guestCount"]),
        rating=float(record["rating"]),
    )


def _customer(record: dict[str, Any], tz: str) -> Customer:
    return Customer(
        id=str(record["id"]),
        name=record["name"],
        first_visit=parse_timestamp(record["firstVisit"], tz),
    )


def dataset_from_dict(payload: dict[str, Any], tz: str = LOCAL_TIMEZONE) -> Dataset:
    """Build a Dataset from the JSON-shaped document.

    Missing top-level arrays are treated as empty.

    Raises:
        DataQualityError: If the payload is not an object or a record lacks a field.
    """
    if not isinstance(payload, dict):
        raise DataQualityError(
            f"Dataset must be a JSON object with orders/menuItems/customers, "
            f"got {type(payload).__name__}"
        )

    try:
        menu_items = tuple(_menu_item(r) for r in payload.get("menuItems", []))
        orders = tuple(_order(r, tz) for r in payload.get("orders", []))
        customers = tuple(_customer(r, tz) for r in payload.get("customers", []))
    except KeyError as e:
        raise DataQualityError(f"Dataset record is missing required field {e}") from e
    except (TypeError, ValueError) as e:
        raise DataQualityError(f"Dataset record has an invalid value: {e}") from e

    return Dataset(orders=orders, menu_items=menu_items, customers=customers)


def dataset_to_dict(dataset: Dataset) -> dict[str, Any]:
    """Dump a Dataset to the JSON-shaped document (inverse of dataset_from_dict)."""
    return {
        "orders": [
            {
                "id": o.id,
                "timestamp": o.timestamp.isoformat(),
                "customerId": o.customer_id,
                "items": [
                    {
                        "menuItemId": it.menu_item_id,
                        "quantity": it.quantity,
                        "priceAtOrder": it.price_at_order,
                    }
                    for it in o.items
                ],
                "totalAmount": o.total_amount,
                "orderPlacedAt": o.order_placed_at.isoformat(),
                "orderServedAt": o.order_served_at.isoformat(),
                "guestCount": o.guest_count,
                "rating": o.rating,
            }
            for o in dataset.orders
        ],
        "menuItems": [
            {
                "id": mi.id,
                "name": mi.name,
                "category": mi.category,
                "sellingPrice": mi.selling_price,
                "costPrice": mi.cost_price,
            }
            for mi in dataset.menu_items
        ],
        "customers": [
            {"id": c.id, "name": c.name, "firstVisit": c.first_visit.isoformat()}
            for c in dataset.customers
        ],
    }


def load_dataset(path: str | Path, tz: str = LOCAL_TIMEZONE) -> Dataset:
    """Load a dataset JSON file.

    Args:
        path: Path to the dataset JSON.
        tz: Timezone offset-aware timestamps are converted to.

    Returns:
        Dataset with orders, menu items and customers.

    Raises:
        FileNotFoundError: If the file does not exist.
        DataQualityError: If the file is not valid JSON or has malformed records.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DataQualityError(f"Dataset file {path} is not valid JSON: {e}") from e

    dataset = dataset_from_dict(payload, tz)
    logger.info(
        "Loaded %s orders, %s menu items, %s customers from %s",
        len(dataset.orders),
        len(dataset.menu_items),
        len(dataset.customers),
        path,
    )
    return dataset


def save_dataset(dataset: Dataset, path: str | Path) -> Path:
    """Write a dataset JSON file and return its path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dataset_to_dict(dataset), indent=2), encoding="utf-8")
    logger.debug("Wrote dataset: %s", path)
    return path
