"""Date-range filter applied to orders before aggregation.

The filter keeps orders whose timestamp falls on or after a cutoff derived
from a trailing window and an explicit evaluation instant.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta
from enum import Enum

from bitex_analytics.types import Order

logger = logging.getLogger(__name__)


class DateWindow(str, Enum):
    """Trailing windows offered by the dashboard."""

    LAST_7_DAYS = "last-7-days"
    LAST_30_DAYS = "last-30-days"
    ALL_TIME = "all-time"


WINDOW_DAYS = {
    DateWindow.LAST_7_DAYS: 7,
    DateWindow.LAST_30_DAYS: 30,
}


def parse_window(window: DateWindow | str) -> DateWindow:
    """Resolve a window name to a DateWindow.

    Raises:
        ValueError: If the name is not one of the supported windows.
    """
    if isinstance(window, DateWindow):
        return window
    try:
        return DateWindow(window)
    except ValueError:
        valid = ", ".join(w.value for w in DateWindow)
        raise ValueError(f"Invalid window '{window}'. Must be one of: {valid}.") from None


def window_cutoff(window: DateWindow | str, now: datetime) -> datetime | None:
    """Return the earliest timestamp kept by ``window``, or None for all-time."""
    window = parse_window(window)
    days = WINDOW_DAYS.get(window)
    if days is None:
        return None
    return now - timedelta(days=days)


def filter_by_window(
    orders: Sequence[Order],
    window: DateWindow | str,
    now: datetime,
) -> list[Order]:
    """Keep the orders that fall inside a trailing window ending at ``now``.

    Args:
        orders: Orders to filter. Never mutated.
        window: "last-7-days", "last-30-days" or "all-time".
        now: Evaluation instant the window ends at.

    Returns:
        A new list with the retained orders in their original order. For
        "all-time" this is a copy of the input.

    Raises:
        ValueError: If window is not a supported window name.

    Examples:
        >>> filter_by_window([], "last-7-days", datetime(2025, 1, 31))
        []
    """
    cutoff = window_cutoff(window, now)
    if cutoff is None:
        return list(orders)

    kept = [order for order in orders if order.timestamp >= cutoff]
    logger.debug(
        "Window %s kept %s of %s orders (cutoff %s)",
        parse_window(window).value,
        len(kept),
        len(orders),
        cutoff.isoformat(),
    )
    return kept
