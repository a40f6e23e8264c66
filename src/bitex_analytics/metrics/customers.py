"""Guest metrics: loyalty, satisfaction and party size."""

from __future__ import annotations

import pandas as pd

from bitex_analytics.metrics.config import PARTY_SIZE_BUCKETS
from bitex_analytics.metrics.types import PartySize


def repeat_rate(orders_df: pd.DataFrame) -> float:
    """Percentage of distinct customers with more than one order.

    Returns 0 when the frame has no customers.

    Examples:
        >>> df = pd.DataFrame({"customer_id": ["c1", "c1", "c1", "c2"]})
        >>> repeat_rate(df)
        50.0
    """
    counts = orders_df["customer_id"].value_counts()
    if counts.empty:
        return 0.0
    return float((counts > 1).sum()) / len(counts) * 100


def average_rating(orders_df: pd.DataFrame) -> float:
    """Mean guest rating, 0 when there are no orders."""
    if orders_df.empty:
        return 0.0
    return float(orders_df["rating"].mean())


def party_size_label(index: int) -> str:
    if index == PARTY_SIZE_BUCKETS - 1:
        return f"{PARTY_SIZE_BUCKETS}+ Guests"
    return f"{index + 1} Guests"


def party_size_distribution(orders_df: pd.DataFrame) -> tuple[PartySize, ...]:
    """Count orders by party size, with six and above sharing one bucket."""
    bucket = orders_df["guest_count"].clip(lower=1, upper=PARTY_SIZE_BUCKETS) - 1
    counts = bucket.value_counts().reindex(range(PARTY_SIZE_BUCKETS), fill_value=0)
    return tuple(PartySize(size=party_size_label(i), count=int(n)) for i, n in counts.items())
