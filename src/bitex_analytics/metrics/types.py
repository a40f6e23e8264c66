"""Result types produced by the metrics engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HourlySales:
    hour: str
    sales: float
    intensity: float


@dataclass(frozen=True)
class ItemPerformance:
    """Sales and margin figures for one catalog item.

    ``total_revenue`` is priced at the current catalog ``selling_price``;
    ``snapshot_revenue`` uses the prices charged on each order line.
    """

    id: str
    name: str
    category: str
    selling_price: float
    cost_price: float
    quantity_sold: int
    profit_per_item: float
    total_profit: float
    total_revenue: float
    snapshot_revenue: float


@dataclass(frozen=True)
class PopularItem:
    name: str
    orders: int
    revenue: float


@dataclass(frozen=True)
class RevenueContribution:
    name: str
    value: float
    percentage: str  # one decimal place, e.g. "23.4"


@dataclass(frozen=True)
class BasketBucket:
    range: str
    min: float
    max: float
    count: int


@dataclass(frozen=True)
class DayAverage:
    """Average order value for a day and for the same weekday a week earlier.

    ``prev_is_estimate`` is True when the earlier day had no orders and
    ``prev_aov`` is the synthetic fallback rather than a measured value.
    """

    day: str
    aov: float
    prev_aov: float
    prev_is_estimate: bool = False


@dataclass(frozen=True)
class PartySize:
    size: str
    count: int


@dataclass(frozen=True)
class MatrixPoint:
    name: str
    x: int
    y: float
    quadrant: str


@dataclass(frozen=True)
class DerivedMetrics:
    """Snapshot of every dashboard metric for one order set.

    A value: it is always recomputed in full from its inputs and never updated
    in place.
    """

    total_daily_sales: float
    sales_trend: float
    aov: float
    repeat_rate: float
    peak_hour_data: tuple[HourlySales, ...]
    avg_rating: float
    sorted_profit_items: tuple[ItemPerformance, ...]
    most_ordered_items: tuple[PopularItem, ...]
    contribution_data: tuple[RevenueContribution, ...]
    buckets: tuple[BasketBucket, ...]
    day_averages: tuple[DayAverage, ...]
    party_size_dist: tuple[PartySize, ...]
    matrix_data: tuple[MatrixPoint, ...]
    avg_qty: float
    avg_profit: float
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-shaped output with camelCase keys.

        The open-ended basket bucket's infinite maximum is emitted as None.
        """
        return {
            "totalDailySales": self.total_daily_sales,
            "salesTrend": self.sales_trend,
            "aov": self.aov,
            "repeatRate": self.repeat_rate,
            "peakHourData": [
                {"hour": h.hour, "sales": h.sales, "intensity": h.intensity}
                for h in self.peak_hour_data
            ],
            "avgRating": self.avg_rating,
            "sortedProfitItems": [
                {
                    "id": p.id,
                    "name": p.name,
                    "category": p.category,
                    "sellingPrice": p.selling_price,
                    "costPrice": p.cost_price,
                    "quantitySold": p.quantity_sold,
                    "profitPerItem": p.profit_per_item,
                    "totalProfit": p.total_profit,
                    "totalRevenue": p.total_revenue,
                    "snapshotRevenue": p.snapshot_revenue,
                }
                for p in self.sorted_profit_items
            ],
            "mostOrderedItems": [
                {"name": m.name, "orders": m.orders, "revenue": m.revenue}
                for m in self.most_ordered_items
            ],
            "contributionData": [
                {"name": c.name, "value": c.value, "percentage": c.percentage}
                for c in self.contribution_data
            ],
            "buckets": [
                {
                    "range": b.range,
                    "min": b.min,
                    "max": None if math.isinf(b.max) else b.max,
                    "count": b.count,
                }
                for b in self.buckets
            ],
            "dayAverages": [
                {
                    "day": d.day,
                    "aov": d.aov,
                    "prevAov": d.prev_aov,
                    "prevIsEstimate": d.prev_is_estimate,
                }
                for d in self.day_averages
            ],
            "partySizeDist": [{"size": p.size, "count": p.count} for p in self.party_size_dist],
            "matrixData": [
                {"name": m.name, "x": m.x, "y": m.y, "quadrant": m.quadrant}
                for m in self.matrix_data
            ],
            "avgQty": self.avg_qty,
            "avgProfit": self.avg_profit,
        }
