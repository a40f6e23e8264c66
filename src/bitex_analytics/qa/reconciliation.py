"""Order-total reconciliation.

``Order.total_amount`` is the authoritative figure for every revenue metric.
This check compares it with the sum of the order's lines
(``price_at_order * quantity``) and reports every order that disagrees, so
divergent totals are surfaced rather than silently accepted.

Orders without lines (manual entries) carry only a total and are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from bitex_analytics.exceptions import DataQualityError
from bitex_analytics.types import Order

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.01

MISMATCH_COLUMNS = ["order_id", "total_amount", "items_total", "difference"]


@dataclass
class ReconciliationResult:
    """Result of the order-total reconciliation.

    Attributes:
        summary: Counts: checked, skipped_unitemized, mismatch_count and
            max_abs_difference.
        mismatches: DataFrame with MISMATCH_COLUMNS, one row per order whose
            total differs from its lines by more than the tolerance.
    """

    summary: dict
    mismatches: pd.DataFrame

    @property
    def ok(self) -> bool:
        return self.mismatches.empty


def reconcile_order_totals(
    orders: Sequence[Order],
    tolerance: float = DEFAULT_TOLERANCE,
) -> ReconciliationResult:
    """Compare each order's stated total with the sum of its lines.

    Args:
        orders: Orders to check. Never mutated.
        tolerance: Largest absolute difference accepted as rounding.

    Returns:
        ReconciliationResult with a summary and the mismatching orders.
    """
    itemized = [o for o in orders if o.items]
    df = pd.DataFrame(
        {
            "order_id": pd.Series([o.id for o in itemized], dtype="object"),
            "total_amount": pd.Series([o.total_amount for o in itemized], dtype="float64"),
            "items_total": pd.Series([o.items_total for o in itemized], dtype="float64"),
        }
    )
    df["difference"] = df["total_amount"] - df["items_total"]

    mismatches = df[df["difference"].abs() > tolerance].reset_index(drop=True)

    summary = {
        "checked": len(df),
        "skipped_unitemized": len(orders) - len(itemized),
        "mismatch_count": len(mismatches),
        "max_abs_difference": float(df["difference"].abs().max()) if not df.empty else 0.0,
    }
    logger.debug("Reconciliation: %s", summary)
    return ReconciliationResult(summary=summary, mismatches=mismatches[MISMATCH_COLUMNS])


def check_order_totals(
    orders: Sequence[Order],
    strict: bool = False,
    tolerance: float = DEFAULT_TOLERANCE,
) -> ReconciliationResult:
    """Reconcile order totals and report mismatches.

    Args:
        orders: Orders to check.
        strict: Raise instead of warning when any order mismatches.
        tolerance: Largest absolute difference accepted as rounding.

    Returns:
        ReconciliationResult.

    Raises:
        DataQualityError: If strict is True and at least one order mismatches.
    """
    result = reconcile_order_totals(orders, tolerance)
    if result.ok:
        return result

    sample = result.mismatches["order_id"].head(5).tolist()
    message = (
        f"{result.summary['mismatch_count']} of {result.summary['checked']} orders have "
        f"totalAmount different from the sum of their items "
        f"(max difference {result.summary['max_abs_difference']:.2f}); e.g. {sample}"
    )
    if strict:
        raise DataQualityError(message)
    logger.warning(message)
    return result
