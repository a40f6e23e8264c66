"""Data quality checks.

Example:
    >>> from bitex_analytics.qa import reconcile_order_totals
    >>>
    >>> result = reconcile_order_totals(dataset.orders)
    >>> print(result.summary["mismatch_count"])
"""

from bitex_analytics.qa.reconciliation import (
    ReconciliationResult,
    check_order_totals,
    reconcile_order_totals,
)

__all__ = ["ReconciliationResult", "check_order_totals", "reconcile_order_totals"]
