"""Tests for order-total reconciliation."""

from collections.abc import Callable

import pytest

from bitex_analytics.exceptions import DataQualityError
from bitex_analytics.qa import check_order_totals, reconcile_order_totals
from bitex_analytics.qa.reconciliation import MISMATCH_COLUMNS
from bitex_analytics.types import Order

MakeOrder = Callable[..., Order]


def test_consistent_orders_pass(make_order: MakeOrder) -> None:
    orders = [
        make_order(items=[("m1", 2, 1250)]),
        make_order(items=[("m2", 1, 850), ("m4", 3, 280)]),
    ]

    result = reconcile_order_totals(orders)

    assert result.ok
    assert result.summary == {
        "checked": 2,
        "skipped_unitemized": 0,
        "mismatch_count": 0,
        "max_abs_difference": 0.0,
    }
    assert list(result.mismatches.columns) == MISMATCH_COLUMNS


def test_mismatch_reported(make_order: MakeOrder) -> None:
    orders = [
        make_order(items=[("m1", 1, 1250)], order_id="good"),
        make_order(items=[("m1", 1, 1250)], total_amount=1200, order_id="short"),
    ]

    result = reconcile_order_totals(orders)

    assert not result.ok
    assert result.summary["mismatch_count"] == 1
    assert result.summary["max_abs_difference"] == pytest.approx(50.0)
    assert result.mismatches["order_id"].tolist() == ["short"]
    assert result.mismatches["difference"].tolist() == [pytest.approx(-50.0)]


def test_rounding_within_tolerance(make_order: MakeOrder) -> None:
    orders = [make_order(items=[("m1", 3, 333.33)], total_amount=999.995)]

    assert reconcile_order_totals(orders).ok


def test_manual_orders_are_skipped(make_order: MakeOrder) -> None:
    """Un-itemized orders carry only a total and cannot be checked."""
    orders = [make_order(total_amount=750), make_order(items=[("m3", 1, 550)])]

    result = reconcile_order_totals(orders)

    assert result.ok
    assert result.summary["checked"] == 1
    assert result.summary["skipped_unitemized"] == 1


def test_empty_input() -> None:
    result = reconcile_order_totals([])

    assert result.ok
    assert result.summary["checked"] == 0
    assert result.summary["max_abs_difference"] == 0.0


def test_check_warns(make_order: MakeOrder, caplog: pytest.LogCaptureFixture) -> None:
    orders = [make_order(items=[("m1", 1, 1250)], total_amount=1000, order_id="off-by-250")]

    result = check_order_totals(orders)

    assert not result.ok
    assert "off-by-250" in caplog.text
    assert "max difference 250.00" in caplog.text


def test_check_strict_raises(make_order: MakeOrder) -> None:
    orders = [make_order(items=[("m1", 1, 1250)], total_amount=1000, order_id="off-by-250")]

    with pytest.raises(DataQualityError, match="off-by-250"):
        check_order_totals(orders, strict=True)


def test_check_strict_passes_clean_data(make_order: MakeOrder) -> None:
    orders = [make_order(items=[("m1", 1, 1250)])]

    assert check_order_totals(orders, strict=True).ok
