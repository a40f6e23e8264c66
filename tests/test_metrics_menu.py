"""Tests for item performance, rankings, contribution and the menu-engineering matrix."""

from collections.abc import Callable

import pandas as pd
import pytest

from bitex_analytics.dataset.preparation import menu_to_frame, order_items_to_frame
from bitex_analytics.metrics.config import QUADRANTS
from bitex_analytics.metrics.menu import (
    build_item_performance,
    classify_quadrant,
    menu_engineering_matrix,
    most_ordered_items,
    revenue_contribution,
    top_profit_items,
)
from bitex_analytics.types import MenuItem, Order

MakeOrder = Callable[..., Order]


@pytest.fixture
def orders(make_order: MakeOrder) -> list[Order]:
    """Three orders; one line is priced below catalog and one references no catalog item.

    Units sold: m1=2, m2=4, m3=1, m4=4.
    """
    return [
        make_order(items=[("m1", 2, 1250), ("m2", 1, 850)]),
        make_order(items=[("m2", 3, 800), ("m4", 4, 280)]),
        make_order(items=[("m3", 1, 550), ("ghost", 5, 100)]),
    ]


@pytest.fixture
def perf(menu: list[MenuItem], orders: list[Order]) -> pd.DataFrame:
    return build_item_performance(menu_to_frame(menu), order_items_to_frame(orders))


class TestItemPerformance:
    def test_one_row_per_catalog_item_in_catalog_order(self, perf: pd.DataFrame) -> None:
        assert perf["menu_item_id"].tolist() == ["m1", "m2", "m3", "m4"]

    def test_quantities_ignore_unknown_items(self, perf: pd.DataFrame) -> None:
        assert perf["quantity_sold"].tolist() == [2, 4, 1, 4]
        assert "ghost" not in perf["menu_item_id"].tolist()

    def test_profit_and_catalog_priced_revenue(self, perf: pd.DataFrame) -> None:
        """Revenue and profit use the current catalog prices."""
        assert perf["profit_per_item"].tolist() == [870, 630, 400, 220]
        assert perf["total_profit"].tolist() == [1740, 2520, 400, 880]
        assert perf["total_revenue"].tolist() == [2500, 3400, 550, 1120]

    def test_snapshot_revenue_uses_price_at_order(self, perf: pd.DataFrame) -> None:
        """m2 sold 3 units at 800 and 1 at 850: 3250 charged vs 3400 at catalog price."""
        assert perf["snapshot_revenue"].tolist() == [2500, 3250, 550, 1120]

    def test_no_orders(self, menu: list[MenuItem]) -> None:
        perf = build_item_performance(menu_to_frame(menu), order_items_to_frame([]))

        assert perf["quantity_sold"].tolist() == [0, 0, 0, 0]
        assert perf["total_revenue"].sum() == 0

    def test_does_not_mutate_catalog_frame(self, menu: list[MenuItem], orders: list[Order]) -> None:
        menu_df = menu_to_frame(menu)
        before = menu_df.copy()

        build_item_performance(menu_df, order_items_to_frame(orders))

        pd.testing.assert_frame_equal(menu_df, before)


class TestRankings:
    def test_top_profit_items(self, perf: pd.DataFrame) -> None:
        top = top_profit_items(perf)

        assert [p.id for p in top] == ["m2", "m1", "m4", "m3"]
        assert top[0].total_profit == 2520
        assert top[0].quantity_sold == 4

    def test_most_ordered_ties_keep_catalog_order(self, perf: pd.DataFrame) -> None:
        """m2 and m4 both sold 4 units; m2 comes first in the catalog."""
        ranked = most_ordered_items(perf)

        assert [(m.name, m.orders) for m in ranked] == [
            ("Old Delhi Butter Chicken", 4),
            ("Mango Lassi Supreme", 4),
            ("Awadhi Mutton Biryani", 2),
            ("Paneer Tikka Multani", 1),
        ]
        assert ranked[0].revenue == 3400

    def test_top_n_truncates(self, make_order: MakeOrder) -> None:
        catalog = [MenuItem(f"x{i}", f"Item {i}", "Main", 100 + i, 50) for i in range(7)]
        orders = [make_order(items=[(f"x{i}", i + 1, 100 + i) for i in range(7)])]
        perf = build_item_performance(menu_to_frame(catalog), order_items_to_frame(orders))

        assert len(top_profit_items(perf)) == 5
        assert len(most_ordered_items(perf)) == 5
        assert len(revenue_contribution(perf)) == 5
        assert [p.id for p in top_profit_items(perf)] == ["x6", "x5", "x4", "x3", "x2"]

    def test_profit_ties_keep_catalog_order(self) -> None:
        catalog = [MenuItem(f"t{i}", f"Twin {i}", "Dessert", 300, 100) for i in range(6)]
        perf = build_item_performance(menu_to_frame(catalog), order_items_to_frame([]))

        assert [p.id for p in top_profit_items(perf)] == ["t0", "t1", "t2", "t3", "t4"]


class TestRevenueContribution:
    def test_percentages(self, perf: pd.DataFrame) -> None:
        contribution = revenue_contribution(perf)

        assert [(c.name, c.value, c.percentage) for c in contribution] == [
            ("Old Delhi Butter Chicken", 3400, "44.9"),
            ("Awadhi Mutton Biryani", 2500, "33.0"),
            ("Mango Lassi Supreme", 1120, "14.8"),
            ("Paneer Tikka Multani", 550, "7.3"),
        ]

    def test_percentages_sum_to_about_100(self, perf: pd.DataFrame) -> None:
        total = sum(float(c.percentage) for c in revenue_contribution(perf))

        assert total == pytest.approx(100.0, abs=0.5)

    def test_zero_revenue_is_guarded(self, menu: list[MenuItem]) -> None:
        perf = build_item_performance(menu_to_frame(menu), order_items_to_frame([]))

        assert all(c.percentage == "0.0" for c in revenue_contribution(perf))


class TestMenuEngineering:
    def test_classify_quadrant(self) -> None:
        """Scenario: 10 sold vs avg 5, profit 300 vs avg 200 is a Star."""
        assert classify_quadrant(10, 300, avg_qty=5, avg_profit=200) == "Star"
        assert classify_quadrant(10, 100, avg_qty=5, avg_profit=200) == "Plowhorse"
        assert classify_quadrant(1, 300, avg_qty=5, avg_profit=200) == "Puzzle"
        assert classify_quadrant(1, 100, avg_qty=5, avg_profit=200) == "Dog"

    def test_equal_to_average_counts_as_high(self) -> None:
        assert classify_quadrant(5, 200, avg_qty=5, avg_profit=200) == "Star"

    def test_matrix_star_scenario(self, make_order: MakeOrder) -> None:
        catalog = [
            MenuItem("a", "Galouti Kebab", "Appetizer", 500, 200),
            MenuItem("b", "Masala Tea", "Beverage", 150, 50),
        ]
        orders = [make_order(items=[("a", 10, 500)])]
        perf = build_item_performance(menu_to_frame(catalog), order_items_to_frame(orders))

        points, avg_qty, avg_profit = menu_engineering_matrix(perf)

        assert avg_qty == 5
        assert avg_profit == 200
        assert points[0].quadrant == "Star"
        assert (points[0].x, points[0].y) == (10, 300)
        assert points[1].quadrant == "Dog"

    def test_every_item_in_exactly_one_quadrant(self, perf: pd.DataFrame) -> None:
        points, avg_qty, avg_profit = menu_engineering_matrix(perf)

        assert avg_qty == pytest.approx(2.75)
        assert avg_profit == pytest.approx(530.0)
        assert [(p.name, p.quadrant) for p in points] == [
            ("Awadhi Mutton Biryani", "Puzzle"),
            ("Old Delhi Butter Chicken", "Star"),
            ("Paneer Tikka Multani", "Dog"),
            ("Mango Lassi Supreme", "Plowhorse"),
        ]
        assert all(p.quadrant in QUADRANTS for p in points)
        assert len(points) == len(perf)

    def test_empty_catalog(self) -> None:
        perf = build_item_performance(menu_to_frame([]), order_items_to_frame([]))

        assert menu_engineering_matrix(perf) == ((), 0.0, 0.0)
