"""Tests for dashboard aggregates."""

import math
from datetime import date

import pytest

from basket import reports as R
from basket.model import Address, CartItem, Order, OrderStatus


def make_order(order_id, day, total, items=(), status=OrderStatus.PENDING):
    return Order(
        id=order_id,
        customer_id="cust_1",
        user_id=None,
        items=tuple(items),
        total=total,
        shipping_cost=0.0,
        payment_method="Bank Transfer",
        status=status,
        order_date=day,
        shipping_address=Address(),
        billing_address=Address(),
    )


@pytest.fixture
def history():
    return [
        make_order("o1", date(2024, 5, 1), 40.0, [CartItem("a", "mug", "Mug", 2, 20.0)]),
        make_order("o2", date(2024, 5, 3), 79.0, [CartItem("b", "sign", "Sign", 2, 39.5)], OrderStatus.SHIPPED),
        make_order("o3", date(2024, 5, 3), 13.0, [CartItem("c", "card", "Card", 2, 6.5)]),
        make_order("o4", date(2024, 4, 28), 30.0, [CartItem("d", "retired", "Old", 1, 30.0)]),
    ]


class TestPeriods:
    def test_summary_window_is_half_open(self, history):
        summary = R.period_summary(history, date(2024, 5, 1), 3)

        assert summary.sales == 3
        assert summary.revenue == pytest.approx(132.0)
        assert summary.average_order_value == pytest.approx(44.0)

    def test_empty_window(self, history):
        summary = R.period_summary(history, date(2025, 1, 1), 7)

        assert (summary.sales, summary.revenue, summary.average_order_value) == (0, 0.0, 0.0)

    def test_compare_periods(self, history):
        comparison = R.compare_periods(history, date(2024, 5, 1), 4)

        assert comparison.previous.revenue == pytest.approx(30.0)
        assert comparison.revenue_trend == pytest.approx((132.0 - 30.0) / 30.0 * 100)
        assert comparison.sales_trend == pytest.approx(200.0)

    def test_trend_edges(self):
        assert R.trend(5, 0) == math.inf
        assert R.trend(0, 0) == 0.0
        assert R.trend(50, 100) == pytest.approx(-50.0)

    def test_daily_series_includes_empty_days(self, history):
        series = R.daily_series(history, date(2024, 5, 1), 3)

        assert [p.day.day for p in series] == [1, 2, 3]
        assert [p.sales for p in series] == [1, 0, 2]
        assert series[2].revenue == pytest.approx(92.0)


class TestCatalogReports:
    def test_best_sellers_skip_missing_products(self, history, products):
        ranked = R.best_sellers(history, products)

        assert [b.product.id for b in ranked] == ["sign", "mug", "card"]
        assert ranked[0].revenue == pytest.approx(79.0)
        assert ranked[0].units == 2

    def test_best_sellers_limit(self, history, products):
        assert len(R.best_sellers(history, products, limit=1)) == 1

    def test_low_stock(self, products):
        flagged = R.low_stock(products)

        assert [p.id for p in flagged] == ["sign"]

    def test_status_counts(self, history):
        counts = R.status_counts(history)

        assert counts[OrderStatus.PENDING] == 3
        assert counts[OrderStatus.SHIPPED] == 1
        assert counts[OrderStatus.DELIVERED] == 0
