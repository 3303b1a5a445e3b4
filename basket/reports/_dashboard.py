"""
Dashboard — sales aggregates over placed orders.

Revenue is the sum of order totals (shipping included); best sellers use
the captured line prices, so they reflect what customers actually paid.
"""

import math
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from basket.model import Order, OrderStatus, Product


@dataclass(frozen=True, slots=True)
class PeriodSummary:
    start: date
    days: int
    revenue: float
    sales: int

    @property
    def average_order_value(self) -> float:
        return self.revenue / self.sales if self.sales else 0.0


@dataclass(frozen=True, slots=True)
class PeriodComparison:
    current: PeriodSummary
    previous: PeriodSummary
    revenue_trend: float
    sales_trend: float
    aov_trend: float


@dataclass(frozen=True, slots=True)
class DailyPoint:
    day: date
    revenue: float = 0.0
    sales: int = 0


@dataclass(frozen=True, slots=True)
class BestSeller:
    product: Product
    revenue: float
    units: int


def _in_window(orders: Iterable[Order], start: date, days: int) -> list[Order]:
    end = start + timedelta(days=days)
    return [o for o in orders if start <= o.order_date < end]


def period_summary(orders: Iterable[Order], start: date, days: int) -> PeriodSummary:
    """Orders dated in [start, start + days)."""
    window = _in_window(orders, start, days)
    return PeriodSummary(
        start=start,
        days=days,
        revenue=sum((o.total for o in window), 0.0),
        sales=len(window),
    )


def trend(current: float, previous: float) -> float:
    """Percent change. Growth from zero is infinite; zero to zero is flat."""
    if previous == 0:
        return math.inf if current > 0 else 0.0
    return (current - previous) / previous * 100


def compare_periods(orders: Sequence[Order], start: date, days: int) -> PeriodComparison:
    """The window starting at start against the equally long window before it."""
    current = period_summary(orders, start, days)
    previous = period_summary(orders, start - timedelta(days=days), days)
    return PeriodComparison(
        current=current,
        previous=previous,
        revenue_trend=trend(current.revenue, previous.revenue),
        sales_trend=trend(current.sales, previous.sales),
        aov_trend=trend(current.average_order_value, previous.average_order_value),
    )


def daily_series(orders: Iterable[Order], start: date, days: int) -> list[DailyPoint]:
    """One point per day, days without orders included."""
    revenue: defaultdict[date, float] = defaultdict(float)
    sales: Counter[date] = Counter()
    for order in _in_window(orders, start, days):
        revenue[order.order_date] += order.total
        sales[order.order_date] += 1
    return [
        DailyPoint(day, revenue[day], sales[day])
        for day in (start + timedelta(days=i) for i in range(days))
    ]


def best_sellers(
    orders: Iterable[Order], products: Iterable[Product], limit: int = 5
) -> list[BestSeller]:
    """Top products by revenue. Products no longer in the catalog are left out."""
    catalog = {p.id: p for p in products}
    revenue: defaultdict[str, float] = defaultdict(float)
    units: Counter[str] = Counter()
    for order in orders:
        for item in order.items:
            revenue[item.product_id] += item.line_total
            units[item.product_id] += item.quantity
    ranked = [
        BestSeller(catalog[pid], revenue[pid], units[pid])
        for pid in revenue
        if pid in catalog
    ]
    ranked.sort(key=lambda b: b.revenue, reverse=True)
    return ranked[:limit]


def low_stock(products: Iterable[Product]) -> list[Product]:
    """Products at or under their threshold, emptiest first."""
    flagged = [
        p
        for p in products
        if p.low_stock_threshold is not None and p.stock <= p.low_stock_threshold
    ]
    return sorted(flagged, key=lambda p: p.stock)


def status_counts(orders: Iterable[Order]) -> dict[OrderStatus, int]:
    counts = Counter(o.status for o in orders)
    return {status: counts[status] for status in OrderStatus}


__all__ = (
    "PeriodSummary",
    "PeriodComparison",
    "DailyPoint",
    "BestSeller",
    "period_summary",
    "trend",
    "compare_periods",
    "daily_series",
    "best_sellers",
    "low_stock",
    "status_counts",
)
