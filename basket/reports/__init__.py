"""
Reports — admin dashboard aggregates.

    from basket import reports as R

    R.period_summary(orders, date(2024, 5, 1), 30).average_order_value
    R.best_sellers(orders, products, limit=5)
"""

from basket.reports._dashboard import (
    PeriodSummary,
    PeriodComparison,
    DailyPoint,
    BestSeller,
    period_summary,
    trend,
    compare_periods,
    daily_series,
    best_sellers,
    low_stock,
    status_counts,
)

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
