"""
Tax — inclusive extraction and the snapshot frozen onto orders.

Prices already include tax. The amount is carved out of the total, never
added to it.
"""

from basket.model import TaxSettings, TaxSnapshot


def inclusive_tax(gross: float, rate: float) -> float:
    """Portion of gross that is tax at rate percent: gross × rate / (100 + rate)."""
    return gross * (rate / (100 + rate))


def tax_snapshot(grand_total: float, settings: TaxSettings) -> TaxSnapshot | None:
    """Snapshot for a new order, or None when tax is disabled."""
    if not settings.enabled:
        return None
    return TaxSnapshot(
        rate=settings.rate,
        label=settings.label,
        amount=inclusive_tax(grand_total, settings.rate),
    )


__all__ = ("inclusive_tax", "tax_snapshot")
