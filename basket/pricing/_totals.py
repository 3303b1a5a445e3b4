"""
Totals — subtotal + shipping, with the tax annotation.
"""

from dataclasses import dataclass, field
from collections.abc import Iterable, Mapping

from basket._types import Money
from basket.model import CartItem, Product, StoreSettings, TaxSnapshot
from basket.pricing._shipping import raw_shipping, apply_adjustment
from basket.pricing._tax import tax_snapshot


@dataclass(frozen=True, slots=True)
class Quote:
    subtotal: Money
    raw_shipping: Money
    shipping: Money
    grand_total: Money
    tax: TaxSnapshot | None

    @property
    def tax_amount(self) -> Money:
        return self.tax.amount if self.tax is not None else 0.0


@dataclass(frozen=True, slots=True)
class PricingRequest:
    """Inputs of one pricing run. Settings are read, never modified."""

    lines: tuple[CartItem, ...]
    products: Mapping[str, Product] = field(default_factory=dict)
    settings: StoreSettings = field(default_factory=StoreSettings)


def subtotal(lines: Iterable[CartItem]) -> float:
    return sum((line.price * line.quantity for line in lines), 0.0)


def grand_total(subtotal_: float, shipping: float) -> float:
    """Tax-inclusive pricing: tax is already inside both terms."""
    return subtotal_ + shipping


def quote(request: PricingRequest) -> Quote:
    """Price a set of lines in one synchronous pass."""
    sub = subtotal(request.lines)
    raw = raw_shipping(request.lines, request.products)
    shipping = apply_adjustment(raw, request.settings.shipping.adjustment_percentage)
    total = grand_total(sub, shipping)
    return Quote(
        subtotal=sub,
        raw_shipping=raw,
        shipping=shipping,
        grand_total=total,
        tax=tax_snapshot(total, request.settings.tax),
    )


__all__ = ("Quote", "PricingRequest", "subtotal", "grand_total", "quote")
