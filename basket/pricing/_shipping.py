"""
Shipping — flat per-unit product fees with a store-wide adjustment.
"""

import logging
from collections.abc import Iterable, Mapping

from basket.model import CartItem, Product, ShippingSettings


logger = logging.getLogger(__name__)


def raw_shipping(
    lines: Iterable[CartItem],
    products: Mapping[str, Product],
) -> float:
    """
    Σ(product.shipping_cost × quantity).

    Lines whose product is unknown or has no fee contribute 0.
    """
    total = 0.0
    for line in lines:
        product = products.get(line.product_id)
        if product is not None and product.shipping_cost:
            total += product.shipping_cost * line.quantity
    return total


def apply_adjustment(raw: float, adjustment_percentage: float) -> float:
    """
    raw × (1 + pct/100).

    Not clamped: a value below -100 produces a negative charge.
    """
    if adjustment_percentage < -100:
        logger.warning(
            "Shipping adjustment %s%% is below -100%%; shipping will be negative",
            adjustment_percentage,
        )
    return raw * (1 + adjustment_percentage / 100)


def total_shipping(
    lines: Iterable[CartItem],
    products: Mapping[str, Product],
    settings: ShippingSettings,
) -> float:
    return apply_adjustment(raw_shipping(lines, products), settings.adjustment_percentage)


__all__ = ("raw_shipping", "apply_adjustment", "total_shipping")
