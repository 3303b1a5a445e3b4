"""
Re-order — rebuild cart lines from a past order.

Lines keep the price and customizations they were bought with. Lines whose
product has left the catalog are skipped; their product ids come back in
ReorderResult.dropped.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from basket.cart import CartSession, new_cart_item_id
from basket.model import CartItem, Order, Product


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReorderResult:
    items: tuple[CartItem, ...]
    dropped: tuple[str, ...] = ()


def reorder(order: Order, products: Iterable[Product]) -> ReorderResult:
    available = {p.id for p in products}
    items: list[CartItem] = []
    dropped: list[str] = []
    for item in order.items:
        if item.product_id in available:
            items.append(item.with_id(new_cart_item_id()))
        else:
            dropped.append(item.product_id)
    if dropped:
        logger.info("Re-order of %s skipped missing products: %s", order.id, ", ".join(dropped))
    return ReorderResult(tuple(items), tuple(dropped))


def reorder_into(
    session: CartSession, order: Order, products: Iterable[Product]
) -> ReorderResult:
    """Append the re-ordered lines to the active cart, unmerged."""
    result = reorder(order, products)
    if result.items:
        session.add_many(result.items)
    return result


__all__ = ("ReorderResult", "reorder", "reorder_into")
