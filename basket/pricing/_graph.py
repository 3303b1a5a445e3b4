"""
Pricing graph — the same calculation as quote(), as composable nodes.

    RequestNode ─┬─ SubtotalNode ──┬─ GrandTotalNode ─ TaxNode ─┐
                 └─ ShippingNode ──┘                            └─ QuoteNode

SubtotalNode and ShippingNode are independent and run concurrently. Views
that need only part of the calculation compose a smaller target, e.g.
ShippingNode for a shipping estimate.
"""

import logging

from basket import graph as G
from basket.model import TaxSnapshot
from basket.pricing._shipping import raw_shipping, apply_adjustment
from basket.pricing._tax import tax_snapshot
from basket.pricing._totals import PricingRequest, Quote, subtotal, grand_total


logger = logging.getLogger(__name__)


@G.node
class RequestNode:
    """Entry point: wraps the PricingRequest input."""

    def __init__(self, data: PricingRequest) -> None:
        self.data = data

    @classmethod
    def __compose__(cls, request: PricingRequest) -> "RequestNode":
        return cls(request)


@G.node
class SubtotalNode:
    def __init__(self, value: float) -> None:
        self.value = value

    @classmethod
    async def __compose__(cls, request: RequestNode) -> "SubtotalNode":
        return cls(subtotal(request.data.lines))


@G.node
class ShippingNode:
    """Raw per-unit fees and the adjusted charge."""

    def __init__(self, raw: float, total: float) -> None:
        self.raw = raw
        self.total = total

    @classmethod
    async def __compose__(cls, request: RequestNode) -> "ShippingNode":
        raw = raw_shipping(request.data.lines, request.data.products)
        pct = request.data.settings.shipping.adjustment_percentage
        return cls(raw, apply_adjustment(raw, pct))

    @classmethod
    async def execute(cls, request: PricingRequest) -> "ShippingNode":
        """Shipping only. Subtotal, totals and tax are not computed."""
        return await G.compose(cls, request)


@G.node
class GrandTotalNode:
    def __init__(self, value: float) -> None:
        self.value = value

    @classmethod
    async def __compose__(
        cls, subtotal_: SubtotalNode, shipping: ShippingNode
    ) -> "GrandTotalNode":
        return cls(grand_total(subtotal_.value, shipping.total))


@G.node
class TaxNode:
    def __init__(self, data: TaxSnapshot | None) -> None:
        self.data = data

    @classmethod
    async def __compose__(cls, request: RequestNode, total: GrandTotalNode) -> "TaxNode":
        return cls(tax_snapshot(total.value, request.data.settings.tax))


@G.node
class QuoteNode:
    """Final node: the full Quote."""

    def __init__(self, data: Quote) -> None:
        self.data = data

    @classmethod
    async def __compose__(
        cls,
        subtotal_: SubtotalNode,
        shipping: ShippingNode,
        total: GrandTotalNode,
        tax: TaxNode,
    ) -> "QuoteNode":
        quote = Quote(
            subtotal=subtotal_.value,
            raw_shipping=shipping.raw,
            shipping=shipping.total,
            grand_total=total.value,
            tax=tax.data,
        )
        logger.debug(
            "Quoted subtotal=%.2f shipping=%.2f total=%.2f",
            quote.subtotal,
            quote.shipping,
            quote.grand_total,
        )
        return cls(quote)

    @classmethod
    async def execute(cls, request: PricingRequest) -> Quote:
        result = await G.compose(cls, request)
        return result.data


__all__ = (
    "RequestNode",
    "SubtotalNode",
    "ShippingNode",
    "GrandTotalNode",
    "TaxNode",
    "QuoteNode",
)
