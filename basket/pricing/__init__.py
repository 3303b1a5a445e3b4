"""
Pricing — shipping, inclusive tax, and order totals.

    from basket import pricing as P

    request = P.PricingRequest(tuple(cart), products, settings)
    quote = P.quote(request)                    # synchronous
    quote = await P.QuoteNode.execute(request)  # as a graph
"""

from basket.pricing._shipping import raw_shipping, apply_adjustment, total_shipping
from basket.pricing._tax import inclusive_tax, tax_snapshot
from basket.pricing._totals import Quote, PricingRequest, subtotal, grand_total, quote
from basket.pricing._graph import (
    RequestNode,
    SubtotalNode,
    ShippingNode,
    GrandTotalNode,
    TaxNode,
    QuoteNode,
)

__all__ = (
    # Shipping
    "raw_shipping",
    "apply_adjustment",
    "total_shipping",
    # Tax
    "inclusive_tax",
    "tax_snapshot",
    # Totals
    "Quote",
    "PricingRequest",
    "subtotal",
    "grand_total",
    "quote",
    # Graph
    "RequestNode",
    "SubtotalNode",
    "ShippingNode",
    "GrandTotalNode",
    "TaxNode",
    "QuoteNode",
)
