"""
History — what can be done with a placed order.

    from basket import history as H

    result = H.reorder_into(session, order, products)
    view = H.project_invoice(order, customer, settings)
    pdf = renderer.render(view)
"""

from basket.history._reorder import ReorderResult, reorder, reorder_into
from basket.history._invoice import (
    InvoiceHeader,
    InvoiceMeta,
    PartyBlock,
    InvoiceLine,
    InvoiceTotals,
    InvoiceView,
    InvoiceRenderer,
    project_invoice,
    money,
    TextInvoiceRenderer,
)

__all__ = (
    # Re-order
    "ReorderResult",
    "reorder",
    "reorder_into",
    # Invoice
    "InvoiceHeader",
    "InvoiceMeta",
    "PartyBlock",
    "InvoiceLine",
    "InvoiceTotals",
    "InvoiceView",
    "InvoiceRenderer",
    "project_invoice",
    "money",
    "TextInvoiceRenderer",
)
