"""
Invoice — the view model behind an order's downloadable invoice.

project_invoice() is a pure transform: order + customer + current settings
in, InvoiceView out. Turning the view into a document is an
InvoiceRenderer's job.

Tax comes from the order's frozen snapshot. Orders placed before tax was
tracked have none; for those the current tax settings are used instead.
"""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from basket.checkout import PaymentMethod
from basket.model import Address, CartItem, Customer, Order, OrderStatus, StoreSettings
from basket.pricing import inclusive_tax


# ═══════════════════════════════════════════════════════════════════════════════
# View model
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class InvoiceHeader:
    store_name: str
    logo_url: str
    address: str
    phone: str
    tax_number_line: str | None = None


@dataclass(frozen=True, slots=True)
class InvoiceMeta:
    number: str
    order_date: date
    status: OrderStatus


@dataclass(frozen=True, slots=True)
class PartyBlock:
    title: str
    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class InvoiceLine:
    description: str
    options: str  # non-empty customization values, comma separated
    quantity: int
    unit_price: float
    line_total: float


@dataclass(frozen=True, slots=True)
class InvoiceTotals:
    subtotal: float
    shipping: float
    total: float
    tax_label: str | None = None
    tax_rate: float | None = None
    tax_amount: float = 0.0

    @property
    def tax_applies(self) -> bool:
        return self.tax_label is not None


@dataclass(frozen=True, slots=True)
class InvoiceView:
    header: InvoiceHeader
    meta: InvoiceMeta
    bill_to: PartyBlock
    ship_to: PartyBlock
    lines: tuple[InvoiceLine, ...]
    totals: InvoiceTotals
    payment_instructions: str | None
    terms: str

    @property
    def filename(self) -> str:
        return f"invoice-{self.meta.number}.pdf"


class InvoiceRenderer(Protocol):
    def render(self, invoice: InvoiceView) -> bytes: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Projection
# ═══════════════════════════════════════════════════════════════════════════════


def _totals(order: Order, settings: StoreSettings) -> InvoiceTotals:
    base = dict(subtotal=order.subtotal, shipping=order.shipping_cost, total=order.total)
    if order.tax is not None:
        return InvoiceTotals(
            **base,
            tax_label=order.tax.label,
            tax_rate=order.tax.rate,
            tax_amount=order.tax.amount,
        )
    if settings.tax.enabled:
        return InvoiceTotals(
            **base,
            tax_label=settings.tax.label,
            tax_rate=settings.tax.rate,
            tax_amount=inclusive_tax(order.total, settings.tax.rate),
        )
    return InvoiceTotals(**base)


def _bill_to(customer: Customer, address: Address) -> PartyBlock:
    return PartyBlock(
        "Bill To",
        (customer.name, customer.email, f"{address.street}, {address.city}"),
    )


def _ship_to(address: Address) -> PartyBlock:
    return PartyBlock(
        "Ship To",
        (
            f"{address.street}, {address.city}",
            f"{address.postal_code}, {address.country}",
        ),
    )


def _line(item: CartItem) -> InvoiceLine:
    return InvoiceLine(
        description=item.product_name,
        options=", ".join(v for v in item.customizations.values() if v),
        quantity=item.quantity,
        unit_price=item.price,
        line_total=item.line_total,
    )


def project_invoice(order: Order, customer: Customer, settings: StoreSettings) -> InvoiceView:
    totals = _totals(order, settings)

    tax_number_line = None
    if totals.tax_applies and settings.tax.tax_number:
        tax_number_line = f"{totals.tax_label} #: {settings.tax.tax_number}"

    instructions = None
    bank = settings.payment.bank_transfer
    if order.payment_method == PaymentMethod.BANK_TRANSFER.value and bank.enabled:
        instructions = bank.instructions.replace("\n", " | ")

    identity = settings.identity
    return InvoiceView(
        header=InvoiceHeader(
            store_name=identity.name,
            logo_url=identity.logo_url,
            address=identity.address,
            phone=identity.phone,
            tax_number_line=tax_number_line,
        ),
        meta=InvoiceMeta(order.id, order.order_date, order.status),
        bill_to=_bill_to(customer, order.billing_address),
        ship_to=_ship_to(order.shipping_address),
        lines=tuple(_line(item) for item in order.items),
        totals=totals,
        payment_instructions=instructions,
        terms=settings.invoice_terms,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Text rendering
# ═══════════════════════════════════════════════════════════════════════════════


def money(amount: float) -> str:
    return f"${amount:.2f}"


class TextInvoiceRenderer:
    """Plain UTF-8 rendering, for e-mail bodies and logs."""

    def render(self, invoice: InvoiceView) -> bytes:
        h, t = invoice.header, invoice.totals
        out = [h.store_name, h.address]
        if h.phone:
            out.append(f"Phone: {h.phone}")
        if h.tax_number_line:
            out.append(h.tax_number_line)
        out += [
            "",
            f"INVOICE {invoice.meta.number}",
            f"Date: {invoice.meta.order_date.isoformat()}",
            f"Status: {invoice.meta.status.value}",
            "",
        ]
        for block in (invoice.bill_to, invoice.ship_to):
            out += [f"{block.title}:", *block.lines, ""]
        for line in invoice.lines:
            name = f"{line.description} ({line.options})" if line.options else line.description
            out.append(f"{name}  x{line.quantity}  {money(line.unit_price)}  {money(line.line_total)}")
        out += [
            "",
            f"Subtotal: {money(t.subtotal)}",
            f"Shipping: {money(t.shipping)}",
        ]
        if t.tax_applies:
            out.append(f"Includes {t.tax_label} ({t.tax_rate:g}%): {money(t.tax_amount)}")
        out.append(f"Total: {money(t.total)}")
        if invoice.payment_instructions:
            out += ["", f"PAYMENT INSTRUCTIONS: {invoice.payment_instructions}"]
        if invoice.terms:
            out += ["", "TERMS & CONDITIONS", invoice.terms]
        return "\n".join(out).encode()


__all__ = (
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
