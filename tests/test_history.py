"""Tests for re-order and invoice projection."""

from dataclasses import replace
from datetime import date

import pytest

from basket import cart as K
from basket import history as H
from basket.config import DEFAULT_SETTINGS, load_settings
from basket.model import (
    Address,
    CartItem,
    Customer,
    Order,
    OrderStatus,
    TaxSnapshot,
)


@pytest.fixture
def customer(address):
    return Customer("cust_1", "Ana Smith", "ana@example.com", address, address)


@pytest.fixture
def order(address):
    return Order(
        id="ord_1",
        customer_id="cust_1",
        user_id=None,
        items=(
            CartItem("cart_a", "mug", "Name Mug", 2, 18.0, {"name": "Sam", "note": ""}),
            CartItem("cart_b", "retired", "Old Print", 1, 30.0),
        ),
        total=71.0,
        shipping_cost=5.0,
        payment_method="Bank Transfer",
        status=OrderStatus.PENDING,
        order_date=date(2024, 5, 1),
        shipping_address=address,
        billing_address=address,
        tax=TaxSnapshot(15.0, "GST", 71.0 * 15 / 115),
    )


class TestReorder:
    def test_drops_missing_products(self, order, products):
        result = H.reorder(order, products)

        assert len(result.items) == 1
        assert result.dropped == ("retired",)

    def test_keeps_historical_price_and_fresh_id(self, order, products):
        # mug now costs 20.0 in the catalog
        item = H.reorder(order, products).items[0]

        assert item.price == 18.0
        assert item.quantity == 2
        assert dict(item.customizations) == {"name": "Sam", "note": ""}
        assert item.cart_item_id != "cart_a"

    def test_reorder_into_appends_without_merging(self, order, products):
        session = K.CartSession()
        session.add(order.items[0])

        result = H.reorder_into(session, order, products)

        assert len(result.items) == 1
        assert len(session.cart) == 2

    def test_nothing_left(self, order):
        session = K.CartSession()

        result = H.reorder_into(session, order, [])

        assert result.items == ()
        assert session.cart.is_empty()


class TestInvoice:
    def test_totals_from_snapshot(self, order, customer):
        settings = load_settings({"tax": {"enabled": False, "rate": 25}})

        view = H.project_invoice(order, customer, settings)

        assert view.totals.subtotal == pytest.approx(66.0)
        assert view.totals.shipping == 5.0
        assert view.totals.tax_label == "GST"
        assert view.totals.tax_rate == 15.0
        assert view.totals.tax_amount == pytest.approx(71.0 * 15 / 115)

    def test_legacy_order_uses_current_settings(self, order, customer):
        legacy = replace(order, tax=None)
        settings = load_settings({"tax": {"enabled": True, "rate": 15, "label": "GST"}})

        totals = H.project_invoice(legacy, customer, settings).totals

        assert totals.tax_applies
        assert totals.tax_amount == pytest.approx(71.0 * 15 / 115)

    def test_legacy_order_without_tax(self, order, customer):
        totals = H.project_invoice(replace(order, tax=None), customer, DEFAULT_SETTINGS).totals

        assert not totals.tax_applies
        assert totals.tax_amount == 0.0

    def test_lines_and_parties(self, order, customer):
        view = H.project_invoice(order, customer, DEFAULT_SETTINGS)

        first = view.lines[0]
        assert (first.description, first.options, first.quantity) == ("Name Mug", "Sam", 2)
        assert first.line_total == 36.0
        assert view.bill_to.lines == ("Ana Smith", "ana@example.com", "12 Kauri Rd, Nelson")
        assert view.ship_to.lines[1] == "7010, New Zealand"
        assert view.meta.number == "ord_1"
        assert view.filename == "invoice-ord_1.pdf"

    def test_tax_number_line(self, order, customer):
        settings = load_settings({"tax": {"taxNumber": "123-456-789"}})

        view = H.project_invoice(order, customer, settings)

        assert view.header.tax_number_line == "GST #: 123-456-789"

    def test_bank_instructions_only_for_bank_transfer(self, order, customer):
        view = H.project_invoice(order, customer, DEFAULT_SETTINGS)
        pickup = H.project_invoice(
            replace(order, payment_method="Cash on Pickup"), customer, DEFAULT_SETTINGS
        )

        assert view.payment_instructions == (
            "Bank: ASB | Account: 12-3456-7890123-00 | Reference: Your Order ID"
        )
        assert pickup.payment_instructions is None

    def test_terms_from_settings(self, order, customer):
        view = H.project_invoice(order, customer, DEFAULT_SETTINGS)

        assert view.terms == DEFAULT_SETTINGS.invoice_terms

    def test_text_renderer(self, order, customer):
        view = H.project_invoice(order, customer, DEFAULT_SETTINGS)

        text = H.TextInvoiceRenderer().render(view).decode()

        assert "INVOICE ord_1" in text
        assert "Name Mug (Sam)  x2  $18.00  $36.00" in text
        assert "Includes GST (15%): $9.26" in text
        assert "Total: $71.00" in text
