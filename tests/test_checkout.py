"""Tests for checkout validation, payment and order placement."""

import asyncio
from dataclasses import replace

import pytest
from kungfu import Error, Ok

from basket import cart as K
from basket import checkout as Co
from basket.config import DEFAULT_SETTINGS
from basket.errors import (
    EmptyCartError,
    OrderNotFoundError,
    PaymentError,
    PlacementError,
    ValidationError,
)
from basket.model import Address, OrderStatus, ShippingSettings, TaxSettings
from basket.stores import StoreError


@pytest.fixture
def session(mug_line):
    session = K.CartSession()
    session.add(mug_line)
    return session


class FailingOrderStore:
    """Order inserts always fail."""

    def __init__(self, raises=False):
        self.raises = raises

    async def create(self, draft):
        if self.raises:
            raise ConnectionError("connection reset")
        return Error(StoreError("insert rejected"))

    async def update_status(self, order_id, status):
        if self.raises:
            raise ConnectionError("connection reset")
        return Error(StoreError("update rejected"))


class UnreadableCustomers:
    """Lookups are denied; inserts work."""

    def __init__(self, inner):
        self.inner = inner

    async def find_by_email(self, email):
        return Error(StoreError("permission denied"))

    async def create(self, details):
        return await self.inner.create(details)


class RaisingSettings:
    """Settings reads blow up."""

    async def current(self):
        raise ConnectionError("connection reset")


class ShiftingSettings:
    """Each read raises the shipping adjustment by 40 points."""

    def __init__(self, settings):
        self.settings = settings
        self.reads = 0

    async def current(self):
        adjustment = self.settings.shipping.adjustment_percentage + 40 * self.reads
        self.reads += 1
        return Ok(replace(self.settings, shipping=ShippingSettings(adjustment)))


class Gateway:
    def __init__(self, decline=False):
        self.decline = decline
        self.calls = []

    async def charge(self, amount, method):
        self.calls.append((amount, method))
        if self.decline:
            raise RuntimeError("card declined")
        return Co.TransactionConfirmation("txn_1")


class TestForm:
    def test_complete_form_passes(self, form):
        assert Co.validate_form(form) == {}

    def test_missing_contact(self, address):
        form = Co.CheckoutForm(Co.ContactDetails("Ana", ""), address)

        assert set(Co.validate_form(form)) == {"contact.email"}

    def test_separate_billing_requires_street_and_city(self, form):
        form = replace(form, billing_same_as_shipping=False, billing_address=Address(city="Nelson"))

        assert set(Co.validate_form(form)) == {"billing.street"}

    def test_effective_billing(self, form, address):
        other = Address("1 Other St", "Motueka", "7120", "New Zealand")

        assert form.effective_billing == address
        assert replace(form, billing_same_as_shipping=False, billing_address=other).effective_billing == other

    def test_ensure_ready_empty_cart(self, form):
        with pytest.raises(EmptyCartError):
            Co.ensure_ready(K.Cart(), form)


class TestPayment:
    def test_labels(self):
        txn = Co.TransactionConfirmation("abc")

        assert Co.describe_payment(Co.PaymentMethod.BANK_TRANSFER) == "Bank Transfer"
        assert Co.describe_payment(Co.PaymentMethod.STRIPE, txn) == "Credit Card (Stripe Txn: abc)"
        assert Co.describe_payment(Co.PaymentMethod.PAYPAL, txn) == "PayPal (Txn: abc)"

    def test_online_methods(self):
        assert Co.PaymentMethod.PAYPAL.is_online
        assert Co.PaymentMethod.STRIPE.is_online
        assert not Co.PaymentMethod.CASH_ON_PICKUP.is_online

    def test_available_methods_with_defaults(self):
        assert Co.available_methods(DEFAULT_SETTINGS.payment) == [
            Co.PaymentMethod.BANK_TRANSFER,
            Co.PaymentMethod.CASH_ON_PICKUP,
        ]


class TestPlaceOrder:
    def test_manual_payment_is_pending(self, service, session, form):
        result = asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER))

        assert isinstance(result, Ok)
        order = result.value.order
        assert order.status is OrderStatus.PENDING
        assert order.payment_method == "Bank Transfer"
        assert order.total == pytest.approx(51.0)
        assert order.shipping_cost == pytest.approx(11.0)
        assert order.tax is not None
        assert order.tax.amount == pytest.approx(51.0 * 15 / 115)
        assert order.id.startswith("ord_")
        assert session.cart.is_empty()

    def test_confirmation_means_processing(self, service, session, form):
        txn = Co.TransactionConfirmation("pp_42")

        result = asyncio.run(service.place_order(session, form, Co.PaymentMethod.PAYPAL, txn))

        assert result.value.order.status is OrderStatus.PROCESSING
        assert result.value.order.payment_method == "PayPal (Txn: pp_42)"

    def test_billing_copies_shipping(self, service, session, form, address):
        result = asyncio.run(service.place_order(session, form, Co.PaymentMethod.CASH_ON_PICKUP))

        assert result.value.order.billing_address == address

    def test_empty_cart_rejected_before_stores(self, service, customers, form):
        result = asyncio.run(service.place_order(K.CartSession(), form, Co.PaymentMethod.BANK_TRANSFER))

        assert isinstance(result, Error)
        assert isinstance(result.value, EmptyCartError)
        assert result.value.message == "Your cart is empty!"
        assert len(customers) == 0

    def test_incomplete_form_rejected(self, service, session, customers, address):
        form = Co.CheckoutForm(Co.ContactDetails("", "ana@example.com"), address)

        result = asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER))

        assert isinstance(result.value, ValidationError)
        assert result.value.message == Co.FORM_INCOMPLETE
        assert "contact.name" in result.value.errors
        assert len(customers) == 0
        assert not session.cart.is_empty()

    def test_existing_customer_reused(self, service, customers, mug_line, form):
        for _ in range(2):
            session = K.CartSession()
            session.add(mug_line)
            asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER))

        assert len(customers) == 1

    def test_user_id_recorded(self, service, orders, session, form):
        result = asyncio.run(
            service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER, user_id="user_1")
        )

        mine = asyncio.run(orders.list_for_user("user_1")).value
        assert [o.id for o in mine] == [result.value.order.id]

    def test_lookup_failure_falls_back_to_create(self, customers, orders, catalog, settings_provider, session, form):
        service = Co.CheckoutService(UnreadableCustomers(customers), orders, catalog, settings_provider)

        result = asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER))

        assert isinstance(result, Ok)
        assert result.value.customer.email == "ana@example.com"


class TestPlacementFailure:
    """Order insert failing after the customer was created."""

    @pytest.mark.parametrize("raises", [False, True])
    def test_orphan_customer_reported(self, customers, catalog, settings_provider, session, form, raises):
        service = Co.CheckoutService(customers, FailingOrderStore(raises), catalog, settings_provider)

        result = asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER))

        assert isinstance(result, Error)
        err = result.value
        assert isinstance(err, PlacementError)
        assert err.step == "order_create"
        assert len(customers) == 1
        assert err.orphaned_customer_id is not None
        assert not session.cart.is_empty()

    def test_existing_customer_is_not_orphaned(self, customers, catalog, settings_provider, session, form):
        asyncio.run(customers.create(form.customer_details()))
        service = Co.CheckoutService(customers, FailingOrderStore(), catalog, settings_provider)

        result = asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER))

        assert result.value.orphaned_customer_id is None


class TestPayAndPlace:
    def test_successful_charge(self, service, session, form):
        gateway = Gateway()

        result = asyncio.run(service.pay_and_place(session, form, Co.PaymentMethod.STRIPE, gateway))

        assert result.value.order.status is OrderStatus.PROCESSING
        assert result.value.order.payment_method == "Credit Card (Stripe Txn: txn_1)"
        assert gateway.calls[0][0] == pytest.approx(51.0)

    def test_declined_charge_creates_nothing(self, service, orders, customers, session, form):
        result = asyncio.run(
            service.pay_and_place(session, form, Co.PaymentMethod.STRIPE, Gateway(decline=True))
        )

        assert isinstance(result.value, PaymentError)
        assert len(orders) == 0
        assert len(customers) == 0
        assert not session.cart.is_empty()

    def test_manual_method_rejected(self, service, session, form):
        gateway = Gateway()

        result = asyncio.run(service.pay_and_place(session, form, Co.PaymentMethod.BANK_TRANSFER, gateway))

        assert isinstance(result.value, PaymentError)
        assert gateway.calls == []

    def test_validation_before_charge(self, service, form):
        gateway = Gateway()

        result = asyncio.run(service.pay_and_place(K.CartSession(), form, Co.PaymentMethod.STRIPE, gateway))

        assert isinstance(result.value, EmptyCartError)
        assert gateway.calls == []


class TestSnapshotAndStatus:
    def test_tax_snapshot_survives_settings_change(self, service, orders, settings_provider, session, form):
        placed = asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER)).value
        before = placed.order.tax

        current = asyncio.run(settings_provider.current()).value
        asyncio.run(settings_provider.save(replace(current, tax=TaxSettings(True, 25.0, "VAT"))))

        stored = asyncio.run(orders.get(placed.order.id)).value
        assert stored.tax == before
        assert stored.tax.rate == 15

    @pytest.mark.parametrize("status", list(OrderStatus))
    def test_any_status_transition(self, service, session, form, status):
        placed = asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER)).value

        result = asyncio.run(service.update_status(placed.order.id, status))

        assert result.value.status is status

    def test_unknown_order(self, service):
        result = asyncio.run(service.update_status("ord_missing", OrderStatus.SHIPPED))

        assert isinstance(result.value, OrderNotFoundError)

    def test_preview_does_not_persist(self, service, orders, session):
        result = asyncio.run(service.preview(session.cart))

        assert result.value.grand_total == pytest.approx(51.0)
        assert len(orders) == 0

class TestCollaboratorFailures:
    def test_raising_settings_become_an_error(self, customers, orders, catalog, session, form):
        service = Co.CheckoutService(customers, orders, catalog, RaisingSettings())

        result = asyncio.run(service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER))

        assert isinstance(result, Error)
        assert result.value.code == "SETTINGS_ERROR"
        assert "connection reset" in result.value.message
        assert len(orders) == 0
        assert not session.cart.is_empty()

    def test_raising_settings_in_preview(self, customers, orders, catalog, session):
        service = Co.CheckoutService(customers, orders, catalog, RaisingSettings())

        result = asyncio.run(service.preview(session.cart))

        assert result.value.code == "SETTINGS_ERROR"

    def test_raising_order_store_on_status_update(self, customers, catalog, settings_provider):
        service = Co.CheckoutService(customers, FailingOrderStore(raises=True), catalog, settings_provider)

        result = asyncio.run(service.update_status("ord_1", OrderStatus.SHIPPED))

        assert result.value.code == "STORE_ERROR"

    def test_charged_amount_is_the_stored_total(self, customers, orders, catalog, taxed_settings, session, form):
        settings = ShiftingSettings(taxed_settings)
        service = Co.CheckoutService(customers, orders, catalog, settings)
        gateway = Gateway()

        result = asyncio.run(service.pay_and_place(session, form, Co.PaymentMethod.PAYPAL, gateway))

        assert settings.reads == 1
        assert gateway.calls[0][0] == pytest.approx(51.0)
        assert result.value.order.total == pytest.approx(gateway.calls[0][0])
