"""
CheckoutService — quote a cart, take payment, place the order.

    service = CheckoutService(customers, orders, catalog, settings)

    match await service.place_order(session, form, PaymentMethod.BANK_TRANSFER):
        case Ok(placed):
            print(placed.order.id, placed.order.status)
        case Error(e):
            print(e.code, e.message)

Validation runs before any store is touched. On success the session's
cart is cleared; on failure it is left as it was.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date

from combinators import lift as L
from kungfu import Result, Ok, Error

from basket.cart import Cart, CartSession
from basket.errors import (
    BasketError,
    OrderNotFoundError,
    PaymentError,
    ValidationError,
)
from basket.model import (
    Customer,
    Order,
    OrderDraft,
    OrderStatus,
    Product,
    StoreSettings,
)
from basket.pricing import PricingRequest, Quote, QuoteNode
from basket.stores import (
    CatalogProvider,
    CustomerStore,
    OrderStore,
    SettingsProvider,
    StoreError,
)
from basket.checkout._form import CheckoutForm, ensure_ready
from basket.checkout._payment import (
    PaymentGateway,
    PaymentMethod,
    TransactionConfirmation,
    describe_payment,
)
from basket.checkout._placement import place


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlacedOrder:
    order: Order
    customer: Customer
    quote: Quote


class CheckoutService:
    def __init__(
        self,
        customers: CustomerStore,
        orders: OrderStore,
        catalog: CatalogProvider,
        settings: SettingsProvider,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._customers = customers
        self._orders = orders
        self._catalog = catalog
        self._settings = settings
        self._today = today

    # ═══════════════════════════════════════════════════════════════════════
    # Pricing
    # ═══════════════════════════════════════════════════════════════════════

    async def _pricing_request(self, cart: Cart) -> Result[PricingRequest, BasketError]:
        products = await _load("CATALOG_ERROR", self._catalog.list_products)
        if isinstance(products, Error):
            return Error(products.value)
        settings = await _load("SETTINGS_ERROR", self._settings.current)
        if isinstance(settings, Error):
            return Error(settings.value)
        return Ok(_request(cart, products.value, settings.value))

    async def preview(self, cart: Cart) -> Result[Quote, BasketError]:
        """Totals for the cart as it stands. Nothing is persisted."""
        match await self._pricing_request(cart):
            case Ok(request):
                return Ok(await QuoteNode.execute(request))
            case Error(e):
                return Error(e)

    # ═══════════════════════════════════════════════════════════════════════
    # Placement
    # ═══════════════════════════════════════════════════════════════════════

    async def place_order(
        self,
        session: CartSession,
        form: CheckoutForm,
        method: PaymentMethod,
        confirmation: TransactionConfirmation | None = None,
        user_id: str | None = None,
    ) -> Result[PlacedOrder, BasketError]:
        """
        Place the session's cart as an order.

        A confirmation means the shopper already paid online: the order
        starts Processing. Without one it starts Pending.
        """
        try:
            ensure_ready(session.cart, form)
        except ValidationError as e:
            return Error(e)

        quoted = await self.preview(session.cart)
        if isinstance(quoted, Error):
            return Error(quoted.value)
        return await self._place(session, form, method, quoted.value, confirmation, user_id)

    async def pay_and_place(
        self,
        session: CartSession,
        form: CheckoutForm,
        method: PaymentMethod,
        gateway: PaymentGateway,
        user_id: str | None = None,
    ) -> Result[PlacedOrder, BasketError]:
        """
        Charge through the gateway, then place the order.

        The quote is computed once: the amount charged is the total stored.
        Nothing is created when the charge fails. A charge followed by a
        failed insert is reported as a PlacementError; no refund is issued.
        """
        if not method.is_online:
            return Error(PaymentError(f"{method.value} is not an online payment method."))
        try:
            ensure_ready(session.cart, form)
        except ValidationError as e:
            return Error(e)

        previewed = await self.preview(session.cart)
        if isinstance(previewed, Error):
            return Error(previewed.value)
        quote = previewed.value

        charged = await L.catching_async(
            lambda: gateway.charge(quote.grand_total, method),
            on_error=lambda e: PaymentError(f"Payment failed: {e}"),
        )()
        if isinstance(charged, Error):
            logger.warning("Payment via %s failed: %s", method.value, charged.value.message)
            return Error(charged.value)

        placed = await self._place(session, form, method, quote, charged.value, user_id)
        if isinstance(placed, Error):
            logger.error(
                "Charge %s succeeded but the order was not saved", charged.value.id
            )
        return placed

    async def _place(
        self,
        session: CartSession,
        form: CheckoutForm,
        method: PaymentMethod,
        quote: Quote,
        confirmation: TransactionConfirmation | None,
        user_id: str | None,
    ) -> Result[PlacedOrder, BasketError]:
        cart = session.cart
        status = OrderStatus.PROCESSING if confirmation is not None else OrderStatus.PENDING
        label = describe_payment(method, confirmation)
        order_date = self._today()

        def build_draft(customer: Customer) -> OrderDraft:
            return OrderDraft(
                customer_id=customer.id,
                user_id=user_id,
                items=cart.lines,
                total=quote.grand_total,
                shipping_cost=quote.shipping,
                payment_method=label,
                status=status,
                order_date=order_date,
                shipping_address=form.shipping_address,
                billing_address=form.effective_billing,
                tax=quote.tax,
            )

        match await place(self._customers, self._orders, form.customer_details(), build_draft):
            case Ok(placement):
                session.clear()
                logger.info(
                    "Order %s placed: status=%s total=%.2f",
                    placement.order.id,
                    placement.order.status.value,
                    placement.order.total,
                )
                return Ok(PlacedOrder(placement.order, placement.customer, quote))
            case Error(err):
                logger.error("Order placement failed at %s: %s", err.step, err.message)
                return Error(err)

    # ═══════════════════════════════════════════════════════════════════════
    # Admin
    # ═══════════════════════════════════════════════════════════════════════

    async def update_status(
        self, order_id: str, status: OrderStatus
    ) -> Result[Order, BasketError]:
        """Move an order to any status."""
        result = await _load(
            "STORE_ERROR", lambda: self._orders.update_status(order_id, status)
        )
        if isinstance(result, Error):
            return Error(result.value)
        if result.value is None:
            return Error(OrderNotFoundError(order_id))
        logger.info("Order %s is now %s", order_id, status.value)
        return Ok(result.value)


async def _load[T](
    code: str, call: Callable[[], Awaitable[Result[T, StoreError]]]
) -> Result[T, BasketError]:
    """Run one store read; a raised exception becomes a BasketError too."""
    outcome = await L.catching_async(call, on_error=lambda e: StoreError(str(e), e))()
    match outcome:
        case Ok(Ok(value)):
            return Ok(value)
        case Ok(Error(err)) | Error(err):
            return Error(BasketError(code, err.message))


def _request(cart: Cart, products: list[Product], settings: StoreSettings) -> PricingRequest:
    return PricingRequest(
        lines=cart.lines,
        products={p.id: p for p in products},
        settings=settings,
    )


__all__ = ("PlacedOrder", "CheckoutService")
