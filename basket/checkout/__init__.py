"""
Checkout — turn an active cart into a persisted order.

    from basket import checkout as Co

    form = Co.CheckoutForm(Co.ContactDetails("Ana", "ana@example.com"), address)
    result = await service.place_order(session, form, Co.PaymentMethod.CASH_ON_PICKUP)
"""

from basket.checkout._form import (
    FORM_INCOMPLETE,
    ContactDetails,
    CheckoutForm,
    validate_form,
    ensure_ready,
)
from basket.checkout._payment import (
    PaymentMethod,
    TransactionConfirmation,
    PaymentGateway,
    describe_payment,
    available_methods,
)
from basket.checkout._placement import Placement, place
from basket.checkout._service import PlacedOrder, CheckoutService

__all__ = (
    # Form
    "FORM_INCOMPLETE",
    "ContactDetails",
    "CheckoutForm",
    "validate_form",
    "ensure_ready",
    # Payment
    "PaymentMethod",
    "TransactionConfirmation",
    "PaymentGateway",
    "describe_payment",
    "available_methods",
    # Placement
    "Placement",
    "place",
    "PlacedOrder",
    "CheckoutService",
)
