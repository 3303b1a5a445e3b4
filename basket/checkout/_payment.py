"""
Payment — methods, gateway protocol, and the label stored on the order.

The core treats a gateway confirmation as an opaque success token; only
its id is ever read.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from basket.model import PaymentSettings


class PaymentMethod(Enum):
    PAYPAL = "PayPal"
    STRIPE = "Stripe"
    BANK_TRANSFER = "Bank Transfer"
    CASH_ON_PICKUP = "Cash on Pickup"

    @property
    def is_online(self) -> bool:
        return self in (PaymentMethod.PAYPAL, PaymentMethod.STRIPE)


@dataclass(frozen=True, slots=True)
class TransactionConfirmation:
    id: str


class PaymentGateway(Protocol):
    async def charge(self, amount: float, method: PaymentMethod) -> TransactionConfirmation:
        """Charge the shopper. Raises on decline or transport failure."""
        ...


def describe_payment(
    method: PaymentMethod, confirmation: TransactionConfirmation | None = None
) -> str:
    """
    Label recorded as the order's payment method.

        describe_payment(PaymentMethod.BANK_TRANSFER)
        # -> "Bank Transfer"
        describe_payment(PaymentMethod.STRIPE, TransactionConfirmation("pm_1"))
        # -> "Credit Card (Stripe Txn: pm_1)"
        describe_payment(PaymentMethod.PAYPAL, TransactionConfirmation("8X1"))
        # -> "PayPal (Txn: 8X1)"
    """
    if confirmation is None:
        return method.value
    if method is PaymentMethod.STRIPE:
        return f"Credit Card (Stripe Txn: {confirmation.id})"
    return f"{method.value} (Txn: {confirmation.id})"


def available_methods(settings: PaymentSettings) -> list[PaymentMethod]:
    """Enabled methods in display order."""
    enabled = {
        PaymentMethod.PAYPAL: settings.paypal.enabled,
        PaymentMethod.STRIPE: settings.stripe.enabled,
        PaymentMethod.BANK_TRANSFER: settings.bank_transfer.enabled,
        PaymentMethod.CASH_ON_PICKUP: settings.cash_on_pickup.enabled,
    }
    return [method for method in PaymentMethod if enabled[method]]


__all__ = (
    "PaymentMethod",
    "TransactionConfirmation",
    "PaymentGateway",
    "describe_payment",
    "available_methods",
)
