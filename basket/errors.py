"""Error taxonomy for basket."""

from __future__ import annotations

from collections.abc import Mapping


class BasketError(Exception):
    """Base for every domain failure. Carries a stable code and a user-facing message."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class ValidationError(BasketError):
    """Input rejected before any state mutation or collaborator call."""

    def __init__(
        self,
        message: str,
        errors: Mapping[str, str] | None = None,
        code: str = "VALIDATION",
    ) -> None:
        super().__init__(code, message)
        self.errors = dict(errors or {})


class EmptyCartError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Your cart is empty!", code="EMPTY_CART")


class CustomizationError(ValidationError):
    """One or more customization fields are missing or malformed."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        super().__init__(
            "; ".join(errors.values()) or "Invalid customization.",
            errors,
            code="CUSTOMIZATION",
        )


class PaymentError(BasketError):
    """Gateway step failed. No order exists."""

    def __init__(self, message: str) -> None:
        super().__init__("PAYMENT_ERROR", message)


class PlacementError(BasketError):
    """
    Collaborator failure while placing an order.

    Placement is not transactional: when the order insert fails after the
    customer was created, orphaned_customer_id names that record.
    """

    def __init__(
        self,
        step: str,
        message: str,
        orphaned_customer_id: str | None = None,
    ) -> None:
        super().__init__("PLACEMENT_ERROR", message)
        self.step = step
        self.orphaned_customer_id = orphaned_customer_id


class OrderNotFoundError(BasketError):
    def __init__(self, order_id: str) -> None:
        super().__init__("ORDER_NOT_FOUND", f"Order {order_id} not found")
        self.order_id = order_id


__all__ = (
    "BasketError",
    "ValidationError",
    "EmptyCartError",
    "CustomizationError",
    "PaymentError",
    "PlacementError",
    "OrderNotFoundError",
)
