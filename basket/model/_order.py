"""
Order types — cart lines, tax snapshot, orders.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from collections.abc import Mapping

from basket.model._people import Address


@dataclass(frozen=True, slots=True)
class CartItem:
    """
    One cart line.

    price is the unit price captured when the line was added; it is never
    refreshed from the live catalog.
    """

    cart_item_id: str
    product_id: str
    product_name: str
    quantity: int
    price: float
    customizations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the value map so a captured line can't be edited through an alias.
        object.__setattr__(
            self, "customizations", MappingProxyType(dict(self.customizations))
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.cart_item_id,
                self.product_id,
                self.product_name,
                self.quantity,
                self.price,
                frozenset(self.customizations.items()),
            )
        )

    def __reduce__(self):
        # mappingproxy can't be pickled or deep-copied; rebuild from a plain dict.
        return (
            CartItem,
            (
                self.cart_item_id,
                self.product_id,
                self.product_name,
                self.quantity,
                self.price,
                dict(self.customizations),
            ),
        )

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def with_quantity(self, quantity: int) -> "CartItem":
        return replace(self, quantity=quantity)

    def with_id(self, cart_item_id: str) -> "CartItem":
        return replace(self, cart_item_id=cart_item_id)


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


@dataclass(frozen=True, slots=True)
class TaxSnapshot:
    """Tax applied at placement. Stored on the order and never recomputed."""

    rate: float
    label: str
    amount: float


@dataclass(frozen=True, slots=True)
class OrderDraft:
    """Everything the Order Store needs to persist a new order."""

    customer_id: str
    user_id: str | None
    items: tuple[CartItem, ...]
    total: float
    shipping_cost: float
    payment_method: str
    status: OrderStatus
    order_date: date
    shipping_address: Address
    billing_address: Address
    tax: TaxSnapshot | None = None


@dataclass(frozen=True, slots=True)
class Order:
    id: str
    customer_id: str
    user_id: str | None
    items: tuple[CartItem, ...]
    total: float
    shipping_cost: float
    payment_method: str
    status: OrderStatus
    order_date: date
    shipping_address: Address
    billing_address: Address
    tax: TaxSnapshot | None = None
    created_at: datetime | None = None

    @property
    def subtotal(self) -> float:
        return self.total - self.shipping_cost

    @classmethod
    def from_draft(
        cls, order_id: str, draft: OrderDraft, created_at: datetime | None = None
    ) -> "Order":
        return cls(
            id=order_id,
            customer_id=draft.customer_id,
            user_id=draft.user_id,
            items=draft.items,
            total=draft.total,
            shipping_cost=draft.shipping_cost,
            payment_method=draft.payment_method,
            status=draft.status,
            order_date=draft.order_date,
            shipping_address=draft.shipping_address,
            billing_address=draft.billing_address,
            tax=draft.tax,
            created_at=created_at,
        )

    def with_status(self, status: OrderStatus) -> "Order":
        return replace(self, status=status)


__all__ = (
    "CartItem",
    "OrderStatus",
    "TaxSnapshot",
    "OrderDraft",
    "Order",
)
