"""
In-memory stores.

Note: Single-process only. Data does not survive a restart.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import Iterable
from datetime import datetime

from kungfu import Result, Ok

from basket.config import DEFAULT_SETTINGS
from basket.model import (
    Customer,
    CustomerDetails,
    Order,
    OrderDraft,
    OrderStatus,
    Product,
    StoreSettings,
)
from basket.stores._protocols import StoreError


def _newest_first(orders: Iterable[Order]) -> list[Order]:
    return sorted(orders, key=lambda o: o.created_at or datetime.min, reverse=True)


class MemoryCatalog:
    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[str, Product] = {p.id: p for p in products}
        self._lock = asyncio.Lock()

    async def list_products(self) -> Result[list[Product], StoreError]:
        async with self._lock:
            return Ok(list(self._products.values()))

    async def put(self, product: Product) -> None:
        async with self._lock:
            self._products[product.id] = product

    async def delete(self, product_id: str) -> None:
        async with self._lock:
            self._products.pop(product_id, None)


class MemorySettingsProvider:
    def __init__(self, settings: StoreSettings | None = None) -> None:
        self._settings = settings if settings is not None else DEFAULT_SETTINGS
        self._lock = asyncio.Lock()

    async def current(self) -> Result[StoreSettings, StoreError]:
        async with self._lock:
            return Ok(self._settings)

    async def save(self, settings: StoreSettings) -> Result[None, StoreError]:
        async with self._lock:
            self._settings = settings
            return Ok(None)


class MemoryCustomerStore:
    def __init__(self) -> None:
        self._customers: dict[str, Customer] = {}
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: str) -> Result[Customer | None, StoreError]:
        async with self._lock:
            for customer in self._customers.values():
                if customer.email == email:
                    return Ok(customer)
            return Ok(None)

    async def create(self, details: CustomerDetails) -> Result[Customer, StoreError]:
        async with self._lock:
            customer = Customer(
                id=f"cust_{uuid.uuid4().hex[:12]}",
                name=details.name,
                email=details.email,
                shipping_address=details.shipping_address,
                billing_address=details.billing_address,
            )
            self._customers[customer.id] = customer
            return Ok(customer)

    async def get(self, customer_id: str) -> Result[Customer | None, StoreError]:
        async with self._lock:
            return Ok(self._customers.get(customer_id))

    def __len__(self) -> int:
        return len(self._customers)


class MemoryOrderStore:
    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._lock = asyncio.Lock()

    async def create(self, draft: OrderDraft) -> Result[Order, StoreError]:
        async with self._lock:
            order = Order.from_draft(
                f"ord_{uuid.uuid4().hex[:12]}", draft, created_at=datetime.now()
            )
            self._orders[order.id] = order
            return Ok(order)

    async def update_status(
        self, order_id: str, status: OrderStatus
    ) -> Result[Order | None, StoreError]:
        async with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return Ok(None)
            updated = order.with_status(status)
            self._orders[order_id] = updated
            return Ok(updated)

    async def get(self, order_id: str) -> Result[Order | None, StoreError]:
        async with self._lock:
            return Ok(self._orders.get(order_id))

    async def list_for_user(self, user_id: str) -> Result[list[Order], StoreError]:
        async with self._lock:
            mine = (o for o in self._orders.values() if o.user_id == user_id)
            return Ok(_newest_first(mine))

    async def list_all(self) -> Result[list[Order], StoreError]:
        async with self._lock:
            return Ok(_newest_first(self._orders.values()))

    def __len__(self) -> int:
        return len(self._orders)


__all__ = (
    "MemoryCatalog",
    "MemorySettingsProvider",
    "MemoryCustomerStore",
    "MemoryOrderStore",
)
