"""
Collaborator protocols — what the pricing core needs from the outside.

All methods return Result for explicit error handling. Failures are
StoreError values, never raised across the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from kungfu import Result

from basket.model import (
    Customer,
    CustomerDetails,
    Order,
    OrderDraft,
    OrderStatus,
    Product,
    StoreSettings,
)


@dataclass(frozen=True)
class StoreError:
    """Storage operation error."""

    message: str
    cause: Exception | None = None


class CatalogProvider(Protocol):
    """Read path over products. The core never mutates the catalog."""

    async def list_products(self) -> Result[list[Product], StoreError]: ...


class SettingsProvider(Protocol):
    async def current(self) -> Result[StoreSettings, StoreError]:
        """Current settings snapshot."""
        ...


class CustomerStore(Protocol):
    async def find_by_email(self, email: str) -> Result[Customer | None, StoreError]:
        """Returns Ok(None) if no customer has this email."""
        ...

    async def create(self, details: CustomerDetails) -> Result[Customer, StoreError]:
        """Persist a customer. The store assigns the id."""
        ...


class OrderStore(Protocol):
    """
    Order persistence.

    create() assigns id and created_at; update_status() returns the updated
    order, or Ok(None) when the id is unknown.
    """

    async def create(self, draft: OrderDraft) -> Result[Order, StoreError]: ...

    async def update_status(
        self, order_id: str, status: OrderStatus
    ) -> Result[Order | None, StoreError]: ...

    async def get(self, order_id: str) -> Result[Order | None, StoreError]: ...

    async def list_for_user(self, user_id: str) -> Result[list[Order], StoreError]:
        """Newest first."""
        ...

    async def list_all(self) -> Result[list[Order], StoreError]:
        """Newest first."""
        ...


__all__ = (
    "StoreError",
    "CatalogProvider",
    "SettingsProvider",
    "CustomerStore",
    "OrderStore",
)
