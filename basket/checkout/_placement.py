"""
Placement — customer lookup-or-create, then the order insert.

Two sequential steps with no compensation. When the insert fails after a
new customer was created, that record stays behind and the failure names
it as orphaned_customer_id.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from combinators import lift as L
from kungfu import Result, Ok, Error

from basket.errors import PlacementError
from basket.model import Customer, CustomerDetails, Order, OrderDraft
from basket.stores import CustomerStore, OrderStore, StoreError


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Placement:
    customer: Customer
    order: Order
    customer_created: bool


async def _attempt[T](
    step: str,
    call: Callable[[], Awaitable[Result[T, StoreError]]],
    orphaned_customer_id: str | None = None,
) -> Result[T, PlacementError]:
    """Run one store call; a raised exception counts as a StoreError."""
    outcome = await L.catching_async(call, on_error=lambda e: StoreError(str(e), e))()
    match outcome:
        case Ok(Ok(value)):
            return Ok(value)
        case Ok(Error(err)) | Error(err):
            return Error(PlacementError(step, err.message, orphaned_customer_id))


async def _resolve_customer(
    customers: CustomerStore, details: CustomerDetails
) -> Result[tuple[Customer, bool], PlacementError]:
    found = await _attempt("customer_lookup", lambda: customers.find_by_email(details.email))
    if isinstance(found, Ok) and found.value is not None:
        return Ok((found.value, False))
    if isinstance(found, Error):
        # Guests may lack read access to customers; fall through to create.
        logger.warning("Customer lookup failed, creating a new record: %s", found.value.message)

    match await _attempt("customer_create", lambda: customers.create(details)):
        case Ok(created):
            return Ok((created, True))
        case Error(err):
            return Error(err)


async def place(
    customers: CustomerStore,
    orders: OrderStore,
    details: CustomerDetails,
    build_draft: Callable[[Customer], OrderDraft],
) -> Result[Placement, PlacementError]:
    resolved = await _resolve_customer(customers, details)
    if isinstance(resolved, Error):
        return resolved

    customer, created = resolved.value
    orphan = customer.id if created else None
    draft = build_draft(customer)

    match await _attempt("order_create", lambda: orders.create(draft), orphan):
        case Ok(order):
            return Ok(Placement(customer, order, created))
        case Error(err):
            if orphan is not None:
                logger.warning(
                    "Order insert failed; customer %s has no order: %s", orphan, err.message
                )
            return Error(err)


__all__ = ("Placement", "place")
