"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass

from basket.checkout import PaymentMethod, TransactionConfirmation
from basket.model import CustomizationKind, CustomizationOption, Product


# Catalog
def seed_products() -> list[Product]:
    return [
        Product(
            id="mug",
            name="Personalised Mug",
            price=20.0,
            shipping_cost=5.0,
            stock=12,
            low_stock_threshold=3,
            customizations=(
                CustomizationOption(
                    "message", "Message", CustomizationKind.TEXT,
                    required=True, line_lengths=(15, 15),
                ),
            ),
        ),
        Product(
            id="sign",
            name="Wooden Door Sign",
            price=45.0,
            discount_price=39.5,
            shipping_cost=12.0,
            stock=2,
            low_stock_threshold=2,
            customizations=(
                CustomizationOption(
                    "wood", "Wood", CustomizationKind.SELECT,
                    required=True, options=("Rimu", "Pine"),
                ),
                CustomizationOption("paint", "Paint", CustomizationKind.COLOR),
            ),
        ),
        Product(id="card", name="Greeting Card", price=6.5, stock=40),
    ]


# Fake gateway
@dataclass(slots=True)
class FakeGateway:
    decline: bool = False
    charged: int = 0

    async def charge(self, amount: float, method: PaymentMethod) -> TransactionConfirmation:
        await asyncio.sleep(0.01)
        if self.decline:
            print(f"  ✗ {method.value} declined ${amount:.2f}")
            raise RuntimeError("card declined")
        self.charged += 1
        print(f"  ✓ {method.value} charged ${amount:.2f}")
        return TransactionConfirmation(f"txn_{self.charged:04d}")


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
