"""
Catalog types — products and their configurable options.

Read-only to the pricing core.
"""

from dataclasses import dataclass
from enum import Enum


DEFAULT_LINE_LENGTH = 20


class CustomizationKind(Enum):
    TEXT = "text"
    SELECT = "select"
    COLOR = "color"


@dataclass(frozen=True, slots=True)
class CustomizationOption:
    """
    One configurable field of a product.

    line_lengths applies to TEXT (one entry per rendered line, each the max
    character count for that line); options applies to SELECT.
    """

    id: str
    name: str
    kind: CustomizationKind
    required: bool = False
    line_lengths: tuple[int, ...] = ()
    options: tuple[str, ...] = ()
    helper_text: str | None = None


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    name: str
    price: float
    discount_price: float | None = None
    shipping_cost: float = 0.0  # flat, per unit
    stock: int = 0
    low_stock_threshold: int | None = None
    customizations: tuple[CustomizationOption, ...] = ()

    @property
    def unit_price(self) -> float:
        """Price a new cart line captures."""
        return self.discount_price if self.discount_price is not None else self.price


__all__ = (
    "DEFAULT_LINE_LENGTH",
    "CustomizationKind",
    "CustomizationOption",
    "Product",
)
