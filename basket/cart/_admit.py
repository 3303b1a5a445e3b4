"""
Admit — turn a product page selection into a cart line.
"""

import uuid

from basket._types import CustomizationValues
from basket.errors import CustomizationError, ValidationError
from basket.model import CartItem, Product
from basket import customization as Cz


def new_cart_item_id() -> str:
    return f"cart_{uuid.uuid4().hex[:12]}"


def admit(
    product: Product,
    quantity: int,
    values: CustomizationValues,
) -> CartItem:
    """
    Validate customizations and build a CartItem.

    The line captures the product's current unit price (discount price if
    set). Later catalog edits don't reach it.

    Raises:
        ValidationError: quantity is not a positive integer.
        CustomizationError: one or more customization fields are invalid.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError(
            "Quantity must be a positive whole number.", {"quantity": str(quantity)}
        )

    errors = Cz.validate(product.customizations, values)
    if errors:
        raise CustomizationError(errors)

    return CartItem(
        cart_item_id=new_cart_item_id(),
        product_id=product.id,
        product_name=product.name,
        quantity=quantity,
        price=product.unit_price,
        customizations=dict(values),
    )


__all__ = ("new_cart_item_id", "admit")
