"""
Cart — line aggregation with price snapshots.

    from basket import cart as K

    cart = K.Cart().add(K.admit(product, 2, values))
    cart.subtotal()
"""

from basket.cart._key import MergeKey, merge_key
from basket.cart._cart import MergePolicy, DEFAULT_POLICY, Cart
from basket.cart._admit import new_cart_item_id, admit
from basket.cart._session import CartSession

__all__ = (
    "MergeKey",
    "merge_key",
    "MergePolicy",
    "DEFAULT_POLICY",
    "Cart",
    "new_cart_item_id",
    "admit",
    "CartSession",
)
