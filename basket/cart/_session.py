"""
Session — the one mutable holder of the shopper's active cart.

UI events arrive one at a time, so no lock is needed here.
"""

from collections.abc import Iterable

from basket.model import CartItem
from basket.cart._cart import Cart, MergePolicy, DEFAULT_POLICY


class CartSession:
    def __init__(self, policy: MergePolicy = DEFAULT_POLICY) -> None:
        self._cart = Cart(policy=policy)

    @property
    def cart(self) -> Cart:
        return self._cart

    def add(self, item: CartItem) -> Cart:
        self._cart = self._cart.add(item)
        return self._cart

    def add_many(self, items: Iterable[CartItem]) -> Cart:
        self._cart = self._cart.add_many(items)
        return self._cart

    def remove(self, cart_item_id: str) -> Cart:
        self._cart = self._cart.remove(cart_item_id)
        return self._cart

    def clear(self) -> Cart:
        self._cart = self._cart.clear()
        return self._cart


__all__ = ("CartSession",)
