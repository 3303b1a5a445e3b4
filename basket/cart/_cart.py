"""
Cart — immutable aggregate of cart lines.

Every operation returns a new Cart; the previous value is untouched.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from basket.model import CartItem
from basket.cart._key import merge_key


@dataclass(frozen=True, slots=True)
class MergePolicy:
    """
    Whether additions coalesce with an existing identical line.

    Single adds merge; bulk adds (re-order) always append. The two differ on
    purpose and are kept as separate switches.
    """

    merge_on_add: bool = True
    merge_on_bulk_add: bool = False


DEFAULT_POLICY = MergePolicy()


@dataclass(frozen=True, slots=True)
class Cart:
    lines: tuple[CartItem, ...] = ()
    policy: MergePolicy = DEFAULT_POLICY

    def add(self, item: CartItem) -> "Cart":
        """Add one line, or grow the quantity of an identical one."""
        if self.policy.merge_on_add:
            return self._merge(item)
        return replace(self, lines=(*self.lines, item))

    def add_many(self, items: Iterable[CartItem]) -> "Cart":
        """Add several lines at once (re-order path)."""
        if self.policy.merge_on_bulk_add:
            cart = self
            for item in items:
                cart = cart._merge(item)
            return cart
        return replace(self, lines=(*self.lines, *items))

    def remove(self, cart_item_id: str) -> "Cart":
        """Drop a line by instance id. Unknown ids are ignored."""
        return replace(
            self,
            lines=tuple(line for line in self.lines if line.cart_item_id != cart_item_id),
        )

    def clear(self) -> "Cart":
        return replace(self, lines=())

    def subtotal(self) -> float:
        return sum((line.line_total for line in self.lines), 0.0)

    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def _merge(self, item: CartItem) -> "Cart":
        key = merge_key(item)
        for index, line in enumerate(self.lines):
            if merge_key(line) == key:
                merged = line.with_quantity(line.quantity + item.quantity)
                return replace(
                    self,
                    lines=(*self.lines[:index], merged, *self.lines[index + 1 :]),
                )
        return replace(self, lines=(*self.lines, item))

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


__all__ = ("MergePolicy", "DEFAULT_POLICY", "Cart")
