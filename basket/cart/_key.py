"""
Merge key — when two additions are the same cart line.
"""

import json

from basket.model import CartItem


type MergeKey = tuple[str, str]


def merge_key(item: CartItem) -> MergeKey:
    """
    (product id, canonical serialization of the customization map).

    Keys are sorted so that maps differing only in insertion order merge.
    """
    return (
        item.product_id,
        json.dumps(dict(item.customizations), sort_keys=True, separators=(",", ":")),
    )


__all__ = ("MergeKey", "merge_key")
