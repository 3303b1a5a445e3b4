"""
Model — the data the pricing core reads and produces.

    from basket import model as M

    item = M.CartItem("cart_1", "mug", "Name Mug", 2, 18.0, {"name": "Sam"})
"""

from basket.model._catalog import (
    DEFAULT_LINE_LENGTH,
    CustomizationKind,
    CustomizationOption,
    Product,
)
from basket.model._people import Address, CustomerDetails, Customer
from basket.model._order import (
    CartItem,
    OrderStatus,
    TaxSnapshot,
    OrderDraft,
    Order,
)
from basket.model._settings import (
    StoreIdentity,
    ShippingSettings,
    TaxSettings,
    PaymentOption,
    PaymentSettings,
    StoreSettings,
)

__all__ = (
    # Catalog
    "DEFAULT_LINE_LENGTH",
    "CustomizationKind",
    "CustomizationOption",
    "Product",
    # People
    "Address",
    "CustomerDetails",
    "Customer",
    # Orders
    "CartItem",
    "OrderStatus",
    "TaxSnapshot",
    "OrderDraft",
    "Order",
    # Settings
    "StoreIdentity",
    "ShippingSettings",
    "TaxSettings",
    "PaymentOption",
    "PaymentSettings",
    "StoreSettings",
)
