"""
basket — cart and order pricing for a handmade-goods storefront.

    from basket import cart as K          # Cart lines and merge policy
    from basket import pricing as P       # Shipping, inclusive tax, totals
    from basket import checkout as Co     # Order placement
    from basket import history as H       # Re-order, invoices
"""

from basket import model
from basket import errors
from basket import customization
from basket import cart
from basket import graph
from basket import pricing
from basket import records
from basket import config
from basket import stores
from basket import checkout
from basket import history
from basket import reports
from basket._types import Result, Ok, Error, Money, CustomizationValues

__version__ = "0.1.0"

__all__ = (
    "model",
    "errors",
    "customization",
    "cart",
    "graph",
    "pricing",
    "records",
    "config",
    "stores",
    "checkout",
    "history",
    "reports",
    "Result",
    "Ok",
    "Error",
    "Money",
    "CustomizationValues",
)
