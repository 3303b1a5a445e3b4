"""
Customization — validation and line editing for personalised products.

    from basket import customization as Cz

    values = Cz.default_values(product)
    values["name"] = Cz.set_line(values["name"], option, 0, "Happy Birthday")
    errors = Cz.validate(product.customizations, values)
"""

from basket.customization._lines import (
    normalize_line_lengths,
    line_limits,
    split_lines,
    set_line,
    default_values,
)
from basket.customization._validate import FieldErrors, validate

__all__ = (
    "normalize_line_lengths",
    "line_limits",
    "split_lines",
    "set_line",
    "default_values",
    "FieldErrors",
    "validate",
)
