"""
Lines — the input layer for multi-line text customizations.

A text value is a single string with one '\\n'-separated segment per
configured line. Editing goes through set_line(), which truncates each line
to its limit, so values entered this way never exceed their limits.
"""

from collections.abc import Sequence

from basket.model import (
    DEFAULT_LINE_LENGTH,
    CustomizationKind,
    CustomizationOption,
    Product,
)


def normalize_line_lengths(
    line_lengths: Sequence[int] | None,
    max_length: int | None = None,
) -> tuple[int, ...]:
    """
    Migrate legacy single-line limits.

    An empty or missing list becomes a one-element list built from the old
    max_length, or DEFAULT_LINE_LENGTH when that is absent too.
    """
    if line_lengths:
        return tuple(line_lengths)
    return (max_length or DEFAULT_LINE_LENGTH,)


def line_limits(option: CustomizationOption) -> tuple[int, ...]:
    return normalize_line_lengths(option.line_lengths)


def split_lines(value: str, count: int) -> list[str]:
    """Split a stored value, padding with empty lines up to count."""
    lines = value.split("\n")
    while len(lines) < count:
        lines.append("")
    return lines


def set_line(value: str, option: CustomizationOption, index: int, text: str) -> str:
    """
    Replace one line of a text value.

    The new text is truncated to that line's limit and the result keeps
    exactly as many lines as the option configures.
    """
    limits = line_limits(option)
    if not 0 <= index < len(limits):
        raise IndexError(f"{option.name} has no line {index + 1}")

    lines = split_lines(value, len(limits))
    lines[index] = text[: limits[index]]
    return "\n".join(lines[: len(limits)])


def default_values(product: Product) -> dict[str, str]:
    """Initial value map shown when a product page opens."""
    values: dict[str, str] = {}
    for option in product.customizations:
        match option.kind:
            case CustomizationKind.SELECT:
                values[option.id] = option.options[0] if option.options else ""
            case CustomizationKind.COLOR:
                values[option.id] = "#000000"
            case CustomizationKind.TEXT:
                values[option.id] = ""
    return values


__all__ = (
    "normalize_line_lengths",
    "line_limits",
    "split_lines",
    "set_line",
    "default_values",
)
