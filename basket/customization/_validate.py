"""
Validator — field-level errors for a product's customizations.

Pure function of (definitions, values). Empty result means valid.
"""

from collections.abc import Iterable

from basket._types import CustomizationValues
from basket.model import CustomizationKind, CustomizationOption
from basket.customization._lines import line_limits


type FieldErrors = dict[str, str]
"""customization id → message."""


def validate(
    options: Iterable[CustomizationOption],
    values: CustomizationValues,
) -> FieldErrors:
    """
    Check candidate values against their definitions.

    Required text is satisfied when any line has non-blank content. Length
    limits are re-checked here for values that did not come through
    set_line() (re-orders, API payloads).
    """
    errors: FieldErrors = {}
    for option in options:
        value = values.get(option.id) or ""
        message = _check(option, value)
        if message is not None:
            errors[option.id] = message
    return errors


def _check(option: CustomizationOption, value: str) -> str | None:
    match option.kind:
        case CustomizationKind.TEXT:
            if option.required and not value.replace("\n", "").strip():
                return f"{option.name} is required."
            return _check_lengths(option, value)

        case CustomizationKind.SELECT:
            if not value:
                return f"{option.name} is required." if option.required else None
            if option.options and value not in option.options:
                return f"{option.name} must be one of the available options."
            return None

        case CustomizationKind.COLOR:
            if option.required and not value:
                return f"{option.name} is required."
            return None


def _check_lengths(option: CustomizationOption, value: str) -> str | None:
    if not value:
        return None

    limits = line_limits(option)
    lines = value.split("\n")
    if len(lines) > len(limits):
        return f"{option.name} has too many lines."

    for n, (line, limit) in enumerate(zip(lines, limits), start=1):
        if len(line) > limit:
            return f"{option.name} line {n} exceeds {limit} characters."
    return None


__all__ = ("FieldErrors", "validate")
