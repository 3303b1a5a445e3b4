"""
Core types for basket.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Mapping

# Re-export from kungfu
from kungfu import Result, Ok, Error

# ═══════════════════════════════════════════════════════════════════════════════
# Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Money = float
"""Currency amount at full floating precision. Rounded only for display."""

type CustomizationValues = Mapping[str, str]
"""customization id → entered value. Multi-line text joined with '\\n'."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    # Aliases
    "Money",
    "CustomizationValues",
)
