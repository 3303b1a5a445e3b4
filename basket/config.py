"""
Configuration — store settings defaults and loading, database location.

    from basket import config

    settings = config.load_settings({"shipping": {"adjustmentPercentage": 10}})
    settings.shipping.adjustment_percentage  # 10.0
    settings.tax.label                       # "GST" (from defaults)
"""

import os
from collections.abc import Mapping
from typing import Any

from basket.model import StoreSettings
from basket.records import StoreSettingsRecord

DATABASE_URL_ENV = "BASKET_DATABASE_URL"
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

DEFAULT_SETTINGS: StoreSettings = StoreSettingsRecord().to_domain()


def load_settings(raw: Mapping[str, Any] | None = None) -> StoreSettings:
    """
    Merge a stored settings row over the defaults.

    Missing keys, nested ones included, keep their default value. Raises
    pydantic.ValidationError on malformed values.
    """
    if not raw:
        return DEFAULT_SETTINGS
    return StoreSettingsRecord.model_validate(raw).to_domain()


def dump_settings(settings: StoreSettings) -> dict[str, Any]:
    """Inverse of load_settings: the camelCase row for a settings value."""
    return StoreSettingsRecord.from_domain(settings).dump()


def database_url() -> str:
    return os.environ.get(DATABASE_URL_ENV) or DEFAULT_DATABASE_URL


__all__ = (
    "DATABASE_URL_ENV",
    "DEFAULT_DATABASE_URL",
    "DEFAULT_SETTINGS",
    "load_settings",
    "dump_settings",
    "database_url",
)
