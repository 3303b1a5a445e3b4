"""
Store settings — immutable inputs to the calculators.

Passed explicitly into each computation; there is no shared settings object.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class StoreIdentity:
    name: str = ""
    logo_url: str = ""
    address: str = ""
    phone: str = ""


@dataclass(frozen=True, slots=True)
class ShippingSettings:
    adjustment_percentage: float = 0.0  # -10 = 10% off, 25 = 25% surcharge


@dataclass(frozen=True, slots=True)
class TaxSettings:
    enabled: bool = False
    rate: float = 15.0  # percent
    label: str = "GST"
    tax_number: str = ""


@dataclass(frozen=True, slots=True)
class PaymentOption:
    enabled: bool = False
    instructions: str = ""


@dataclass(frozen=True, slots=True)
class PaymentSettings:
    paypal: PaymentOption = field(default_factory=PaymentOption)
    stripe: PaymentOption = field(default_factory=PaymentOption)
    bank_transfer: PaymentOption = field(default_factory=PaymentOption)
    cash_on_pickup: PaymentOption = field(default_factory=PaymentOption)


@dataclass(frozen=True, slots=True)
class StoreSettings:
    identity: StoreIdentity = field(default_factory=StoreIdentity)
    shipping: ShippingSettings = field(default_factory=ShippingSettings)
    tax: TaxSettings = field(default_factory=TaxSettings)
    payment: PaymentSettings = field(default_factory=PaymentSettings)
    invoice_terms: str = ""


__all__ = (
    "StoreIdentity",
    "ShippingSettings",
    "TaxSettings",
    "PaymentOption",
    "PaymentSettings",
    "StoreSettings",
)
