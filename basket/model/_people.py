"""Addresses and customers."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Address:
    """Value object. Copied into whichever entity embeds it."""

    street: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


@dataclass(frozen=True, slots=True)
class CustomerDetails:
    """Customer data before the Customer Store assigns an id."""

    name: str
    email: str
    shipping_address: Address = field(default_factory=Address)
    billing_address: Address = field(default_factory=Address)


@dataclass(frozen=True, slots=True)
class Customer:
    id: str
    name: str
    email: str
    shipping_address: Address = field(default_factory=Address)
    billing_address: Address = field(default_factory=Address)


__all__ = ("Address", "CustomerDetails", "Customer")
