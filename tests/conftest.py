"""Pytest fixtures for basket tests."""

import pytest

from basket import checkout as Co
from basket import stores as S
from basket.config import load_settings
from basket.model import (
    Address,
    CartItem,
    CustomizationKind,
    CustomizationOption,
    Product,
)


@pytest.fixture
def engraving():
    """Two-line required text option."""
    return CustomizationOption(
        "engraving", "Engraving", CustomizationKind.TEXT, required=True, line_lengths=(3, 3)
    )


@pytest.fixture
def mug():
    return Product(
        id="mug",
        name="Name Mug",
        price=20.0,
        shipping_cost=5.0,
        stock=10,
        customizations=(
            CustomizationOption(
                "name", "Name", CustomizationKind.TEXT, required=True, line_lengths=(10,)
            ),
        ),
    )


@pytest.fixture
def sign():
    return Product(
        id="sign",
        name="Door Sign",
        price=45.0,
        discount_price=39.5,
        shipping_cost=12.0,
        stock=2,
        low_stock_threshold=2,
        customizations=(
            CustomizationOption(
                "wood", "Wood", CustomizationKind.SELECT, required=True, options=("Rimu", "Pine")
            ),
        ),
    )


@pytest.fixture
def card():
    return Product(id="card", name="Greeting Card", price=6.5, stock=40, low_stock_threshold=5)


@pytest.fixture
def products(mug, sign, card):
    return [mug, sign, card]


@pytest.fixture
def taxed_settings():
    """Shipping +10%, GST 15% inclusive."""
    return load_settings(
        {
            "shipping": {"adjustmentPercentage": 10},
            "tax": {"enabled": True, "rate": 15, "label": "GST", "taxNumber": "123-456-789"},
        }
    )


@pytest.fixture
def mug_line():
    return CartItem("cart_1", "mug", "Name Mug", 2, 20.0, {"name": "Sam"})


@pytest.fixture
def address():
    return Address("12 Kauri Rd", "Nelson", "7010", "New Zealand")


@pytest.fixture
def form(address):
    return Co.CheckoutForm(Co.ContactDetails("Ana Smith", "ana@example.com"), address)


@pytest.fixture
def customers():
    return S.MemoryCustomerStore()


@pytest.fixture
def orders():
    return S.MemoryOrderStore()


@pytest.fixture
def settings_provider(taxed_settings):
    return S.MemorySettingsProvider(taxed_settings)


@pytest.fixture
def catalog(products):
    return S.MemoryCatalog(products)


@pytest.fixture
def service(customers, orders, catalog, settings_provider):
    return Co.CheckoutService(customers, orders, catalog, settings_provider)
