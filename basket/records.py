"""
Records — pydantic codecs between stored rows / API payloads and the model.

Field names follow the storefront's camelCase rows (postalCode,
discountPrice, lineLengths, ...); snake_case is accepted too. Every record
converts with to_domain() / from_domain().
"""

from datetime import date, datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from basket.model import (
    Address,
    CartItem,
    Customer,
    CustomizationKind,
    CustomizationOption,
    Order,
    OrderStatus,
    PaymentOption,
    PaymentSettings,
    Product,
    ShippingSettings,
    StoreIdentity,
    StoreSettings,
    TaxSettings,
    TaxSnapshot,
)
from basket.customization import normalize_line_lengths


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def dump(self) -> dict[str, object]:
        """JSON-ready dict in the stored (camelCase) shape."""
        return self.model_dump(mode="json", by_alias=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════════════════


class CustomizationRecord(_Record):
    id: str
    name: str
    kind: CustomizationKind = Field(alias="type")
    required: bool = False
    options: list[str] = Field(default_factory=list)
    max_length: int | None = None
    line_lengths: list[int] = Field(default_factory=list)
    helper_text: str | None = None

    @model_validator(mode="after")
    def migrate_line_lengths(self) -> Self:
        # Text fields always carry at least one line limit.
        if self.kind is CustomizationKind.TEXT:
            self.line_lengths = list(
                normalize_line_lengths(self.line_lengths, self.max_length)
            )
        if self.kind is CustomizationKind.SELECT and self.required and not self.options:
            raise ValueError(f"required select '{self.name}' has no options")
        return self

    def to_domain(self) -> CustomizationOption:
        return CustomizationOption(
            id=self.id,
            name=self.name,
            kind=self.kind,
            required=self.required,
            line_lengths=tuple(self.line_lengths),
            options=tuple(self.options),
            helper_text=self.helper_text,
        )

    @classmethod
    def from_domain(cls, option: CustomizationOption) -> "CustomizationRecord":
        return cls(
            id=option.id,
            name=option.name,
            kind=option.kind,
            required=option.required,
            options=list(option.options),
            line_lengths=list(option.line_lengths),
            helper_text=option.helper_text,
        )


class ProductRecord(_Record):
    id: str
    name: str
    price: float
    discount_price: float | None = None
    shipping_cost: float | None = None
    stock: int = 0
    low_stock_threshold: int | None = None
    customizations: list[CustomizationRecord] | None = None

    def to_domain(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=self.price,
            discount_price=self.discount_price,
            shipping_cost=self.shipping_cost or 0.0,
            stock=self.stock,
            low_stock_threshold=self.low_stock_threshold,
            customizations=tuple(c.to_domain() for c in self.customizations or ()),
        )

    @classmethod
    def from_domain(cls, product: Product) -> "ProductRecord":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            discount_price=product.discount_price,
            shipping_cost=product.shipping_cost,
            stock=product.stock,
            low_stock_threshold=product.low_stock_threshold,
            customizations=[
                CustomizationRecord.from_domain(c) for c in product.customizations
            ],
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Customers & Orders
# ═══════════════════════════════════════════════════════════════════════════════


class AddressRecord(_Record):
    street: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""

    def to_domain(self) -> Address:
        return Address(self.street, self.city, self.postal_code, self.country)

    @classmethod
    def from_domain(cls, address: Address) -> "AddressRecord":
        return cls(
            street=address.street,
            city=address.city,
            postal_code=address.postal_code,
            country=address.country,
        )


class CustomerRecord(_Record):
    id: str
    name: str
    email: str
    shipping_address: AddressRecord = Field(default_factory=AddressRecord)
    billing_address: AddressRecord = Field(default_factory=AddressRecord)

    def to_domain(self) -> Customer:
        return Customer(
            id=self.id,
            name=self.name,
            email=self.email,
            shipping_address=self.shipping_address.to_domain(),
            billing_address=self.billing_address.to_domain(),
        )

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerRecord":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            shipping_address=AddressRecord.from_domain(customer.shipping_address),
            billing_address=AddressRecord.from_domain(customer.billing_address),
        )


class CartItemRecord(_Record):
    cart_item_id: str
    product_id: str
    product_name: str
    quantity: int = Field(ge=1)
    price: float
    customizations: dict[str, str] = Field(default_factory=dict)

    def to_domain(self) -> CartItem:
        return CartItem(
            cart_item_id=self.cart_item_id,
            product_id=self.product_id,
            product_name=self.product_name,
            quantity=self.quantity,
            price=self.price,
            customizations=self.customizations,
        )

    @classmethod
    def from_domain(cls, item: CartItem) -> "CartItemRecord":
        return cls(
            cart_item_id=item.cart_item_id,
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            price=item.price,
            customizations=dict(item.customizations),
        )


class TaxSnapshotRecord(_Record):
    rate: float
    label: str
    amount: float

    def to_domain(self) -> TaxSnapshot:
        return TaxSnapshot(rate=self.rate, label=self.label, amount=self.amount)

    @classmethod
    def from_domain(cls, tax: TaxSnapshot) -> "TaxSnapshotRecord":
        return cls(rate=tax.rate, label=tax.label, amount=tax.amount)


class OrderRecord(_Record):
    id: str
    customer_id: str
    user_id: str | None = None
    items: list[CartItemRecord]
    total: float
    shipping_cost: float = 0.0
    payment_method: str
    status: OrderStatus = OrderStatus.PENDING
    order_date: date
    shipping_address: AddressRecord = Field(default_factory=AddressRecord)
    billing_address: AddressRecord = Field(default_factory=AddressRecord)
    tax: TaxSnapshotRecord | None = None
    created_at: datetime | None = None

    def to_domain(self) -> Order:
        return Order(
            id=self.id,
            customer_id=self.customer_id,
            user_id=self.user_id,
            items=tuple(i.to_domain() for i in self.items),
            total=self.total,
            shipping_cost=self.shipping_cost,
            payment_method=self.payment_method,
            status=self.status,
            order_date=self.order_date,
            shipping_address=self.shipping_address.to_domain(),
            billing_address=self.billing_address.to_domain(),
            tax=self.tax.to_domain() if self.tax is not None else None,
            created_at=self.created_at,
        )

    @classmethod
    def from_domain(cls, order: Order) -> "OrderRecord":
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            user_id=order.user_id,
            items=[CartItemRecord.from_domain(i) for i in order.items],
            total=order.total,
            shipping_cost=order.shipping_cost,
            payment_method=order.payment_method,
            status=order.status,
            order_date=order.order_date,
            shipping_address=AddressRecord.from_domain(order.shipping_address),
            billing_address=AddressRecord.from_domain(order.billing_address),
            tax=TaxSnapshotRecord.from_domain(order.tax) if order.tax else None,
            created_at=order.created_at,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Store settings
#
# Defaults are the shop's out-of-the-box configuration. A partial row is
# merged field by field over them, nested sections included.
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_STORE_NAME = "Crafts By Sam"
DEFAULT_ADDRESS = "123 Creative Lane, Artville"
DEFAULT_PHONE = "021 123 4567"
DEFAULT_INVOICE_TERMS = (
    "Payment is due upon receipt. Title to the goods remains with "
    f"{DEFAULT_STORE_NAME} until payment has been made in full. Please "
    "reference your Invoice Number on all bank transfers."
)
DEFAULT_BANK_INSTRUCTIONS = (
    "Bank: ASB\nAccount: 12-3456-7890123-00\nReference: Your Order ID"
)
DEFAULT_PICKUP_INSTRUCTIONS = (
    "Pickup from 123 Creative Lane. We will contact you to arrange a time."
)


class ShippingRecord(_Record):
    adjustment_percentage: float = 0.0


class TaxRecord(_Record):
    enabled: bool = False
    rate: float = 15.0
    label: str = "GST"
    tax_number: str = ""


class PaymentOptionRecord(_Record):
    enabled: bool = False
    instructions: str = ""

    def to_domain(self) -> PaymentOption:
        return PaymentOption(enabled=self.enabled, instructions=self.instructions)


_OPTION_DEFAULTS = (
    ("paypal", "paypal", {"enabled": False, "instructions": ""}),
    ("stripe", "stripe", {"enabled": False, "instructions": ""}),
    (
        "bank_transfer",
        "bankTransfer",
        {"enabled": True, "instructions": DEFAULT_BANK_INSTRUCTIONS},
    ),
    (
        "cash_on_pickup",
        "cashOnPickup",
        {"enabled": True, "instructions": DEFAULT_PICKUP_INSTRUCTIONS},
    ),
)


class PaymentRecord(_Record):
    paypal: PaymentOptionRecord = Field(default_factory=PaymentOptionRecord)
    stripe: PaymentOptionRecord = Field(default_factory=PaymentOptionRecord)
    bank_transfer: PaymentOptionRecord = Field(
        default_factory=lambda: PaymentOptionRecord(
            enabled=True, instructions=DEFAULT_BANK_INSTRUCTIONS
        )
    )
    cash_on_pickup: PaymentOptionRecord = Field(
        default_factory=lambda: PaymentOptionRecord(
            enabled=True, instructions=DEFAULT_PICKUP_INSTRUCTIONS
        )
    )

    @model_validator(mode="before")
    @classmethod
    def merge_option_defaults(cls, data: object) -> object:
        # A partial option keeps the shop default for every key it omits.
        if not isinstance(data, dict):
            return data
        merged = dict(data)
        for key, alias, default in _OPTION_DEFAULTS:
            for name in (key, alias):
                value = merged.get(name)
                if isinstance(value, dict):
                    merged[name] = {**default, **value}
        return merged


class StoreSettingsRecord(_Record):
    logo_text: str = DEFAULT_STORE_NAME
    logo_url: str = ""
    address: str = DEFAULT_ADDRESS
    phone: str = DEFAULT_PHONE
    shipping: ShippingRecord = Field(default_factory=ShippingRecord)
    tax: TaxRecord = Field(default_factory=TaxRecord)
    payment: PaymentRecord = Field(default_factory=PaymentRecord)
    invoice_terms: str = DEFAULT_INVOICE_TERMS

    @field_validator("phone", mode="after")
    @classmethod
    def phone_or_default(cls, value: str) -> str:
        return value or DEFAULT_PHONE

    @field_validator("invoice_terms", mode="after")
    @classmethod
    def terms_or_default(cls, value: str) -> str:
        return value or DEFAULT_INVOICE_TERMS

    def to_domain(self) -> StoreSettings:
        return StoreSettings(
            identity=StoreIdentity(
                name=self.logo_text,
                logo_url=self.logo_url,
                address=self.address,
                phone=self.phone,
            ),
            shipping=ShippingSettings(self.shipping.adjustment_percentage),
            tax=TaxSettings(
                enabled=self.tax.enabled,
                rate=self.tax.rate,
                label=self.tax.label,
                tax_number=self.tax.tax_number,
            ),
            payment=PaymentSettings(
                paypal=self.payment.paypal.to_domain(),
                stripe=self.payment.stripe.to_domain(),
                bank_transfer=self.payment.bank_transfer.to_domain(),
                cash_on_pickup=self.payment.cash_on_pickup.to_domain(),
            ),
            invoice_terms=self.invoice_terms,
        )

    @classmethod
    def from_domain(cls, settings: StoreSettings) -> "StoreSettingsRecord":
        def option(o: PaymentOption) -> PaymentOptionRecord:
            return PaymentOptionRecord(enabled=o.enabled, instructions=o.instructions)

        return cls(
            logo_text=settings.identity.name,
            logo_url=settings.identity.logo_url,
            address=settings.identity.address,
            phone=settings.identity.phone,
            shipping=ShippingRecord(
                adjustment_percentage=settings.shipping.adjustment_percentage
            ),
            tax=TaxRecord(
                enabled=settings.tax.enabled,
                rate=settings.tax.rate,
                label=settings.tax.label,
                tax_number=settings.tax.tax_number,
            ),
            payment=PaymentRecord(
                paypal=option(settings.payment.paypal),
                stripe=option(settings.payment.stripe),
                bank_transfer=option(settings.payment.bank_transfer),
                cash_on_pickup=option(settings.payment.cash_on_pickup),
            ),
            invoice_terms=settings.invoice_terms,
        )


__all__ = (
    "CustomizationRecord",
    "ProductRecord",
    "AddressRecord",
    "CustomerRecord",
    "CartItemRecord",
    "TaxSnapshotRecord",
    "OrderRecord",
    "ShippingRecord",
    "TaxRecord",
    "PaymentOptionRecord",
    "PaymentRecord",
    "StoreSettingsRecord",
)
