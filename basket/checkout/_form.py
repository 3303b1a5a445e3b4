"""Checkout form and the validation gate in front of placement."""

from dataclasses import dataclass, field

from basket.cart import Cart
from basket.customization import FieldErrors
from basket.errors import EmptyCartError, ValidationError
from basket.model import Address, CustomerDetails

FORM_INCOMPLETE = "Please fill in all required contact and address fields."


@dataclass(frozen=True, slots=True)
class ContactDetails:
    name: str = ""
    email: str = ""


@dataclass(frozen=True, slots=True)
class CheckoutForm:
    contact: ContactDetails
    shipping_address: Address
    billing_address: Address = field(default_factory=Address)
    billing_same_as_shipping: bool = True

    @property
    def effective_billing(self) -> Address:
        """Billing address the order records."""
        if self.billing_same_as_shipping:
            return self.shipping_address
        return self.billing_address

    def customer_details(self) -> CustomerDetails:
        return CustomerDetails(
            name=self.contact.name,
            email=self.contact.email,
            shipping_address=self.shipping_address,
            billing_address=self.effective_billing,
        )


def _blank(value: str) -> bool:
    return not value.strip()


def validate_form(form: CheckoutForm) -> FieldErrors:
    """Missing required fields, keyed by dotted field path."""
    required = {
        "contact.name": form.contact.name,
        "contact.email": form.contact.email,
        "shipping.street": form.shipping_address.street,
        "shipping.city": form.shipping_address.city,
        "shipping.postal_code": form.shipping_address.postal_code,
    }
    if not form.billing_same_as_shipping:
        required["billing.street"] = form.billing_address.street
        required["billing.city"] = form.billing_address.city
    return {path: f"{path} is required." for path, value in required.items() if _blank(value)}


def ensure_ready(cart: Cart, form: CheckoutForm) -> None:
    """
    Raise before any collaborator is touched.

    EmptyCartError when there is nothing to order, ValidationError when
    the contact or address block is incomplete.
    """
    if cart.is_empty():
        raise EmptyCartError()
    errors = validate_form(form)
    if errors:
        raise ValidationError(FORM_INCOMPLETE, errors)


__all__ = (
    "FORM_INCOMPLETE",
    "ContactDetails",
    "CheckoutForm",
    "validate_form",
    "ensure_ready",
)
