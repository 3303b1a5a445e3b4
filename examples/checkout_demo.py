"""
Checkout — from product page to invoice.

Cart merge, live quote, online and manual payment, re-order, invoice.

    python -m examples.checkout_demo
"""

from kungfu import Ok, Error

from basket import cart as K
from basket import checkout as Co
from basket import customization as Cz
from basket import history as H
from basket import stores as S
from basket.config import load_settings
from basket.model import Address
from examples._infra import FakeGateway, banner, run, seed_products


async def main() -> None:
    products = seed_products()
    mug, sign, _ = products

    settings = load_settings(
        {
            "shipping": {"adjustmentPercentage": 10},
            "tax": {"enabled": True, "rate": 15, "taxNumber": "123-456-789"},
            "payment": {"stripe": {"enabled": True}},
        }
    )
    catalog = S.MemoryCatalog(products)
    orders = S.MemoryOrderStore()
    service = Co.CheckoutService(
        S.MemoryCustomerStore(), orders, catalog, S.MemorySettingsProvider(settings)
    )

    banner("Cart")
    session = K.CartSession()
    values = Cz.default_values(mug)
    values["message"] = Cz.set_line(values["message"], mug.customizations[0], 0, "Happy Birthday Mum!")
    print(f"  line 1 truncated to: {values['message'].splitlines()[0]!r}")

    session.add(K.admit(mug, 1, values))
    session.add(K.admit(mug, 1, values))
    session.add(K.admit(sign, 1, {"wood": "Rimu", "paint": "#2e8b57"}))
    print(f"  {len(session.cart)} lines, {session.cart.item_count()} items")

    match await service.preview(session.cart):
        case Ok(q):
            print(f"  subtotal ${q.subtotal:.2f}  shipping ${q.shipping:.2f}  total ${q.grand_total:.2f}")
            print(f"  includes GST ${q.tax_amount:.2f}")
        case Error(e):
            print(f"  ✗ {e.message}")

    banner("Checkout (Stripe)")
    form = Co.CheckoutForm(
        Co.ContactDetails("Ana Smith", "ana@example.com"),
        Address("12 Kauri Rd", "Nelson", "7010", "New Zealand"),
    )
    print(f"  methods: {[m.value for m in Co.available_methods(settings.payment)]}")

    declined = await service.pay_and_place(
        session, form, Co.PaymentMethod.STRIPE, FakeGateway(decline=True)
    )
    if isinstance(declined, Error):
        print(f"  ✗ {declined.value.message} (cart kept: {len(session.cart)} lines)")

    match await service.pay_and_place(session, form, Co.PaymentMethod.STRIPE, FakeGateway()):
        case Ok(placed):
            order = placed.order
            print(f"  ✓ {order.id} {order.status.value}: {order.payment_method}")
        case Error(e):
            print(f"  ✗ {e.message}")
            return

    banner("Re-order (sign discontinued)")
    await catalog.delete("sign")
    current = (await catalog.list_products()).value
    result = H.reorder_into(session, order, current)
    print(f"  added {len(result.items)} line(s), dropped {list(result.dropped)}")

    match await service.place_order(session, form, Co.PaymentMethod.BANK_TRANSFER):
        case Ok(placed):
            print(f"  ✓ {placed.order.id} {placed.order.status.value}")
            view = H.project_invoice(placed.order, placed.customer, settings)
            banner(view.filename)
            print(H.TextInvoiceRenderer().render(view).decode())
        case Error(e):
            print(f"  ✗ {e.message}")


if __name__ == "__main__":
    run(main)
