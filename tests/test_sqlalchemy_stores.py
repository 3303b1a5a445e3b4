"""Tests for the SQLAlchemy stores on in-memory SQLite."""

import asyncio
from datetime import date

import pytest
from kungfu import Ok

from basket import stores as S
from basket.config import DEFAULT_SETTINGS, load_settings
from basket.model import CustomerDetails, OrderDraft, OrderStatus, TaxSnapshot


def run_db(scenario):
    """Run scenario(session_factory) against a fresh database."""

    async def main():
        session_factory, engine = await S.create_database("sqlite+aiosqlite:///:memory:")
        try:
            return await scenario(session_factory)
        finally:
            await engine.dispose()

    return asyncio.run(main())


@pytest.fixture
def draft(mug_line, address):
    return OrderDraft(
        customer_id="cust_1",
        user_id="user_1",
        items=(mug_line,),
        total=51.0,
        shipping_cost=11.0,
        payment_method="Bank Transfer",
        status=OrderStatus.PENDING,
        order_date=date(2024, 5, 1),
        shipping_address=address,
        billing_address=address,
        tax=TaxSnapshot(15.0, "GST", 6.65),
    )


class TestCatalog:
    def test_put_list_delete(self, products):
        async def scenario(sf):
            catalog = S.SQLAlchemyCatalog(sf)
            for product in products:
                assert isinstance(await catalog.put(product), Ok)
            listed = (await catalog.list_products()).value
            deleted = (await catalog.delete("sign")).value
            missing = (await catalog.delete("sign")).value
            after = (await catalog.list_products()).value
            return listed, deleted, missing, after

        listed, deleted, missing, after = run_db(scenario)

        assert {p.id for p in listed} == {"mug", "sign", "card"}
        assert next(p for p in listed if p.id == "mug") == products[0]
        assert (deleted, missing) == (True, False)
        assert len(after) == 2


class TestSettings:
    def test_defaults_until_saved(self):
        async def scenario(sf):
            provider = S.SQLAlchemySettingsProvider(sf)
            before = (await provider.current()).value
            await provider.save(load_settings({"tax": {"enabled": True}}))
            after = (await provider.current()).value
            return before, after

        before, after = run_db(scenario)

        assert before == DEFAULT_SETTINGS
        assert after.tax.enabled


class TestCustomers:
    def test_create_and_find(self, address):
        async def scenario(sf):
            store = S.SQLAlchemyCustomerStore(sf)
            created = (await store.create(CustomerDetails("Ana", "ana@example.com", address, address))).value
            found = (await store.find_by_email("ana@example.com")).value
            nobody = (await store.find_by_email("bob@example.com")).value
            return created, found, nobody

        created, found, nobody = run_db(scenario)

        assert created.id.startswith("cust_")
        assert found == created
        assert found.shipping_address == address
        assert nobody is None


class TestOrders:
    def test_create_get_update(self, draft):
        async def scenario(sf):
            store = S.SQLAlchemyOrderStore(sf)
            created = (await store.create(draft)).value
            fetched = (await store.get(created.id)).value
            shipped = (await store.update_status(created.id, OrderStatus.SHIPPED)).value
            unknown = (await store.update_status("ord_x", OrderStatus.SHIPPED)).value
            mine = (await store.list_for_user("user_1")).value
            everyone = (await store.list_all()).value
            return created, fetched, shipped, unknown, mine, everyone

        created, fetched, shipped, unknown, mine, everyone = run_db(scenario)

        assert created.id.startswith("ord_")
        assert created.created_at is not None
        assert fetched == created
        assert fetched.items == draft.items
        assert fetched.tax == draft.tax
        assert shipped.status is OrderStatus.SHIPPED
        assert unknown is None
        assert [o.id for o in mine] == [created.id]
        assert len(everyone) == 1
