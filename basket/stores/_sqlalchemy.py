"""
SQLAlchemy stores — async persistence for products, customers, orders, settings.

Nested structures (addresses, line items, tax snapshot, customization
definitions, the settings payload) live in JSON columns in the camelCase
shape produced by basket.records.

    session_factory, engine = await create_database("sqlite+aiosqlite:///shop.db")
    orders = SQLAlchemyOrderStore(session_factory)
"""

import uuid
from datetime import date, datetime
from typing import Any

from sqlalchemy import JSON, Date, DateTime, Float, Integer, String, Text, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from kungfu import Result, Ok, Error

from basket.config import DEFAULT_DATABASE_URL, DEFAULT_SETTINGS, dump_settings, load_settings
from basket.model import (
    Customer,
    CustomerDetails,
    Order,
    OrderDraft,
    OrderStatus,
    Product,
    StoreSettings,
)
from basket.records import (
    AddressRecord,
    CartItemRecord,
    CustomerRecord,
    CustomizationRecord,
    OrderRecord,
    ProductRecord,
    TaxSnapshotRecord,
)
from basket.stores._protocols import StoreError


# ═══════════════════════════════════════════════════════════════════════════════
# Tables
# ═══════════════════════════════════════════════════════════════════════════════


class Base(DeclarativeBase):
    pass


class ProductTable(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    discount_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    shipping_cost: Mapped[float | None] = mapped_column(Float, nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    low_stock_threshold: Mapped[int | None] = mapped_column(Integer, nullable=True)
    customizations: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)


class CustomerTable(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    shipping_address: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    billing_address: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)


class OrderTable(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    customer_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    user_id: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)

    # Line items as captured at placement
    items: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)
    total: Mapped[float] = mapped_column(Float, nullable=False)
    shipping_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    tax: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    payment_method: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    order_date: Mapped[date] = mapped_column(Date, nullable=False)
    shipping_address: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    billing_address: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class SettingsTable(Base):
    """Single row (id=1) holding the camelCase settings payload."""

    __tablename__ = "store_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)


# ═══════════════════════════════════════════════════════════════════════════════
# Database Setup
# ═══════════════════════════════════════════════════════════════════════════════


async def create_database(
    url: str = DEFAULT_DATABASE_URL,
) -> tuple[async_sessionmaker[AsyncSession], AsyncEngine]:
    """Create tables and return (session_factory, engine)."""
    engine = create_async_engine(url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    return async_sessionmaker(engine, expire_on_commit=False), engine


# ═══════════════════════════════════════════════════════════════════════════════
# Row <-> model
# ═══════════════════════════════════════════════════════════════════════════════


def _product(row: ProductTable) -> Product:
    return ProductRecord(
        id=row.id,
        name=row.name,
        price=row.price,
        discount_price=row.discount_price,
        shipping_cost=row.shipping_cost,
        stock=row.stock,
        low_stock_threshold=row.low_stock_threshold,
        customizations=[CustomizationRecord.model_validate(c) for c in row.customizations],
    ).to_domain()


def _customer(row: CustomerTable) -> Customer:
    return CustomerRecord(
        id=row.id,
        name=row.name,
        email=row.email,
        shipping_address=AddressRecord.model_validate(row.shipping_address),
        billing_address=AddressRecord.model_validate(row.billing_address),
    ).to_domain()


def _order(row: OrderTable) -> Order:
    return OrderRecord(
        id=row.id,
        customer_id=row.customer_id,
        user_id=row.user_id,
        items=[CartItemRecord.model_validate(i) for i in row.items],
        total=row.total,
        shipping_cost=row.shipping_cost,
        payment_method=row.payment_method,
        status=OrderStatus(row.status),
        order_date=row.order_date,
        shipping_address=AddressRecord.model_validate(row.shipping_address),
        billing_address=AddressRecord.model_validate(row.billing_address),
        tax=TaxSnapshotRecord.model_validate(row.tax) if row.tax else None,
        created_at=row.created_at,
    ).to_domain()


# ═══════════════════════════════════════════════════════════════════════════════
# Stores
# ═══════════════════════════════════════════════════════════════════════════════


class SQLAlchemyCatalog:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_products(self) -> Result[list[Product], StoreError]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(ProductTable).order_by(ProductTable.name))
                return Ok([_product(row) for row in result.scalars()])
        except Exception as e:
            return Error(StoreError(f"Failed to list products: {e}", e))

    async def put(self, product: Product) -> Result[None, StoreError]:
        """Insert or replace a product."""
        try:
            record = ProductRecord.from_domain(product)
            async with self._session_factory() as session:
                await session.merge(
                    ProductTable(
                        id=product.id,
                        name=product.name,
                        price=product.price,
                        discount_price=product.discount_price,
                        shipping_cost=product.shipping_cost,
                        stock=product.stock,
                        low_stock_threshold=product.low_stock_threshold,
                        customizations=[c.dump() for c in record.customizations or ()],
                    )
                )
                await session.commit()
                return Ok(None)
        except Exception as e:
            return Error(StoreError(f"Failed to save product: {e}", e))

    async def delete(self, product_id: str) -> Result[bool, StoreError]:
        """Returns Ok(True) if the product existed."""
        try:
            async with self._session_factory() as session:
                row = await session.get(ProductTable, product_id)
                if row is None:
                    return Ok(False)
                await session.delete(row)
                await session.commit()
                return Ok(True)
        except Exception as e:
            return Error(StoreError(f"Failed to delete product: {e}", e))


class SQLAlchemySettingsProvider:
    """Reads the settings row merged over defaults; no row means defaults."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def current(self) -> Result[StoreSettings, StoreError]:
        try:
            async with self._session_factory() as session:
                row = await session.get(SettingsTable, 1)
                if row is None:
                    return Ok(DEFAULT_SETTINGS)
                return Ok(load_settings(row.payload))
        except Exception as e:
            return Error(StoreError(f"Failed to load settings: {e}", e))

    async def save(self, settings: StoreSettings) -> Result[None, StoreError]:
        try:
            async with self._session_factory() as session:
                await session.merge(SettingsTable(id=1, payload=dump_settings(settings)))
                await session.commit()
                return Ok(None)
        except Exception as e:
            return Error(StoreError(f"Failed to save settings: {e}", e))


class SQLAlchemyCustomerStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find_by_email(self, email: str) -> Result[Customer | None, StoreError]:
        try:
            async with self._session_factory() as session:
                stmt = select(CustomerTable).where(CustomerTable.email == email).limit(1)
                row = (await session.execute(stmt)).scalar_one_or_none()
                return Ok(_customer(row) if row is not None else None)
        except Exception as e:
            return Error(StoreError(f"Failed to find customer: {e}", e))

    async def create(self, details: CustomerDetails) -> Result[Customer, StoreError]:
        try:
            async with self._session_factory() as session:
                row = CustomerTable(
                    id=f"cust_{uuid.uuid4().hex[:12]}",
                    name=details.name,
                    email=details.email,
                    shipping_address=AddressRecord.from_domain(details.shipping_address).dump(),
                    billing_address=AddressRecord.from_domain(details.billing_address).dump(),
                )
                session.add(row)
                await session.commit()
                return Ok(_customer(row))
        except Exception as e:
            return Error(StoreError(f"Failed to create customer: {e}", e))

    async def get(self, customer_id: str) -> Result[Customer | None, StoreError]:
        try:
            async with self._session_factory() as session:
                row = await session.get(CustomerTable, customer_id)
                return Ok(_customer(row) if row is not None else None)
        except Exception as e:
            return Error(StoreError(f"Failed to get customer: {e}", e))


class SQLAlchemyOrderStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, draft: OrderDraft) -> Result[Order, StoreError]:
        try:
            async with self._session_factory() as session:
                row = OrderTable(
                    id=f"ord_{uuid.uuid4().hex[:12]}",
                    customer_id=draft.customer_id,
                    user_id=draft.user_id,
                    items=[CartItemRecord.from_domain(i).dump() for i in draft.items],
                    total=draft.total,
                    shipping_cost=draft.shipping_cost,
                    tax=TaxSnapshotRecord.from_domain(draft.tax).dump() if draft.tax else None,
                    payment_method=draft.payment_method,
                    status=draft.status.value,
                    order_date=draft.order_date,
                    shipping_address=AddressRecord.from_domain(draft.shipping_address).dump(),
                    billing_address=AddressRecord.from_domain(draft.billing_address).dump(),
                    created_at=datetime.now(),
                )
                session.add(row)
                await session.commit()
                return Ok(_order(row))
        except Exception as e:
            return Error(StoreError(f"Failed to create order: {e}", e))

    async def update_status(
        self, order_id: str, status: OrderStatus
    ) -> Result[Order | None, StoreError]:
        try:
            async with self._session_factory() as session:
                row = await session.get(OrderTable, order_id)
                if row is None:
                    return Ok(None)
                row.status = status.value
                await session.commit()
                return Ok(_order(row))
        except Exception as e:
            return Error(StoreError(f"Failed to update order: {e}", e))

    async def get(self, order_id: str) -> Result[Order | None, StoreError]:
        try:
            async with self._session_factory() as session:
                row = await session.get(OrderTable, order_id)
                return Ok(_order(row) if row is not None else None)
        except Exception as e:
            return Error(StoreError(f"Failed to get order: {e}", e))

    async def list_for_user(self, user_id: str) -> Result[list[Order], StoreError]:
        try:
            async with self._session_factory() as session:
                stmt = (
                    select(OrderTable)
                    .where(OrderTable.user_id == user_id)
                    .order_by(OrderTable.created_at.desc())
                )
                result = await session.execute(stmt)
                return Ok([_order(row) for row in result.scalars()])
        except Exception as e:
            return Error(StoreError(f"Failed to list orders: {e}", e))

    async def list_all(self) -> Result[list[Order], StoreError]:
        try:
            async with self._session_factory() as session:
                stmt = select(OrderTable).order_by(OrderTable.created_at.desc())
                result = await session.execute(stmt)
                return Ok([_order(row) for row in result.scalars()])
        except Exception as e:
            return Error(StoreError(f"Failed to list orders: {e}", e))


__all__ = (
    "Base",
    "ProductTable",
    "CustomerTable",
    "OrderTable",
    "SettingsTable",
    "create_database",
    "SQLAlchemyCatalog",
    "SQLAlchemySettingsProvider",
    "SQLAlchemyCustomerStore",
    "SQLAlchemyOrderStore",
)
