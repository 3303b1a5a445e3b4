"""
Stores — collaborator protocols and their implementations.

    from basket import stores as S

    orders = S.MemoryOrderStore()
    session_factory, engine = await S.create_database()
    orders = S.SQLAlchemyOrderStore(session_factory)
"""

from basket.stores._protocols import (
    StoreError,
    CatalogProvider,
    SettingsProvider,
    CustomerStore,
    OrderStore,
)
from basket.stores._memory import (
    MemoryCatalog,
    MemorySettingsProvider,
    MemoryCustomerStore,
    MemoryOrderStore,
)
from basket.stores._sqlalchemy import (
    Base,
    ProductTable,
    CustomerTable,
    OrderTable,
    SettingsTable,
    create_database,
    SQLAlchemyCatalog,
    SQLAlchemySettingsProvider,
    SQLAlchemyCustomerStore,
    SQLAlchemyOrderStore,
)

__all__ = (
    # Protocols
    "StoreError",
    "CatalogProvider",
    "SettingsProvider",
    "CustomerStore",
    "OrderStore",
    # Memory
    "MemoryCatalog",
    "MemorySettingsProvider",
    "MemoryCustomerStore",
    "MemoryOrderStore",
    # SQLAlchemy
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
