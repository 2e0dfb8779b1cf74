"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from northwind.infrastructure.config import Settings
from northwind.infrastructure.database.connection import ConnectionProvider
from northwind.infrastructure.persistence.sql_category_repository import (
    SqlCategoryRepository,
)
from northwind.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)
from northwind.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from northwind.infrastructure.persistence.sql_supplier_repository import (
    SqlSupplierRepository,
)


@lru_cache(maxsize=None)
def connection_provider(database_url: str, echo: bool = False) -> ConnectionProvider:
    # One engine (and pool) per URL for the life of the process.
    return ConnectionProvider(database_url, echo=echo)


def provider(settings: Settings) -> ConnectionProvider:
    return connection_provider(settings.database_url, settings.sql_echo)


def order_repository(settings: Settings) -> SqlOrderRepository:
    return SqlOrderRepository(provider(settings))


def category_repository(settings: Settings) -> SqlCategoryRepository:
    return SqlCategoryRepository(provider(settings))


def product_repository(settings: Settings) -> SqlProductRepository:
    return SqlProductRepository(provider(settings))


def supplier_repository(settings: Settings) -> SqlSupplierRepository:
    return SqlSupplierRepository(provider(settings))
