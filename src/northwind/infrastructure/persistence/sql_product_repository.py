"""SQL implementation of ProductRepository."""

from __future__ import annotations

import logging

from sqlalchemy import RowMapping, delete, insert, select, update

from northwind.domain.exceptions import ConflictError, PersistenceError
from northwind.domain.model.product import Product
from northwind.domain.repository.product_repository import ProductRepository
from northwind.infrastructure.database.schema import products
from northwind.infrastructure.persistence.sql_base import SqlRepository, caused_by_constraint

logger = logging.getLogger(__name__)

_FIELDS = (
    "name",
    "supplier_id",
    "category_id",
    "quantity_per_unit",
    "unit_price",
    "units_in_stock",
    "units_on_order",
    "reorder_level",
    "discontinued",
)


class SqlProductRepository(SqlRepository, ProductRepository):

    def list_all(self) -> list[Product]:
        with self._reading("List products") as conn:
            rows = conn.execute(select(products).order_by(products.c.id)).mappings().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, product_id: int) -> Product | None:
        with self._reading(f"Get product #{product_id}") as conn:
            row = conn.execute(
                select(products).where(products.c.id == product_id)
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def get_by_name(self, name: str) -> Product | None:
        with self._reading(f"Get product '{name}'") as conn:
            row = conn.execute(
                select(products).where(products.c.name == name)
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def create(self, product: Product) -> int:
        try:
            with self._unit_of_work("Create product") as conn:
                result = conn.execute(insert(products).values(self._to_row(product)))
        except PersistenceError as exc:
            self._raise_if_name_taken(product, exc)
            raise
        product.id = result.inserted_primary_key[0]
        logger.info("Created product #%s '%s'", product.id, product.name)
        return product.id

    def update(self, product: Product) -> bool:
        if product.id is None:
            return False
        try:
            with self._unit_of_work(f"Update product #{product.id}") as conn:
                result = conn.execute(
                    update(products)
                    .where(products.c.id == product.id)
                    .values(self._to_row(product))
                )
        except PersistenceError as exc:
            self._raise_if_name_taken(product, exc)
            raise
        return result.rowcount > 0

    def delete(self, product_id: int) -> bool:
        with self._unit_of_work(f"Delete product #{product_id}") as conn:
            result = conn.execute(delete(products).where(products.c.id == product_id))
        return result.rowcount > 0

    def _raise_if_name_taken(self, product: Product, exc: PersistenceError) -> None:
        if not caused_by_constraint(exc):
            return
        existing = self.get_by_name(product.name)
        if existing is not None and existing.id != product.id:
            raise ConflictError(f"Product '{product.name}' already exists") from exc

    @staticmethod
    def _to_row(product: Product) -> dict:
        return {name: getattr(product, name) for name in _FIELDS}

    @staticmethod
    def _to_domain(row: RowMapping) -> Product:
        return Product(
            id=row[products.c.id],
            **{name: row[products.c[name]] for name in _FIELDS},
        )
