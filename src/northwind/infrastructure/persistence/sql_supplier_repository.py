"""SQL implementation of SupplierRepository."""

from __future__ import annotations

from sqlalchemy import RowMapping, delete, insert, select, update

from northwind.domain.model.supplier import Supplier
from northwind.domain.repository.supplier_repository import SupplierRepository
from northwind.infrastructure.database.schema import suppliers
from northwind.infrastructure.persistence.sql_base import SqlRepository

_FIELDS = (
    "company_name",
    "contact_name",
    "contact_title",
    "address",
    "city",
    "region",
    "postal_code",
    "country",
    "phone",
    "fax",
    "home_page",
)


class SqlSupplierRepository(SqlRepository, SupplierRepository):

    def list_all(self) -> list[Supplier]:
        with self._reading("List suppliers") as conn:
            rows = conn.execute(select(suppliers).order_by(suppliers.c.id)).mappings().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, supplier_id: int) -> Supplier | None:
        with self._reading(f"Get supplier #{supplier_id}") as conn:
            row = conn.execute(
                select(suppliers).where(suppliers.c.id == supplier_id)
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def create(self, supplier: Supplier) -> int:
        with self._unit_of_work("Create supplier") as conn:
            result = conn.execute(insert(suppliers).values(self._to_row(supplier)))
        supplier.id = result.inserted_primary_key[0]
        return supplier.id

    def update(self, supplier: Supplier) -> bool:
        if supplier.id is None:
            return False
        with self._unit_of_work(f"Update supplier #{supplier.id}") as conn:
            result = conn.execute(
                update(suppliers)
                .where(suppliers.c.id == supplier.id)
                .values(self._to_row(supplier))
            )
        return result.rowcount > 0

    def delete(self, supplier_id: int) -> bool:
        with self._unit_of_work(f"Delete supplier #{supplier_id}") as conn:
            result = conn.execute(delete(suppliers).where(suppliers.c.id == supplier_id))
        return result.rowcount > 0

    @staticmethod
    def _to_row(supplier: Supplier) -> dict:
        return {name: getattr(supplier, name) for name in _FIELDS}

    @staticmethod
    def _to_domain(row: RowMapping) -> Supplier:
        return Supplier(
            id=row[suppliers.c.id],
            **{name: row[suppliers.c[name]] for name in _FIELDS},
        )
