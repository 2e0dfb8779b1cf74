"""SQL implementation of CategoryRepository."""

from __future__ import annotations

import logging

from sqlalchemy import RowMapping, delete, insert, select, update

from northwind.domain.exceptions import ConflictError, PersistenceError
from northwind.domain.model.category import Category
from northwind.domain.repository.category_repository import CategoryRepository
from northwind.infrastructure.database.schema import categories
from northwind.infrastructure.persistence.sql_base import SqlRepository, caused_by_constraint

logger = logging.getLogger(__name__)


class SqlCategoryRepository(SqlRepository, CategoryRepository):

    # --- CategoryRepository interface -----------------------------------------

    def list_all(self) -> list[Category]:
        with self._reading("List categories") as conn:
            rows = conn.execute(select(categories).order_by(categories.c.id)).mappings().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, category_id: int) -> Category | None:
        with self._reading(f"Get category #{category_id}") as conn:
            row = conn.execute(
                select(categories).where(categories.c.id == category_id)
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def get_by_name(self, name: str) -> Category | None:
        with self._reading(f"Get category '{name}'") as conn:
            row = conn.execute(
                select(categories).where(categories.c.name == name)
            ).mappings().first()
        return self._to_domain(row) if row is not None else None

    def create(self, category: Category) -> int:
        try:
            with self._unit_of_work("Create category") as conn:
                result = conn.execute(insert(categories).values(self._to_row(category)))
        except PersistenceError as exc:
            self._raise_if_name_taken(category, exc)
            raise
        category.id = result.inserted_primary_key[0]
        logger.info("Created category #%s '%s'", category.id, category.name)
        return category.id

    def update(self, category: Category) -> bool:
        if category.id is None:
            return False
        try:
            with self._unit_of_work(f"Update category #{category.id}") as conn:
                result = conn.execute(
                    update(categories)
                    .where(categories.c.id == category.id)
                    .values(self._to_row(category))
                )
        except PersistenceError as exc:
            self._raise_if_name_taken(category, exc)
            raise
        return result.rowcount > 0

    def delete(self, category_id: int) -> bool:
        with self._unit_of_work(f"Delete category #{category_id}") as conn:
            result = conn.execute(delete(categories).where(categories.c.id == category_id))
        return result.rowcount > 0

    # --- Helpers --------------------------------------------------------------

    def _raise_if_name_taken(self, category: Category, exc: PersistenceError) -> None:
        # A concurrent writer took the name between the caller's check and our write.
        if not caused_by_constraint(exc):
            return
        existing = self.get_by_name(category.name)
        if existing is not None and existing.id != category.id:
            raise ConflictError(f"Category '{category.name}' already exists") from exc

    @staticmethod
    def _to_row(category: Category) -> dict:
        return {
            "name": category.name,
            "description": category.description,
            "picture": category.picture,
        }

    @staticmethod
    def _to_domain(row: RowMapping) -> Category:
        return Category(
            id=row[categories.c.id],
            name=row[categories.c.name],
            description=row[categories.c.description],
            picture=row[categories.c.picture],
        )
