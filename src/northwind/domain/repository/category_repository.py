"""Abstract repository for Category."""

from __future__ import annotations

from abc import ABC, abstractmethod

from northwind.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Category | None:
        """Return a category by its exact name, or None if not found."""

    @abstractmethod
    def create(self, category: Category) -> int:
        """Insert a new category and return its ID."""

    @abstractmethod
    def update(self, category: Category) -> bool:
        """Rewrite a category. False if no row matched."""

    @abstractmethod
    def delete(self, category_id: int) -> bool:
        """Delete a category. False if it did not exist."""
