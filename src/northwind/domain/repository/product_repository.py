"""Abstract repository for Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from northwind.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def create(self, product: Product) -> int:
        """Insert a new product and return its ID."""

    @abstractmethod
    def update(self, product: Product) -> bool:
        """Rewrite a product. False if no row matched."""

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Delete a product. False if it did not exist."""
