"""Application service: Add Product use case."""

from __future__ import annotations

from northwind.application.dto import ProductInput
from northwind.domain.exceptions import ConflictError
from northwind.domain.model.product import Product
from northwind.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, dto: ProductInput) -> int:
        """Add a new product to the catalog and return its ID."""
        product = Product.create(
            name=dto.name,
            unit_price=dto.unit_price,
            supplier_id=dto.supplier_id,
            category_id=dto.category_id,
            quantity_per_unit=dto.quantity_per_unit,
            units_in_stock=dto.units_in_stock,
            units_on_order=dto.units_on_order,
            reorder_level=dto.reorder_level,
            discontinued=dto.discontinued,
        )

        existing = self._product_repo.get_by_name(product.name)
        if existing is not None:
            raise ConflictError(f"Product '{product.name}' already exists")

        return self._product_repo.create(product)
