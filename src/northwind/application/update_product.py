"""Application service: Update Product use case."""

from __future__ import annotations

from northwind.application.dto import ProductInput
from northwind.domain.exceptions import ConflictError
from northwind.domain.model.product import Product
from northwind.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, dto: ProductInput) -> bool:
        """Rewrite a product.

        This does NOT affect any existing orders; their lines captured a
        price snapshot at creation time.
        """
        if self._product_repo.get_by_id(product_id) is None:
            return False

        # Validate the new state through the factory, then give it the ID back.
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
        product.id = product_id

        existing = self._product_repo.get_by_name(product.name)
        if existing is not None and existing.id != product_id:
            raise ConflictError(f"Product '{product.name}' already exists")

        return self._product_repo.update(product)
