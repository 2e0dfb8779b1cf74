"""Application service: product queries (list and show)."""

from __future__ import annotations

from northwind.application.dto import ProductDTO
from northwind.domain.model.product import Product
from northwind.domain.model.value_objects import Money
from northwind.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [_to_dto(p) for p in self._product_repo.list_all()]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO | None:
        product = self._product_repo.get_by_id(product_id)
        return _to_dto(product) if product is not None else None


def _to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        supplier_id=product.supplier_id,
        category_id=product.category_id,
        quantity_per_unit=product.quantity_per_unit,
        unit_price=str(Money(product.unit_price)) if product.unit_price is not None else None,
        units_in_stock=product.units_in_stock,
        units_on_order=product.units_on_order,
        reorder_level=product.reorder_level,
        discontinued=product.discontinued,
    )
