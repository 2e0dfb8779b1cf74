"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from northwind.domain.exceptions import ValidationError
from northwind.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Order lines copy ``unit_price`` when the order is placed, so changing
    it here never affects existing orders.
    """

    id: int | None
    name: str
    supplier_id: int | None = None
    category_id: int | None = None
    quantity_per_unit: str | None = None
    unit_price: Decimal | None = None
    units_in_stock: int | None = None
    units_on_order: int | None = None
    reorder_level: int | None = None
    discontinued: bool = False

    @staticmethod
    def create(
        name: str,
        unit_price: str | float | int | Decimal | None = None,
        **fields,
    ) -> Product:
        product = Product(id=None, name="", **fields)
        product.rename(name)
        if unit_price is not None:
            product.update_price(Money.of(unit_price))
        product._check_stock_levels()
        return product

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()

    def update_price(self, new_price: Money) -> None:
        """Change the product price."""
        self.unit_price = new_price.amount

    def _check_stock_levels(self) -> None:
        for label, value in (
            ("Units in stock", self.units_in_stock),
            ("Units on order", self.units_on_order),
            ("Reorder level", self.reorder_level),
        ):
            if value is not None and value < 0:
                raise ValidationError(f"{label} cannot be negative")
