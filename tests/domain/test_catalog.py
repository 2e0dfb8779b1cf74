"""Unit tests for the catalog entities."""

from decimal import Decimal

import pytest

from northwind.domain.exceptions import ValidationError
from northwind.domain.model.category import Category
from northwind.domain.model.product import Product
from northwind.domain.model.supplier import Supplier
from northwind.domain.model.value_objects import Money


class TestCategory:

    def test_create_strips_name(self):
        category = Category.create("  Beverages ", description="Drinks")
        assert category.id is None
        assert category.name == "Beverages"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Category name is required"):
            Category.create("   ")

    def test_rename(self):
        category = Category(id=1, name="Old")
        category.rename("New")
        assert category.name == "New"


class TestProduct:

    def test_create_with_price(self):
        product = Product.create("Chai", unit_price="18.00", category_id=1)
        assert product.name == "Chai"
        assert product.unit_price == Decimal("18.00")
        assert product.category_id == 1
        assert product.discontinued is False

    def test_price_is_optional(self):
        assert Product.create("Chai").unit_price is None

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Units in stock cannot be negative"):
            Product.create("Chai", units_in_stock=-1)

    def test_update_price(self):
        product = Product.create("Chai", unit_price="18.00")
        product.update_price(Money.of("19.50"))
        assert product.unit_price == Decimal("19.50")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name is required"):
            Product.create("")


class TestSupplier:

    def test_create(self):
        supplier = Supplier.create(" Exotic Liquids ", city="London")
        assert supplier.company_name == "Exotic Liquids"
        assert supplier.city == "London"

    def test_blank_company_rejected(self):
        with pytest.raises(ValidationError, match="Company name is required"):
            Supplier.create("")
