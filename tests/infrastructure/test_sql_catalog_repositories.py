"""Integration tests for the category, product and supplier SQL repositories."""

from decimal import Decimal

import pytest

from northwind.domain.exceptions import ConflictError, PersistenceError
from northwind.domain.model.category import Category
from northwind.domain.model.product import Product
from northwind.domain.model.supplier import Supplier
from northwind.infrastructure.persistence.sql_category_repository import SqlCategoryRepository
from northwind.infrastructure.persistence.sql_product_repository import SqlProductRepository
from northwind.infrastructure.persistence.sql_supplier_repository import SqlSupplierRepository


class TestSqlCategoryRepository:

    def test_create_and_read_back(self, provider):
        repo = SqlCategoryRepository(provider)
        category = Category.create("Beverages", "Soft drinks", b"\x89PNG")

        category_id = repo.create(category)

        assert category.id == category_id
        loaded = repo.get_by_id(category_id)
        assert loaded == Category(category_id, "Beverages", "Soft drinks", b"\x89PNG")
        assert repo.get_by_name("Beverages").id == category_id

    def test_get_by_name_is_exact(self, provider):
        repo = SqlCategoryRepository(provider)
        repo.create(Category.create("Beverages"))
        assert repo.get_by_name("Bev") is None
        assert repo.get_by_name("Beverages ") is None

    def test_duplicate_name_raises_conflict(self, provider):
        repo = SqlCategoryRepository(provider)
        repo.create(Category.create("Beverages"))

        # Skips the handler's pre-check, as a racing writer would.
        with pytest.raises(ConflictError):
            repo.create(Category.create("Beverages"))
        assert len(repo.list_all()) == 1

    def test_update_into_taken_name_raises_conflict(self, provider):
        repo = SqlCategoryRepository(provider)
        repo.create(Category.create("Beverages"))
        second_id = repo.create(Category.create("Condiments"))

        category = repo.get_by_id(second_id)
        category.rename("Beverages")
        with pytest.raises(ConflictError):
            repo.update(category)
        assert repo.get_by_id(second_id).name == "Condiments"

    def test_update_and_delete(self, provider):
        repo = SqlCategoryRepository(provider)
        category_id = repo.create(Category.create("Beverages"))

        category = repo.get_by_id(category_id)
        category.description = "Drinks"
        assert repo.update(category) is True
        assert repo.get_by_id(category_id).description == "Drinks"

        assert repo.delete(category_id) is True
        assert repo.delete(category_id) is False
        assert repo.get_by_id(category_id) is None

    def test_update_missing_returns_false(self, provider):
        repo = SqlCategoryRepository(provider)
        assert repo.update(Category(42, "Ghost")) is False

    def test_delete_referenced_category_fails(self, provider):
        category_id = SqlCategoryRepository(provider).create(Category.create("Beverages"))
        SqlProductRepository(provider).create(Product.create("Chai", category_id=category_id))

        with pytest.raises(PersistenceError):
            SqlCategoryRepository(provider).delete(category_id)


class TestSqlProductRepository:

    def test_create_and_read_back(self, provider):
        supplier_id = SqlSupplierRepository(provider).create(Supplier.create("Exotic Liquids"))
        repo = SqlProductRepository(provider)

        product_id = repo.create(Product.create(
            "Chai",
            unit_price="18.00",
            supplier_id=supplier_id,
            quantity_per_unit="10 boxes x 20 bags",
            units_in_stock=39,
        ))

        loaded = repo.get_by_id(product_id)
        assert loaded.name == "Chai"
        assert loaded.unit_price == Decimal("18.00")
        assert loaded.supplier_id == supplier_id
        assert loaded.units_in_stock == 39
        assert loaded.discontinued is False

    def test_duplicate_name_raises_conflict(self, provider):
        repo = SqlProductRepository(provider)
        repo.create(Product.create("Chai"))
        with pytest.raises(ConflictError):
            repo.create(Product.create("Chai"))

    def test_unknown_supplier_rejected(self, provider):
        with pytest.raises(PersistenceError):
            SqlProductRepository(provider).create(Product.create("Chai", supplier_id=77))

    def test_update_price(self, provider):
        repo = SqlProductRepository(provider)
        product_id = repo.create(Product.create("Chai", unit_price="18"))

        product = repo.get_by_id(product_id)
        product.unit_price = Decimal("20.50")
        product.discontinued = True
        assert repo.update(product) is True

        loaded = repo.get_by_id(product_id)
        assert loaded.unit_price == Decimal("20.50")
        assert loaded.discontinued is True

    def test_list_and_delete(self, provider):
        repo = SqlProductRepository(provider)
        first = repo.create(Product.create("Chai"))
        repo.create(Product.create("Chang"))

        assert [p.name for p in repo.list_all()] == ["Chai", "Chang"]
        assert repo.delete(first) is True
        assert [p.name for p in repo.list_all()] == ["Chang"]


class TestSqlSupplierRepository:

    def test_crud(self, provider):
        repo = SqlSupplierRepository(provider)
        supplier_id = repo.create(Supplier.create("Exotic Liquids", city="London"))

        supplier = repo.get_by_id(supplier_id)
        assert supplier.company_name == "Exotic Liquids"
        assert supplier.city == "London"

        supplier.phone = "(171) 555-2222"
        assert repo.update(supplier) is True
        assert repo.list_all()[0].phone == "(171) 555-2222"

        assert repo.delete(supplier_id) is True
        assert repo.get_by_id(supplier_id) is None
        assert repo.update(supplier) is False
