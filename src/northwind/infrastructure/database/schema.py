"""Table definitions (SQLAlchemy Core) using the Northwind names.

Column ``key`` values give each column a snake_case attribute name on
``table.c`` while the physical names stay Northwind-compatible.
"""

from __future__ import annotations

import logging

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Engine,
    Float,
    ForeignKey,
    Integer,
    LargeBinary,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

logger = logging.getLogger(__name__)

metadata = MetaData()

categories = Table(
    "Categories",
    metadata,
    Column("CategoryID", Integer, primary_key=True, key="id"),
    Column("CategoryName", String(15), nullable=False, unique=True, key="name"),
    Column("Description", Text, key="description"),
    Column("Picture", LargeBinary, key="picture"),
    sqlite_autoincrement=True,
)

suppliers = Table(
    "Suppliers",
    metadata,
    Column("SupplierID", Integer, primary_key=True, key="id"),
    Column("CompanyName", String(40), nullable=False, key="company_name"),
    Column("ContactName", String(30), key="contact_name"),
    Column("ContactTitle", String(30), key="contact_title"),
    Column("Address", String(60), key="address"),
    Column("City", String(15), key="city"),
    Column("Region", String(15), key="region"),
    Column("PostalCode", String(10), key="postal_code"),
    Column("Country", String(15), key="country"),
    Column("Phone", String(24), key="phone"),
    Column("Fax", String(24), key="fax"),
    Column("HomePage", Text, key="home_page"),
    sqlite_autoincrement=True,
)

products = Table(
    "Products",
    metadata,
    Column("ProductID", Integer, primary_key=True, key="id"),
    Column("ProductName", String(40), nullable=False, unique=True, key="name"),
    Column("SupplierID", Integer, ForeignKey(suppliers.c.id), key="supplier_id"),
    Column("CategoryID", Integer, ForeignKey(categories.c.id), key="category_id"),
    Column("QuantityPerUnit", String(20), key="quantity_per_unit"),
    Column("UnitPrice", Numeric(10, 4), key="unit_price"),
    Column("UnitsInStock", Integer, key="units_in_stock"),
    Column("UnitsOnOrder", Integer, key="units_on_order"),
    Column("ReorderLevel", Integer, key="reorder_level"),
    Column("Discontinued", Boolean, nullable=False, default=False, key="discontinued"),
    sqlite_autoincrement=True,
)

orders = Table(
    "Orders",
    metadata,
    Column("OrderID", Integer, primary_key=True, key="id"),
    Column("CustomerID", String(5), key="customer_id"),
    Column("EmployeeID", Integer, key="employee_id"),
    Column("OrderDate", DateTime, nullable=False, key="order_date"),
    Column("RequiredDate", DateTime, key="required_date"),
    Column("ShippedDate", DateTime, key="shipped_date"),
    Column("ShipVia", Integer, key="ship_via"),
    Column("Freight", Numeric(10, 4), nullable=False, default=0, key="freight"),
    Column("ShipName", String(40), key="ship_name"),
    Column("ShipAddress", String(60), key="ship_address"),
    Column("ShipCity", String(15), key="ship_city"),
    Column("ShipRegion", String(15), key="ship_region"),
    Column("ShipPostalCode", String(10), key="ship_postal_code"),
    Column("ShipCountry", String(15), key="ship_country"),
    CheckConstraint('"Freight" >= 0', name="ck_orders_freight"),
    sqlite_autoincrement=True,
)

# The surrogate key only records insertion order; lines are addressed through
# their parent.
order_details = Table(
    "Order Details",
    metadata,
    Column("OrderDetailID", Integer, primary_key=True, key="id"),
    Column("OrderID", Integer, ForeignKey(orders.c.id), nullable=False, index=True, key="order_id"),
    Column("ProductID", Integer, nullable=False, key="product_id"),
    Column("UnitPrice", Numeric(10, 4), nullable=False, key="unit_price"),
    Column("Quantity", Integer, nullable=False, key="quantity"),
    Column("Discount", Float, nullable=False, default=0.0, key="discount"),
    CheckConstraint('"Quantity" > 0', name="ck_order_details_quantity"),
    CheckConstraint('"Discount" >= 0 AND "Discount" <= 1', name="ck_order_details_discount"),
    sqlite_autoincrement=True,
)


def create_schema(engine: Engine) -> None:
    """Create any missing tables."""
    metadata.create_all(engine)
    logger.info("Schema ready on %s", engine.url)
