"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


# --- Orders -------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: one requested line (product, price at order time, quantity)."""

    product_id: int
    unit_price: Decimal | str
    quantity: int
    discount: float | str = 0.0


@dataclass(frozen=True)
class ShipToDTO:
    name: str | None = None
    address: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None


@dataclass(frozen=True)
class UpdateOrderDTO:
    """Input: the order fields a caller is allowed to change."""

    customer_id: str | None
    employee_id: int | None
    order_date: datetime
    required_date: datetime | None = None
    shipped_date: datetime | None = None
    ship_via: int | None = None
    freight: Decimal | str = Decimal("0")
    ship_to: ShipToDTO = field(default_factory=ShipToDTO)


@dataclass(frozen=True)
class CreateOrderDTO(UpdateOrderDTO):
    """Input: a new order with its lines."""

    lines: tuple[OrderLineSpec, ...] = ()


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order's scalar fields, flattened."""

    id: int
    customer_id: str | None
    employee_id: int | None
    order_date: datetime
    required_date: datetime | None
    shipped_date: datetime | None
    ship_via: int | None
    freight: Decimal
    ship_name: str | None
    ship_address: str | None
    ship_city: str | None
    ship_region: str | None
    ship_postal_code: str | None
    ship_country: str | None


# --- Catalog ------------------------------------------------------------------


@dataclass(frozen=True)
class CategoryInput:
    name: str
    description: str | None = None
    picture: bytes | None = None


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str
    description: str | None
    picture: bytes | None


@dataclass(frozen=True)
class ProductInput:
    name: str
    unit_price: Decimal | str | None = None
    supplier_id: int | None = None
    category_id: int | None = None
    quantity_per_unit: str | None = None
    units_in_stock: int | None = None
    units_on_order: int | None = None
    reorder_level: int | None = None
    discontinued: bool = False


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    supplier_id: int | None
    category_id: int | None
    quantity_per_unit: str | None
    unit_price: str | None
    units_in_stock: int | None
    units_on_order: int | None
    reorder_level: int | None
    discontinued: bool


@dataclass(frozen=True)
class SupplierInput:
    company_name: str
    contact_name: str | None = None
    contact_title: str | None = None
    address: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone: str | None = None
    fax: str | None = None
    home_page: str | None = None


@dataclass(frozen=True)
class SupplierDTO:
    id: int
    company_name: str
    contact_name: str | None
    contact_title: str | None
    address: str | None
    city: str | None
    region: str | None
    postal_code: str | None
    country: str | None
    phone: str | None
    fax: str | None
    home_page: str | None


# --- Auth ---------------------------------------------------------------------


@dataclass(frozen=True)
class TokenDTO:
    token: str
    expiration: datetime
