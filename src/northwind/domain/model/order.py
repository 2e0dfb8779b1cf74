"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its lines.  Lines are never
addressed on their own: they are written together with their order and
removed together with it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from northwind.domain.exceptions import ValidationError
from northwind.domain.model.value_objects import Discount, Money, Quantity


@dataclass
class ShipAddress:
    """Where the order is shipped.  Every part is optional."""

    name: str | None = None
    address: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None


@dataclass
class OrderLine:
    """One product on an order, with the price captured at order time.

    ``order_id`` is the parent-reference.  It stays ``None`` until the
    repository inserts the parent row and stamps the generated id here.
    """

    product_id: int
    unit_price: Decimal  # locked at order-creation time
    quantity: int
    discount: float = 0.0
    order_id: int | None = None

    @staticmethod
    def create(
        product_id: int,
        unit_price: str | float | int | Decimal,
        quantity: int,
        discount: str | float | int = 0,
    ) -> OrderLine:
        """Build a new line, validating price, quantity and discount."""
        if isinstance(product_id, bool) or not isinstance(product_id, int) or product_id <= 0:
            raise ValidationError(f"Invalid product reference: {product_id!r}")
        return OrderLine(
            product_id=product_id,
            unit_price=Money.of(unit_price).amount,
            quantity=Quantity(quantity).value,
            discount=Discount.of(discount).value,
        )


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_id: str | None
    employee_id: int | None
    order_date: datetime
    required_date: datetime | None = None
    shipped_date: datetime | None = None
    ship_via: int | None = None
    freight: Decimal = Decimal("0")
    ship_to: ShipAddress = field(default_factory=ShipAddress)
    lines: list[OrderLine] = field(default_factory=list)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str | None,
        employee_id: int | None,
        order_date: datetime,
        lines: list[OrderLine],
        required_date: datetime | None = None,
        shipped_date: datetime | None = None,
        ship_via: int | None = None,
        freight: str | float | int | Decimal = Decimal("0"),
        ship_to: ShipAddress | None = None,
    ) -> Order:
        """Create a new, not yet persisted order."""
        if order_date is None:
            raise ValidationError("Order date is required")
        if required_date is not None and required_date < order_date:
            raise ValidationError("Required date cannot be before the order date")

        return Order(
            id=None,
            customer_id=customer_id,
            employee_id=employee_id,
            order_date=order_date,
            required_date=required_date,
            shipped_date=shipped_date,
            ship_via=ship_via,
            freight=Money.of(freight).amount,
            ship_to=ship_to or ShipAddress(),
            lines=list(lines),
        )

    # --- Identity -------------------------------------------------------------

    def assign_id(self, order_id: int) -> None:
        """Record the store-generated id on the aggregate and its lines.

        The id is assigned exactly once; re-assigning the same value is a
        no-op so a snapshot can be reconciled with the store.
        """
        if self.id is not None and self.id != order_id:
            raise ValidationError(
                f"Order already has id {self.id}, cannot reassign to {order_id}"
            )
        self.id = order_id
        for line in self.lines:
            line.order_id = order_id
