"""Application service: Update Order use case.

Only the order's own fields change; lines are fixed once the order has
been created.
"""

from __future__ import annotations

from northwind.application.dto import UpdateOrderDTO
from northwind.domain.exceptions import ValidationError
from northwind.domain.model.order import ShipAddress
from northwind.domain.model.value_objects import Money
from northwind.domain.repository.order_repository import OrderRepository


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, dto: UpdateOrderDTO) -> bool:
        """Overwrite the order's scalar fields.

        Returns False when the order does not exist (no write is attempted)
        and otherwise whatever the repository reports.
        """
        if dto.order_date is None:
            raise ValidationError("Order date is required")
        if dto.required_date is not None and dto.required_date < dto.order_date:
            raise ValidationError("Required date cannot be before the order date")
        freight = Money.of(dto.freight).amount

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return False

        order.customer_id = dto.customer_id
        order.employee_id = dto.employee_id
        order.order_date = dto.order_date
        order.required_date = dto.required_date
        order.shipped_date = dto.shipped_date
        order.ship_via = dto.ship_via
        order.freight = freight
        order.ship_to = ShipAddress(
            name=dto.ship_to.name,
            address=dto.ship_to.address,
            city=dto.ship_to.city,
            region=dto.ship_to.region,
            postal_code=dto.ship_to.postal_code,
            country=dto.ship_to.country,
        )
        return self._order_repo.update(order)
