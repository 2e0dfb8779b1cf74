"""Application service: Create Order use case.

Maps the inbound payload onto a new Order aggregate and hands it to the
repository, which writes the order and all of its lines in one
transaction.
"""

from __future__ import annotations

from northwind.application.dto import CreateOrderDTO
from northwind.domain.model.order import Order, OrderLine, ShipAddress
from northwind.domain.repository.order_repository import OrderRepository


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, dto: CreateOrderDTO) -> int:
        """Create a new order and return its store-assigned ID.

        Steps:
        1. Build OrderLines from the requested lines (validates each one).
        2. Let the Order factory validate the scalar fields.
        3. Persist order + lines atomically.
        """
        lines = [
            OrderLine.create(
                product_id=spec.product_id,
                unit_price=spec.unit_price,  # <-- price snapshot
                quantity=spec.quantity,
                discount=spec.discount,
            )
            for spec in dto.lines
        ]

        order = Order.create(
            customer_id=dto.customer_id,
            employee_id=dto.employee_id,
            order_date=dto.order_date,
            required_date=dto.required_date,
            shipped_date=dto.shipped_date,
            ship_via=dto.ship_via,
            freight=dto.freight,
            ship_to=ShipAddress(
                name=dto.ship_to.name,
                address=dto.ship_to.address,
                city=dto.ship_to.city,
                region=dto.ship_to.region,
                postal_code=dto.ship_to.postal_code,
                country=dto.ship_to.country,
            ),
            lines=lines,
        )
        return self._order_repo.create(order)
