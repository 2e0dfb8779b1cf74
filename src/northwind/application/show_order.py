"""Application service: order queries (list and show)."""

from __future__ import annotations

from northwind.application.dto import OrderDTO
from northwind.domain.model.order import Order
from northwind.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [to_order_dto(order) for order in self._order_repo.list_all()]


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO | None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return None
        return to_order_dto(order)


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        employee_id=order.employee_id,
        order_date=order.order_date,
        required_date=order.required_date,
        shipped_date=order.shipped_date,
        ship_via=order.ship_via,
        freight=order.freight,
        ship_name=order.ship_to.name,
        ship_address=order.ship_to.address,
        ship_city=order.ship_to.city,
        ship_region=order.ship_to.region,
        ship_postal_code=order.ship_to.postal_code,
        ship_country=order.ship_to.country,
    )
