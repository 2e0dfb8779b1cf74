"""Application service: Delete Order use case."""

from __future__ import annotations

from northwind.domain.repository.order_repository import OrderRepository


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> bool:
        """Delete the order and its lines. False if it did not exist."""
        return self._order_repo.delete(order_id)
