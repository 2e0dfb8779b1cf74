"""Abstract repository for the Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The repository owns the transaction boundary: every
method is a complete unit of work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from northwind.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, without lines."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its lines, or None if not found."""

    @abstractmethod
    def create(self, order: Order) -> int:
        """Persist a new order and its lines atomically; return the new id.

        On return ``order.id`` and every ``line.order_id`` hold the new id.
        """

    @abstractmethod
    def update(self, order: Order) -> bool:
        """Rewrite the order's scalar fields. False if no row matched."""

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Delete an order and its lines atomically. False if it did not exist."""
