"""Abstract repository for Supplier."""

from __future__ import annotations

from abc import ABC, abstractmethod

from northwind.domain.model.supplier import Supplier


class SupplierRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Supplier]:
        ...

    @abstractmethod
    def get_by_id(self, supplier_id: int) -> Supplier | None:
        ...

    @abstractmethod
    def create(self, supplier: Supplier) -> int:
        ...

    @abstractmethod
    def update(self, supplier: Supplier) -> bool:
        ...

    @abstractmethod
    def delete(self, supplier_id: int) -> bool:
        ...
