"""Application service: Delete Supplier use case."""

from __future__ import annotations

from northwind.domain.repository.supplier_repository import SupplierRepository


class DeleteSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, supplier_id: int) -> bool:
        return self._supplier_repo.delete(supplier_id)
