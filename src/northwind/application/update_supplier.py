"""Application service: Update Supplier use case."""

from __future__ import annotations

from dataclasses import asdict

from northwind.application.dto import SupplierInput
from northwind.domain.model.supplier import Supplier
from northwind.domain.repository.supplier_repository import SupplierRepository


class UpdateSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, supplier_id: int, dto: SupplierInput) -> bool:
        if self._supplier_repo.get_by_id(supplier_id) is None:
            return False
        supplier = Supplier.create(**asdict(dto))
        supplier.id = supplier_id
        return self._supplier_repo.update(supplier)
