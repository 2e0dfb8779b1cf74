"""Application service: Add Supplier use case."""

from __future__ import annotations

from dataclasses import asdict

from northwind.application.dto import SupplierInput
from northwind.domain.model.supplier import Supplier
from northwind.domain.repository.supplier_repository import SupplierRepository


class AddSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, dto: SupplierInput) -> int:
        supplier = Supplier.create(**asdict(dto))
        return self._supplier_repo.create(supplier)
