"""Application service: supplier queries (list and show)."""

from __future__ import annotations

from dataclasses import asdict

from northwind.application.dto import SupplierDTO
from northwind.domain.repository.supplier_repository import SupplierRepository


class ListSuppliersHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self) -> list[SupplierDTO]:
        return [SupplierDTO(**asdict(s)) for s in self._supplier_repo.list_all()]


class ShowSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, supplier_id: int) -> SupplierDTO | None:
        supplier = self._supplier_repo.get_by_id(supplier_id)
        return SupplierDTO(**asdict(supplier)) if supplier is not None else None
