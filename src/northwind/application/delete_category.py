"""Application service: Delete Category use case."""

from __future__ import annotations

from northwind.domain.repository.category_repository import CategoryRepository


class DeleteCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int) -> bool:
        return self._category_repo.delete(category_id)
