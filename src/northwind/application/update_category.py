"""Application service: Update Category use case."""

from __future__ import annotations

from northwind.application.dto import CategoryInput
from northwind.domain.exceptions import ConflictError
from northwind.domain.repository.category_repository import CategoryRepository


class UpdateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int, dto: CategoryInput) -> bool:
        """Rewrite a category.

        Returns False if the category does not exist.  Raises ConflictError
        if *another* category already uses the requested name; keeping the
        category's own name is always allowed.
        """
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            return False

        category.rename(dto.name)
        existing = self._category_repo.get_by_name(category.name)
        if existing is not None and existing.id != category_id:
            raise ConflictError(f"Category '{category.name}' already exists")

        category.description = dto.description
        category.picture = dto.picture
        return self._category_repo.update(category)
