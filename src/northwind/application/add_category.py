"""Application service: Add Category use case.

Category names are unique.  The check below runs before the write; the
store's UNIQUE constraint catches writers that race past it, and the
repository reports that case as the same ConflictError.
"""

from __future__ import annotations

import logging

from northwind.application.dto import CategoryInput
from northwind.domain.exceptions import ConflictError
from northwind.domain.model.category import Category
from northwind.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, dto: CategoryInput) -> int:
        category = Category.create(
            name=dto.name,
            description=dto.description,
            picture=dto.picture,
        )

        existing = self._category_repo.get_by_name(category.name)
        if existing is not None:
            logger.info("Rejected duplicate category name '%s'", category.name)
            raise ConflictError(f"Category '{category.name}' already exists")

        return self._category_repo.create(category)
