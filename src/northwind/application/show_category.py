"""Application service: category queries (list and show)."""

from __future__ import annotations

from northwind.application.dto import CategoryDTO
from northwind.domain.model.category import Category
from northwind.domain.repository.category_repository import CategoryRepository


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[CategoryDTO]:
        return [_to_dto(c) for c in self._category_repo.list_all()]


class ShowCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int) -> CategoryDTO | None:
        category = self._category_repo.get_by_id(category_id)
        return _to_dto(category) if category is not None else None


def _to_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(
        id=category.id,  # type: ignore[arg-type]
        name=category.name,
        description=category.description,
        picture=category.picture,
    )
