"""Category entity.

Categories group products.  Their names are unique across the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from northwind.domain.exceptions import ValidationError


@dataclass
class Category:

    id: int | None
    name: str
    description: str | None = None
    picture: bytes | None = None

    @staticmethod
    def create(
        name: str,
        description: str | None = None,
        picture: bytes | None = None,
    ) -> Category:
        return Category(
            id=None,
            name=_clean_name(name),
            description=description,
            picture=picture,
        )

    def rename(self, name: str) -> None:
        self.name = _clean_name(name)


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Category name is required")
    return name.strip()
