"""Supplier entity."""

from __future__ import annotations

from dataclasses import dataclass

from northwind.domain.exceptions import ValidationError


@dataclass
class Supplier:

    id: int | None
    company_name: str
    contact_name: str | None = None
    contact_title: str | None = None
    address: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone: str | None = None
    fax: str | None = None
    home_page: str | None = None

    @staticmethod
    def create(company_name: str, **fields) -> Supplier:
        if not company_name or not company_name.strip():
            raise ValidationError("Company name is required")
        return Supplier(id=None, company_name=company_name.strip(), **fields)
