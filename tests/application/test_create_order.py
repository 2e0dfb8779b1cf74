"""Tests for the CreateOrder use case.

Uses in-memory fake repositories, no database.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from northwind.application.create_order import CreateOrderHandler
from northwind.application.dto import CreateOrderDTO, OrderLineSpec, ShipToDTO
from northwind.domain.exceptions import ValidationError
from tests.fakes import FakeOrderRepository


def _setup() -> tuple[CreateOrderHandler, FakeOrderRepository]:
    order_repo = FakeOrderRepository()
    return CreateOrderHandler(order_repo), order_repo


def _dto(*lines: OrderLineSpec, **overrides) -> CreateOrderDTO:
    fields = dict(
        customer_id="C1",
        employee_id=2,
        order_date=datetime(2024, 1, 1),
        freight="5.50",
        ship_to=ShipToDTO(name="Alfreds", city="Berlin", country="Germany"),
        lines=lines,
    )
    fields.update(overrides)
    return CreateOrderDTO(**fields)


class TestCreateOrderHappyPath:

    def test_returns_new_id(self):
        handler, _ = _setup()
        order_id = handler.handle(_dto(OrderLineSpec(10, "1.50", 2)))
        assert order_id == 1

    def test_copies_scalar_fields(self):
        handler, order_repo = _setup()
        order_id = handler.handle(_dto(OrderLineSpec(10, "1.50", 2)))

        saved = order_repo.get_by_id(order_id)
        assert saved.customer_id == "C1"
        assert saved.employee_id == 2
        assert saved.freight == Decimal("5.50")
        assert saved.ship_to.city == "Berlin"
        assert saved.ship_to.country == "Germany"

    def test_maps_every_line(self):
        handler, order_repo = _setup()
        order_id = handler.handle(_dto(
            OrderLineSpec(10, "1.50", 2),
            OrderLineSpec(11, "4.00", 1, "0.05"),
        ))

        saved = order_repo.get_by_id(order_id)
        assert [(l.product_id, l.unit_price, l.quantity) for l in saved.lines] == [
            (10, Decimal("1.50"), 2),
            (11, Decimal("4.00"), 1),
        ]
        assert saved.lines[1].discount == pytest.approx(0.05)
        assert all(line.order_id == order_id for line in saved.lines)

    def test_order_without_lines_is_accepted(self):
        handler, order_repo = _setup()
        order_id = handler.handle(_dto())
        assert order_repo.get_by_id(order_id).lines == []

    def test_sequential_ids(self):
        handler, _ = _setup()
        first = handler.handle(_dto())
        second = handler.handle(_dto())
        assert second == first + 1


class TestCreateOrderValidation:

    def test_zero_quantity_rejected_before_any_write(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(_dto(OrderLineSpec(10, "1.50", 0)))
        assert order_repo.writes == 0

    def test_negative_freight_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle(_dto(freight="-1"))
        assert order_repo.writes == 0

    def test_bad_discount_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="between 0 and 1"):
            handler.handle(_dto(OrderLineSpec(10, "1.50", 1, "2")))
