"""SQL implementation of OrderRepository.

Create and delete touch two tables and run inside a single transaction, so
a failure at any statement leaves the store exactly as it was.  Lines are
written after their parent (they need its generated id) and removed before
it (the parent-reference is a foreign key).
"""

from __future__ import annotations

import logging

from sqlalchemy import RowMapping, delete, insert, select, update

from northwind.domain.exceptions import ValidationError
from northwind.domain.model.order import Order, OrderLine, ShipAddress
from northwind.domain.repository.order_repository import OrderRepository
from northwind.infrastructure.database.schema import order_details, orders
from northwind.infrastructure.persistence.sql_base import SqlRepository

logger = logging.getLogger(__name__)


class SqlOrderRepository(SqlRepository, OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        with self._reading("List orders") as conn:
            rows = conn.execute(select(orders).order_by(orders.c.id)).mappings().all()
        return [self._to_order(row) for row in rows]

    def get_by_id(self, order_id: int) -> Order | None:
        stmt = (
            select(
                orders,
                order_details.c.product_id.label("line_product_id"),
                order_details.c.unit_price.label("line_unit_price"),
                order_details.c.quantity.label("line_quantity"),
                order_details.c.discount.label("line_discount"),
            )
            .select_from(
                orders.outerjoin(order_details, order_details.c.order_id == orders.c.id)
            )
            .where(orders.c.id == order_id)
            .order_by(order_details.c.id)
        )
        with self._reading(f"Get order #{order_id}") as conn:
            rows = conn.execute(stmt).mappings().all()

        if not rows:
            return None

        order = self._to_order(rows[0])
        order.lines = [
            OrderLine(
                product_id=row["line_product_id"],
                unit_price=row["line_unit_price"],
                quantity=row["line_quantity"],
                discount=row["line_discount"],
                order_id=order.id,
            )
            for row in rows
            if row["line_product_id"] is not None
        ]
        return order

    def create(self, order: Order) -> int:
        if order.id is not None:
            raise ValidationError(f"Order #{order.id} is already persisted")

        try:
            with self._unit_of_work("Create order") as conn:
                result = conn.execute(insert(orders).values(self._to_row(order)))
                order_id = result.inserted_primary_key[0]

                for line in order.lines:
                    line.order_id = order_id
                    conn.execute(
                        insert(order_details).values(
                            order_id=order_id,
                            product_id=line.product_id,
                            unit_price=line.unit_price,
                            quantity=line.quantity,
                            discount=line.discount,
                        )
                    )
        except BaseException:
            # The generated id was rolled back with everything else.
            for line in order.lines:
                line.order_id = None
            raise

        order.assign_id(order_id)
        logger.info("Created order #%s with %d line(s)", order_id, len(order.lines))
        return order_id

    def update(self, order: Order) -> bool:
        if order.id is None:
            return False

        with self._unit_of_work(f"Update order #{order.id}") as conn:
            result = conn.execute(
                update(orders).where(orders.c.id == order.id).values(self._to_row(order))
            )
        matched = result.rowcount > 0
        logger.debug("Update order #%s matched=%s", order.id, matched)
        return matched

    def delete(self, order_id: int) -> bool:
        with self._unit_of_work(f"Delete order #{order_id}") as conn:
            conn.execute(delete(order_details).where(order_details.c.order_id == order_id))
            result = conn.execute(delete(orders).where(orders.c.id == order_id))
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Deleted order #%s", order_id)
        return deleted

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(order: Order) -> dict:
        return {
            "customer_id": order.customer_id,
            "employee_id": order.employee_id,
            "order_date": order.order_date,
            "required_date": order.required_date,
            "shipped_date": order.shipped_date,
            "ship_via": order.ship_via,
            "freight": order.freight,
            "ship_name": order.ship_to.name,
            "ship_address": order.ship_to.address,
            "ship_city": order.ship_to.city,
            "ship_region": order.ship_to.region,
            "ship_postal_code": order.ship_to.postal_code,
            "ship_country": order.ship_to.country,
        }

    @staticmethod
    def _to_order(row: RowMapping) -> Order:
        return Order(
            id=row[orders.c.id],
            customer_id=row[orders.c.customer_id],
            employee_id=row[orders.c.employee_id],
            order_date=row[orders.c.order_date],
            required_date=row[orders.c.required_date],
            shipped_date=row[orders.c.shipped_date],
            ship_via=row[orders.c.ship_via],
            freight=row[orders.c.freight],
            ship_to=ShipAddress(
                name=row[orders.c.ship_name],
                address=row[orders.c.ship_address],
                city=row[orders.c.ship_city],
                region=row[orders.c.ship_region],
                postal_code=row[orders.c.ship_postal_code],
                country=row[orders.c.ship_country],
            ),
        )
