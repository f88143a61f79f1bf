"""
Order Repository - Data Access Layer for Orders

Orders store their owning vendor directly (copied from the product when the
order is recorded), so every query here filters on orders.vendor_id and
keeps working after the product itself is deleted.

Author: Marketplace Team
Date: 2026-10-19
"""
from typing import Any, Optional

from app.domain.order import Order, OrderStatus
from app.domain.product import Product
from app.repositories.base import ScopedRepository, parse_record_id


# Order columns plus the embedded product, prefixed to avoid name clashes
ORDER_WITH_PRODUCT = """
    o.id, o.product_id, o.vendor_id, o.quantity, o.status, o.created_at,
    p.id AS product_ref, p.name AS product_name, p.price AS product_price,
    p.stock AS product_stock, p.vendor_id AS product_vendor_id,
    p.created_at AS product_created_at, p.updated_at AS product_updated_at
"""


class OrderRepository(ScopedRepository[Order]):
    """Orders owned by a single vendor, each returned with its product"""

    source = "orders o LEFT JOIN products p ON p.id = o.product_id"
    select_list = ORDER_WITH_PRODUCT
    id_column = "o.id"
    owner_column = "o.vendor_id"
    order_by = "o.created_at, o.id"

    def _map_row(self, row: dict) -> Order:
        product = None
        if row.get('product_ref') is not None:
            product = Product(
                id=str(row['product_ref']),
                name=row['product_name'],
                price=row['product_price'],
                stock=row['product_stock'],
                vendor=str(row['product_vendor_id']),
                created_at=row['product_created_at'],
                updated_at=row.get('product_updated_at'),
            )

        return Order(
            id=str(row['id']),
            product=product,
            quantity=row['quantity'],
            status=row['status'],
            vendor=str(row['vendor_id']),
            created_at=row['created_at'],
        )

    def set_status(self, order_id: Any, status: OrderStatus) -> Optional[Order]:
        """
        Atomically set the status of an owned order.

        Returns:
            The updated order with its product, or None if no owned order matched
        """
        order_id = parse_record_id(order_id)
        if order_id is None:
            return None

        where, params = self._owned(["o.id = %s"], [order_id])
        return self._fetch_one(
            f"""
            WITH o AS (
                UPDATE orders o
                SET status = %s
                WHERE {where}
                RETURNING o.*
            )
            SELECT {ORDER_WITH_PRODUCT}
            FROM o
            LEFT JOIN products p ON p.id = o.product_id
            """,
            [OrderStatus(status).value] + params,
        )

    def create_for_product(self, product_id: Any, quantity: int) -> Optional[Order]:
        """
        Record a pending order for one of this vendor's products.

        The order's vendor is copied from the product in the same statement.

        Returns:
            The new order, or None if the product is missing or not owned
        """
        product_id = parse_record_id(product_id)
        if product_id is None:
            return None

        return self._fetch_one(
            f"""
            WITH o AS (
                INSERT INTO orders (product_id, vendor_id, quantity, status)
                SELECT p.id, p.vendor_id, %s, %s
                FROM products p
                WHERE p.id = %s AND p.vendor_id = %s
                RETURNING *
            )
            SELECT {ORDER_WITH_PRODUCT}
            FROM o
            LEFT JOIN products p ON p.id = o.product_id
            """,
            [quantity, OrderStatus.PENDING.value, product_id, self.owner_id],
        )
