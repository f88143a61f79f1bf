"""
Product Repository - Data Access Layer for Products

All product queries go through a repository bound to one vendor.

Author: Marketplace Team
Date: 2026-10-19
"""
from typing import Any, Dict, Optional

from app.domain.product import Product
from app.repositories.base import ScopedRepository, parse_record_id

PRODUCT_COLUMNS = "id, name, price, stock, vendor_id, created_at, updated_at"


class ProductRepository(ScopedRepository[Product]):
    """Products owned by a single vendor"""

    source = "products"
    select_list = PRODUCT_COLUMNS
    writable_columns = ("name", "price", "stock")

    def _map_row(self, row: dict) -> Product:
        return Product(
            id=str(row['id']),
            name=row['name'],
            price=row['price'],
            stock=row['stock'],
            vendor=str(row['vendor_id']),
            created_at=row['created_at'],
            updated_at=row.get('updated_at'),
        )

    def create(self, name: str, price: float, stock: int) -> Product:
        """Insert a product owned by this repository's vendor"""
        return self._fetch_one(
            f"""
            INSERT INTO products (name, price, stock, vendor_id)
            VALUES (%s, %s, %s, %s)
            RETURNING {PRODUCT_COLUMNS}
            """,
            [name, price, stock, self.owner_id],
        )

    def update(self, product_id: Any, changes: Dict[str, Any]) -> Optional[Product]:
        """
        Atomically apply changes to an owned product.

        Only name, price and stock can change; anything else (vendor included)
        is dropped. With nothing left to change this is a plain scoped lookup.

        Returns:
            The updated product, or None if no owned product matched
        """
        product_id = parse_record_id(product_id)
        if product_id is None:
            return None

        changes = {k: v for k, v in changes.items() if k in self.writable_columns}
        if not changes:
            return self.find_by_id(product_id)

        assignments = [f"{column} = %s" for column in changes]
        assignments.append("updated_at = NOW()")

        where, params = self._owned(["id = %s"], [product_id])
        return self._fetch_one(
            f"""
            UPDATE products
            SET {', '.join(assignments)}
            WHERE {where}
            RETURNING {PRODUCT_COLUMNS}
            """,
            list(changes.values()) + params,
        )

    def delete(self, product_id: Any) -> Optional[Product]:
        """
        Atomically remove an owned product.

        Returns:
            The removed product, or None if no owned product matched
        """
        product_id = parse_record_id(product_id)
        if product_id is None:
            return None

        where, params = self._owned(["id = %s"], [product_id])
        return self._fetch_one(
            f"DELETE FROM products WHERE {where} RETURNING {PRODUCT_COLUMNS}",
            params,
        )
