"""
Product Service - vendor-scoped product catalog

Every operation takes the authenticated vendor id and works through a
repository bound to that vendor. Another vendor's product behaves exactly
like a missing one.

Author: Marketplace Team
Date: 2026-10-19
"""
import logging
from typing import Any, Callable, Dict, List

from app.core.errors import NotFound
from app.domain.product import Product
from app.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

ProductRepositoryFactory = Callable[[str], ProductRepository]


class ProductNotFound(NotFound):
    message = "Product not found"


class ProductService:
    """CRUD over the calling vendor's products"""

    def __init__(self, repositories: ProductRepositoryFactory):
        self._repositories = repositories

    def create(self, vendor_id: str, name: str, price: float, stock: int) -> Product:
        product = self._repositories(vendor_id).create(name=name, price=price, stock=stock)
        logger.info(f"Product {product.id} created by vendor {vendor_id}")
        return product

    def list(self, vendor_id: str, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> List[Product]:
        """
        One page of the vendor's products in insertion order.

        Args:
            page: 1-based page number
            limit: page size
        """
        page = page or DEFAULT_PAGE
        limit = limit or DEFAULT_LIMIT
        offset = (page - 1) * limit
        return self._repositories(vendor_id).find_page(limit=limit, offset=offset)

    def get(self, vendor_id: str, product_id: str) -> Product:
        product = self._repositories(vendor_id).find_by_id(product_id)
        if product is None:
            raise ProductNotFound()
        return product

    def update(self, vendor_id: str, product_id: str, patch: Dict[str, Any]) -> Product:
        """Apply a partial update; a vendor key in patch is ignored"""
        changes = {k: v for k, v in patch.items() if k not in ("vendor", "vendor_id")}
        product = self._repositories(vendor_id).update(product_id, changes)
        if product is None:
            raise ProductNotFound()

        logger.info(f"Product {product.id} updated by vendor {vendor_id}: {sorted(changes)}")
        return product

    def delete(self, vendor_id: str, product_id: str) -> None:
        product = self._repositories(vendor_id).delete(product_id)
        if product is None:
            raise ProductNotFound()

        logger.info(f"Product {product.id} deleted by vendor {vendor_id}")
