"""
Order Service - vendor-scoped orders

Author: Marketplace Team
Date: 2026-10-19
"""
import logging
from typing import Callable, List, Optional

from app.core.errors import NotFound
from app.domain.order import Order, OrderStatus
from app.repositories.order_repository import OrderRepository
from app.services.product_service import ProductNotFound

logger = logging.getLogger(__name__)

OrderRepositoryFactory = Callable[[str], OrderRepository]


class OrderNotFound(NotFound):
    message = "Order not found"


class OrderService:
    """Orders of the calling vendor, each with its product embedded"""

    def __init__(self, repositories: OrderRepositoryFactory):
        self._repositories = repositories

    def list(self, vendor_id: str, page: Optional[int] = None, limit: Optional[int] = None) -> List[Order]:
        """All of the vendor's orders, or one page when limit is given"""
        repository = self._repositories(vendor_id)
        if limit is None:
            return repository.find_page()
        page = page or 1
        return repository.find_page(limit=limit, offset=(page - 1) * limit)

    def record(self, vendor_id: str, product_id: str, quantity: int) -> Order:
        """
        Record a pending order for one of the vendor's own products.

        Raises:
            ProductNotFound: product missing or owned by someone else
        """
        order = self._repositories(vendor_id).create_for_product(product_id, quantity)
        if order is None:
            raise ProductNotFound()

        logger.info(f"Order {order.id} recorded for vendor {vendor_id}")
        return order

    def mark_shipped(self, vendor_id: str, order_id: str) -> Order:
        """Set status to shipped; re-shipping a shipped order is not an error"""
        order = self._repositories(vendor_id).set_status(order_id, OrderStatus.SHIPPED)
        if order is None:
            raise OrderNotFound()

        logger.info(f"Order {order.id} marked as shipped by vendor {vendor_id}")
        return order
