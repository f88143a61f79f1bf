"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Product and order repositories are bound to one owning vendor and filter
every query by it.

Author: Marketplace Team
Date: 2026-10-19
"""
from app.repositories.base import ScopedRepository
from app.repositories.vendor_repository import VendorRepository
from app.repositories.product_repository import ProductRepository
from app.repositories.order_repository import OrderRepository

__all__ = [
    'ScopedRepository',
    'VendorRepository',
    'ProductRepository',
    'OrderRepository',
]
