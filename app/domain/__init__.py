"""
Domain Layer - Business Entities

Pydantic models for vendors, products and orders, plus the request
schemas that validate client input before any service runs.

Author: Marketplace Team
Date: 2026-10-19
"""
from app.domain.vendor import Vendor, VendorRegister, VendorLogin, TokenResponse
from app.domain.product import Product, ProductCreate, ProductUpdate
from app.domain.order import Order, OrderCreate, OrderStatus

__all__ = [
    'Vendor',
    'VendorRegister',
    'VendorLogin',
    'TokenResponse',
    'Product',
    'ProductCreate',
    'ProductUpdate',
    'Order',
    'OrderCreate',
    'OrderStatus',
]
