"""
FastAPI dependencies wiring services to the per-app database and secrets

Everything is read from app.state, which create_app fills from Settings.
Tests swap services out through app.dependency_overrides.
"""
from functools import partial

from fastapi import Depends, Request

from app.core.auth import get_token_service
from app.core.database import Database
from app.core.security import PasswordHasher, TokenService
from app.repositories.order_repository import OrderRepository
from app.repositories.product_repository import ProductRepository
from app.repositories.vendor_repository import VendorRepository
from app.services.order_service import OrderService
from app.services.product_service import ProductService
from app.services.vendor_service import VendorService


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_vendor_service(
    database: Database = Depends(get_database),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> VendorService:
    return VendorService(VendorRepository(database), hasher, tokens)


def get_product_service(database: Database = Depends(get_database)) -> ProductService:
    return ProductService(partial(ProductRepository, database))


def get_order_service(database: Database = Depends(get_database)) -> OrderService:
    return OrderService(partial(OrderRepository, database))
