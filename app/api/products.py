"""
Products API Endpoints
CRUD over the authenticated vendor's products

The vendor always comes from the bearer token; a vendor field in the
request body is ignored.

Author: Marketplace Team
Date: 2026-10-19
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_product_service
from app.core.auth import AuthenticatedVendor, get_current_vendor
from app.domain.product import Product, ProductCreate, ProductUpdate
from app.services.product_service import DEFAULT_LIMIT, DEFAULT_PAGE, ProductService

router = APIRouter()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    vendor: AuthenticatedVendor = Depends(get_current_vendor),
    service: ProductService = Depends(get_product_service),
):
    """Add a product to the caller's catalog"""
    return service.create(vendor.id, payload.name, payload.price, payload.stock)


@router.get("", response_model=List[Product])
def list_products(
    page: int = Query(DEFAULT_PAGE, ge=1, description="1-based page number"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, description="Page size"),
    vendor: AuthenticatedVendor = Depends(get_current_vendor),
    service: ProductService = Depends(get_product_service),
):
    """List the caller's products, one page at a time"""
    return service.list(vendor.id, page=page, limit=limit)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    vendor: AuthenticatedVendor = Depends(get_current_vendor),
    service: ProductService = Depends(get_product_service),
):
    return service.get(vendor.id, product_id)


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    vendor: AuthenticatedVendor = Depends(get_current_vendor),
    service: ProductService = Depends(get_product_service),
):
    """Partially update one of the caller's products"""
    return service.update(vendor.id, product_id, payload.changes())


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    vendor: AuthenticatedVendor = Depends(get_current_vendor),
    service: ProductService = Depends(get_product_service),
):
    service.delete(vendor.id, product_id)
    return {"message": "Product deleted successfully"}
