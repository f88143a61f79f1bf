"""
Orders API Endpoints
Lists and ships the authenticated vendor's orders

Author: Marketplace Team
Date: 2026-10-19
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_order_service
from app.core.auth import AuthenticatedVendor, get_current_vendor
from app.domain.order import Order, OrderCreate
from app.services.order_service import OrderService

router = APIRouter()


@router.get("", response_model=List[Order])
def list_orders(
    page: Optional[int] = Query(None, ge=1, description="1-based page number"),
    limit: Optional[int] = Query(None, ge=1, description="Page size; all orders when omitted"),
    vendor: AuthenticatedVendor = Depends(get_current_vendor),
    service: OrderService = Depends(get_order_service),
):
    """List the caller's orders with their products embedded"""
    return service.list(vendor.id, page=page, limit=limit)


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
def record_order(
    payload: OrderCreate,
    vendor: AuthenticatedVendor = Depends(get_current_vendor),
    service: OrderService = Depends(get_order_service),
):
    """Record a pending order against one of the caller's products"""
    return service.record(vendor.id, payload.product, payload.quantity)


@router.put("/{order_id}", response_model=Order)
def mark_order_shipped(
    order_id: str,
    vendor: AuthenticatedVendor = Depends(get_current_vendor),
    service: OrderService = Depends(get_order_service),
):
    """Mark one of the caller's orders as shipped"""
    return service.mark_shipped(vendor.id, order_id)
