"""
Vendors API Endpoints
Registration and login; the only routes that skip the auth gate

Author: Marketplace Team
Date: 2026-10-19
"""
from fastapi import APIRouter, Depends, status

from app.api.deps import get_vendor_service
from app.domain.vendor import TokenResponse, VendorLogin, VendorRegister
from app.services.vendor_service import VendorService

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register_vendor(
    payload: VendorRegister,
    service: VendorService = Depends(get_vendor_service),
):
    """Register a new vendor"""
    vendor_id = service.register(payload.name, payload.email, payload.password)
    return {"message": "Vendor registered successfully", "id": vendor_id}


@router.post("/login", response_model=TokenResponse)
def login_vendor(
    payload: VendorLogin,
    service: VendorService = Depends(get_vendor_service),
):
    """Exchange email and password for a bearer token"""
    return TokenResponse(token=service.login(payload.email, payload.password))
