"""
Authentication gate for protected routes

Extracts the bearer token, verifies it and makes the vendor id available
to the route and to request.state. Any failure short-circuits the request
before the route handler runs.
"""
import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from app.core.errors import InvalidToken, MissingCredential
from app.core.security import TokenService

logger = logging.getLogger(__name__)


# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)


class AuthenticatedVendor(BaseModel):
    """Vendor identity resolved from a verified token"""
    id: str


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_current_vendor(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedVendor:
    """
    Dependency that resolves the calling vendor from its bearer token.

    Usage:
        @router.get("/protected")
        def protected_route(vendor: AuthenticatedVendor = Depends(get_current_vendor)):
            return {"vendor": vendor.id}
    """
    if not credentials or not credentials.credentials:
        logger.warning(f"Rejected {request.method} {request.url.path}: no bearer token")
        raise MissingCredential()

    try:
        vendor_id = tokens.verify(credentials.credentials)
    except InvalidToken as e:
        logger.warning(f"Rejected {request.method} {request.url.path}: {e.message}")
        raise

    request.state.vendor_id = vendor_id
    return AuthenticatedVendor(id=vendor_id)
