"""
Error taxonomy for the marketplace backend

Services raise these exceptions; the handlers registered in app.main turn
each one into a fixed status code and a client-safe message.
"""
from typing import Dict, Optional

from fastapi import status


class MarketplaceError(Exception):
    """Base class for every error that maps to an HTTP response"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error, please try again later"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(MarketplaceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class DuplicateEmail(MarketplaceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already exists"


class InvalidCredentials(MarketplaceError):
    """Raised for an unknown email and for a wrong password alike"""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid email or password"


class MissingCredential(MarketplaceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidToken(MarketplaceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid or expired token"
    headers = {"WWW-Authenticate": "Bearer"}


class NotFound(MarketplaceError):
    """
    Record absent, or owned by another vendor.

    The two cases are deliberately indistinguishable to the caller.
    """

    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InternalError(MarketplaceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error, please try again later"
