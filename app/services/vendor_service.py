"""
Vendor Service - registration, credential checks and login

Passwords are hashed with bcrypt before they reach the repository and are
never logged. Login failures raise one undifferentiated InvalidCredentials
so callers cannot probe which emails are registered.

Author: Marketplace Team
Date: 2026-10-19
"""
import logging

from app.core.errors import DuplicateEmail, InvalidCredentials
from app.core.security import PasswordHasher, TokenService
from app.repositories.vendor_repository import VendorRepository

logger = logging.getLogger(__name__)


class VendorService:
    """Credential lifecycle for vendors"""

    def __init__(
        self,
        repository: VendorRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self.repository = repository
        self.hasher = hasher
        self.tokens = tokens

    def register(self, name: str, email: str, password: str) -> str:
        """
        Create a vendor and return its id.

        Raises:
            DuplicateEmail: a vendor with this email already exists
        """
        if self.repository.find_by_email(email):
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmail()

        password_hash = self.hasher.hash(password)

        # A concurrent registration can still win between the check and the insert
        vendor = self.repository.create(name=name, email=email, password_hash=password_hash)
        if vendor is None:
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmail()

        logger.info(f"Vendor registered: {vendor.id}")
        return vendor.id

    def verify_credentials(self, email: str, password: str) -> str:
        """
        Return the id of the vendor owning these credentials.

        Raises:
            InvalidCredentials: unknown email or wrong password
        """
        vendor = self.repository.find_by_email(email)
        if vendor is None or not self.hasher.verify(password, vendor.password_hash):
            logger.info("Login rejected: invalid credentials")
            raise InvalidCredentials()
        return vendor.id

    def login(self, email: str, password: str) -> str:
        """Verify credentials and issue a bearer token"""
        vendor_id = self.verify_credentials(email, password)
        logger.info(f"Vendor logged in: {vendor_id}")
        return self.tokens.issue(vendor_id)
