"""
Password hashing and bearer token signing

PasswordHasher wraps passlib's bcrypt context; TokenService issues and
verifies HS256 JWTs carrying the vendor id. Both are constructed from
settings and passed explicitly, never read from module globals.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.core.errors import InvalidToken

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted, slow one-way hashing for vendor passwords"""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """
        False for a mismatch and for an unusable stored hash.

        A candidate over MAX_PASSWORD_BYTES never matches.
        """
        if not password_hash:
            return False
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return False
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            logger.warning("Password could not be checked against the stored hash")
            return False


class TokenService:
    """Issues and verifies signed, time-bound vendor tokens"""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=24),
    ):
        if not secret:
            raise ValueError("JWT secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, vendor_id: str) -> str:
        """
        Sign a token for vendor_id.

        Payload:
        {
            "id": "<vendor id>",
            "sub": "<vendor id>",
            "iat": 1234567890,
            "exp": 1234654290
        }
        """
        now = datetime.now(timezone.utc)
        claims = {
            "id": vendor_id,
            "sub": vendor_id,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Return the vendor id carried by token.

        Raises:
            InvalidToken: bad signature, malformed token, missing claim or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError:
            raise InvalidToken("Token has expired")
        except JWTError:
            raise InvalidToken()

        vendor_id = payload.get("id") or payload.get("sub")
        if not vendor_id or not isinstance(vendor_id, str):
            raise InvalidToken("Invalid token payload")
        return vendor_id
