"""
Vendor Domain Models

A vendor is a tenant: it owns products and, through them, orders.

Author: Marketplace Team
Date: 2026-10-19
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.core.security import MAX_PASSWORD_BYTES


def _normalize_email(value: str) -> str:
    return value.strip().lower()


class Vendor(BaseModel):
    """
    Vendor domain model - a registered tenant

    Fields:
        id: Store-generated vendor ID
        name: Display name
        email: Login handle, unique across vendors
        password_hash: bcrypt hash (never serialized)
        created_at: Registration timestamp
    """

    id: str = Field(..., description="Vendor ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email")
    password_hash: str = Field(..., description="bcrypt hash", exclude=True, repr=False)
    created_at: datetime = Field(..., description="Registration timestamp")

    model_config = ConfigDict(from_attributes=True)


class VendorRegister(BaseModel):
    """Schema for registering a new vendor"""

    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("email", mode="after")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        if "\x00" in v:
            raise ValueError("password must not contain NUL characters")
        return v


class VendorLogin(BaseModel):
    """Schema for logging in"""

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class TokenResponse(BaseModel):
    token: str
