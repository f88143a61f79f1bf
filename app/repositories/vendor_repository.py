"""
Vendor Repository - credential storage

Vendors are the owners themselves, so this repository is not owner-scoped.

Author: Marketplace Team
Date: 2026-10-19
"""
from typing import Optional

from app.core.database import Database
from app.domain.vendor import Vendor

VENDOR_COLUMNS = "id, name, email, password_hash, created_at"


class VendorRepository:
    """Repository for Vendor records"""

    def __init__(self, database: Database):
        self.database = database

    @staticmethod
    def _map_row_to_vendor(row: dict) -> Vendor:
        return Vendor(
            id=str(row['id']),
            name=row['name'],
            email=row['email'],
            password_hash=row['password_hash'],
            created_at=row['created_at'],
        )

    def find_by_email(self, email: str) -> Optional[Vendor]:
        with self.database.cursor() as cursor:
            cursor.execute(
                f"SELECT {VENDOR_COLUMNS} FROM vendors WHERE email = %s",
                (email,),
            )
            row = cursor.fetchone()

        return self._map_row_to_vendor(row) if row else None

    def create(self, name: str, email: str, password_hash: str) -> Optional[Vendor]:
        """
        Insert a vendor.

        Returns:
            The new vendor, or None if the email is already taken
        """
        with self.database.cursor() as cursor:
            cursor.execute(
                f"""
                INSERT INTO vendors (name, email, password_hash)
                VALUES (%s, %s, %s)
                ON CONFLICT (email) DO NOTHING
                RETURNING {VENDOR_COLUMNS}
                """,
                (name, email, password_hash),
            )
            row = cursor.fetchone()

        return self._map_row_to_vendor(row) if row else None
