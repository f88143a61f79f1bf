"""
PostgreSQL access for the marketplace backend

A Database instance is built from settings and handed to every repository.
Each `cursor()` block is one unit of work on its own connection: committed
when the block exits cleanly, rolled back on any exception.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2.extras import RealDictCursor

from app.core.errors import InternalError

logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS vendors (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT clock_timestamp()
);

CREATE TABLE IF NOT EXISTS products (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    name TEXT NOT NULL,
    price DOUBLE PRECISION NOT NULL CHECK (price >= 0),
    stock INTEGER NOT NULL CHECK (stock >= 0),
    vendor_id UUID NOT NULL REFERENCES vendors(id),
    created_at TIMESTAMPTZ NOT NULL DEFAULT clock_timestamp(),
    updated_at TIMESTAMPTZ
);

CREATE INDEX IF NOT EXISTS idx_products_vendor_created
    ON products (vendor_id, created_at);

CREATE TABLE IF NOT EXISTS orders (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    product_id UUID REFERENCES products(id) ON DELETE SET NULL,
    vendor_id UUID NOT NULL REFERENCES vendors(id),
    quantity INTEGER NOT NULL CHECK (quantity > 0),
    status TEXT NOT NULL DEFAULT 'pending' CHECK (status IN ('pending', 'shipped')),
    created_at TIMESTAMPTZ NOT NULL DEFAULT clock_timestamp()
);

CREATE INDEX IF NOT EXISTS idx_orders_vendor_created
    ON orders (vendor_id, created_at);
"""


class Database:
    """Connection factory bound to one DATABASE_URL"""

    def __init__(self, database_url: str, connect_timeout: int = 30):
        if not database_url:
            raise ValueError("DATABASE_URL is required")
        self.database_url = database_url
        self.connect_timeout = connect_timeout

    def connect(self):
        """Open a new psycopg2 connection returning rows as dicts"""
        return psycopg2.connect(
            self.database_url,
            cursor_factory=RealDictCursor,
            connect_timeout=self.connect_timeout,
        )

    @contextmanager
    def cursor(self) -> Iterator[RealDictCursor]:
        """
        Run one unit of work.

        Usage:
            with database.cursor() as cursor:
                cursor.execute("SELECT 1")

        Raises:
            InternalError: on any psycopg2 failure (connection or query)
        """
        try:
            conn = self.connect()
        except psycopg2.Error as e:
            logger.error(f"Database connection failed: {e}")
            raise InternalError() from e

        try:
            with conn.cursor() as cursor:
                yield cursor
            conn.commit()
        except psycopg2.Error as e:
            conn.rollback()
            logger.exception(f"Database error: {e.__class__.__name__}")
            raise InternalError() from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def create_schema(self) -> None:
        """Create tables and indexes if they do not exist yet"""
        with self.cursor() as cursor:
            cursor.execute(SCHEMA)
        logger.info("Database schema is up to date")

    def ping(self) -> bool:
        """True when a trivial query round-trips"""
        try:
            with self.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
            return True
        except InternalError:
            return False
