"""
Scoped Repository - owner-filtered data access

Every query a ScopedRepository issues carries `<owner column> = <owner>`, so a
service holding one can only ever see or touch its owner's records.
Subclasses build their writes on `_owned()` as well, and keep each
single-record mutation to one statement (UPDATE/DELETE ... RETURNING) so
there is no read-then-write window between the ownership check and the write.

Author: Marketplace Team
Date: 2026-10-19
"""
import uuid
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel

from app.core.database import Database

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_record_id(value: Any) -> Optional[str]:
    """Canonical UUID string, or None when value cannot be a record id"""
    if value is None:
        return None
    try:
        return str(uuid.UUID(str(value)))
    except (ValueError, AttributeError, TypeError):
        return None


class ScopedRepository(Generic[ModelT]):
    """
    Base repository bound to one owning vendor

    Subclasses declare:
        source: FROM clause (table, optionally with joins)
        select_list: columns returned by every read
        id_column / owner_column: qualified as needed by source
        order_by: insertion order
    and implement `_map_row` to build the domain model.
    """

    source: str = ""
    select_list: str = "*"
    id_column: str = "id"
    owner_column: str = "vendor_id"
    order_by: str = "created_at, id"

    def __init__(self, database: Database, owner_id: str):
        if not owner_id:
            raise ValueError("owner_id is required")
        self.database = database
        self.owner_id = owner_id

    def _map_row(self, row: dict) -> ModelT:
        raise NotImplementedError

    def _owned(self, conditions: Sequence[str] = (), params: Sequence[Any] = ()) -> Tuple[str, List[Any]]:
        """WHERE clause with the owner filter always first"""
        clauses = [f"{self.owner_column} = %s", *conditions]
        return " AND ".join(clauses), [self.owner_id, *params]

    def _fetch_one(self, query: str, params: Sequence[Any]) -> Optional[ModelT]:
        with self.database.cursor() as cursor:
            cursor.execute(query, list(params))
            row = cursor.fetchone()
        return self._map_row(row) if row else None

    def _fetch_all(self, query: str, params: Sequence[Any]) -> List[ModelT]:
        with self.database.cursor() as cursor:
            cursor.execute(query, list(params))
            rows = cursor.fetchall()
        return [self._map_row(row) for row in rows]

    def find_by_id(self, record_id: Any) -> Optional[ModelT]:
        """Record with this id owned by this repository's vendor, else None"""
        record_id = parse_record_id(record_id)
        if record_id is None:
            return None

        where, params = self._owned([f"{self.id_column} = %s"], [record_id])
        return self._fetch_one(
            f"SELECT {self.select_list} FROM {self.source} WHERE {where}",
            params,
        )

    def find_page(self, limit: Optional[int] = None, offset: int = 0) -> List[ModelT]:
        """Owned records in insertion order; all of them when limit is None"""
        where, params = self._owned()
        query = f"""
            SELECT {self.select_list}
            FROM {self.source}
            WHERE {where}
            ORDER BY {self.order_by}
        """
        if limit is not None:
            query += " LIMIT %s OFFSET %s"
            params += [limit, offset]

        return self._fetch_all(query, params)
