"""
Document store for sets.

``SetStore`` exposes the ``sets`` table as a small document
collection.  Documents are plain dictionaries shaped like the JSON the
API returns::

    {"_id": ..., "name": ..., "description": ...,
     "words": [{"_id": ..., "word": ..., "meaning": ...}],
     "createdAt": datetime}

The store performs no validation; that is the job of
``records.sets.SetRecord``.  Each call opens and closes its own
connection so concurrent requests never share a cursor.  Driver
errors are re‑raised as ``StoreError``.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from .config import settings
from .db import get_connection
from .errors import StoreError


logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value is matched literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SetStore:
    """Collection of set documents backed by SQLite.

    ``find`` matches ``name_filter`` as a substring of the set name
    using SQLite's ``LIKE``, which ignores case for ASCII letters only.
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    @staticmethod
    def new_id() -> str:
        """Return a fresh identifier for a set or an embedded word."""
        return uuid.uuid4().hex

    async def find(
        self,
        name_filter: Optional[str] = None,
        set_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Return raw documents in insertion order.

        Both filters are optional and combine with AND.  An empty
        ``name_filter`` is treated as no filter.
        """
        query = "SELECT * FROM sets"
        conditions: List[str] = []
        params: List[Any] = []
        if name_filter:
            conditions.append("name LIKE ? ESCAPE '\\'")
            params.append(f"%{_escape_like(name_filter)}%")
        if set_id is not None:
            conditions.append("id = ?")
            params.append(set_id)
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY rowid ASC"

        try:
            conn = get_connection(self.database_url)
        except sqlite3.Error as exc:
            raise StoreError(f"Could not open sets store: {exc}") from exc
        try:
            rows = conn.execute(query, params).fetchall()
            return [self._row_to_document(row) for row in rows]
        except (sqlite3.Error, ValueError) as exc:
            # ValueError covers malformed JSON or timestamps in a stored row
            raise StoreError(f"Could not read sets: {exc}") from exc
        finally:
            conn.close()

    async def insert(self, document: Dict[str, Any]) -> None:
        """Persist a new set document."""
        words_json = json.dumps(
            [
                {"_id": word["_id"], "word": word["word"], "meaning": word["meaning"]}
                for word in document["words"]
            ]
        )
        try:
            conn = get_connection(self.database_url)
        except sqlite3.Error as exc:
            raise StoreError(f"Could not open sets store: {exc}") from exc
        try:
            conn.execute(
                """
                INSERT INTO sets (id, name, description, words, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    document["_id"],
                    document["name"],
                    document["description"],
                    words_json,
                    document["createdAt"].isoformat(),
                ),
            )
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(f"Could not insert set {document['_id']}: {exc}") from exc
        finally:
            conn.close()
        logger.debug("Inserted set document %s", document["_id"])

    async def delete(self, set_id: str) -> bool:
        """Delete a set by identifier.

        Returns ``True`` if a document was removed, ``False`` otherwise.
        """
        try:
            conn = get_connection(self.database_url)
        except sqlite3.Error as exc:
            raise StoreError(f"Could not open sets store: {exc}") from exc
        try:
            cursor = conn.execute("DELETE FROM sets WHERE id = ?", (set_id,))
            affected = cursor.rowcount
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(f"Could not delete set {set_id}: {exc}") from exc
        finally:
            conn.close()
        return affected > 0

    @staticmethod
    def _row_to_document(row: sqlite3.Row) -> Dict[str, Any]:
        """Convert a database row to a set document."""
        return {
            "_id": row["id"],
            "name": row["name"],
            "description": row["description"],
            "words": json.loads(row["words"]),
            "createdAt": datetime.fromisoformat(row["created_at"]),
        }


def get_set_store() -> SetStore:
    """FastAPI dependency returning the store for the configured database."""
    return SetStore(settings.database_url)
