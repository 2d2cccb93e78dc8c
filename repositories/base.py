"""
repositories/base.py
--------------------
Shared execution helper for the repositories.
Borrows a pooled connection, runs one statement, and always releases it.
"""

from typing import Optional, Sequence

import psycopg2

from db.connection import dict_cursor, get_connection, release_connection
from utils.exceptions import QueryFailedError
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """Base class providing one-round-trip query execution."""

    def _fetch_one(self, operation: str, sql: str, params: Sequence, commit: bool = False) -> Optional[dict]:
        """
        Execute a statement and return its first row as a dict, or None.

        Args:
            operation: Short description used in logs and errors.
            sql: Parameterized SQL using %s placeholders.
            params: Values bound to the placeholders, in order.
            commit: Commit after executing (for INSERT/UPDATE).

        Raises:
            QueryFailedError: If the driver reports an error.
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            if commit:
                conn.commit()
            return dict(row) if row else None
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to {operation}: {e}")
            raise QueryFailedError(operation, e) from e
        finally:
            release_connection(conn)

    def _fetch_all(self, operation: str, sql: str, params: Sequence) -> list[dict]:
        """Execute a read-only statement and return every row as a dict."""
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, params)
                return [dict(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to {operation}: {e}")
            raise QueryFailedError(operation, e) from e
        finally:
            release_connection(conn)
