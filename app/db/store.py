"""Single-table store accessors over the Supabase client.

Each helper issues exactly one PostgREST call and translates client
failures into the application error taxonomy: a unique violation becomes
``ConflictError``, a CHECK violation becomes ``ValidationError``, and any
other API or transport failure becomes a generic ``InternalError``.
"No matching row" is reported through the return
value (``None`` / ``False``) so that callers name the missing resource.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import httpx
from postgrest.exceptions import APIError

from app.core.constants import PG_CHECK_VIOLATION, PG_UNIQUE_VIOLATION
from app.core.errors import ConflictError, InternalError, ValidationError
from app.db.supabase import get_supabase

logger = logging.getLogger(__name__)

Row = dict[str, Any]
# (column, descending)
Ordering = Sequence[tuple[str, bool]]


@contextmanager
def _translate_errors(table: str, operation: str) -> Iterator[None]:
    try:
        yield
    except APIError as exc:
        if exc.code == PG_UNIQUE_VIOLATION:
            logger.info(
                "store_unique_violation",
                extra={"table": table, "operation": operation, "error_message": exc.message},
            )
            raise ConflictError("A record with the same unique value already exists") from exc
        if exc.code == PG_CHECK_VIOLATION:
            logger.info(
                "store_check_violation",
                extra={"table": table, "operation": operation, "error_message": exc.message},
            )
            raise ValidationError("Values violate a table constraint") from exc
        logger.error(
            "store_api_error",
            extra={"table": table, "operation": operation, "code": exc.code, "error_message": exc.message},
        )
        raise InternalError() from exc
    except httpx.HTTPError as exc:
        logger.error(
            "store_transport_error",
            extra={"table": table, "operation": operation, "error_message": str(exc)},
        )
        raise InternalError() from exc


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def select_rows(
    table: str,
    order: Ordering = (),
    filters: dict[str, Any] | None = None,
) -> list[Row]:
    """Return all rows of *table* matching equality *filters*, ordered."""
    with _translate_errors(table, "select"):
        query = get_supabase().table(table).select("*")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        for column, descending in order:
            query = query.order(column, desc=descending)
        result = query.execute()
    return list(result.data or [])


def select_first(table: str) -> Row | None:
    """Return the lowest-id row of *table* (used for singletons)."""
    with _translate_errors(table, "select"):
        result = (
            get_supabase()
            .table(table)
            .select("*")
            .order("id")
            .limit(1)
            .execute()
        )
    return result.data[0] if result.data else None


def select_one_by(table: str, column: str, value: Any) -> Row | None:
    with _translate_errors(table, "select"):
        result = (
            get_supabase()
            .table(table)
            .select("*")
            .eq(column, value)
            .limit(1)
            .execute()
        )
    return result.data[0] if result.data else None


def select_by_id(table: str, row_id: int) -> Row | None:
    return select_one_by(table, "id", row_id)


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def insert_row(table: str, payload: Row) -> Row:
    """Insert *payload* and return the stored row with its server fields."""
    with _translate_errors(table, "insert"):
        result = get_supabase().table(table).insert(payload).execute()
    if not result.data:
        logger.error("store_insert_returned_nothing", extra={"table": table})
        raise InternalError()
    return result.data[0]


def update_row(table: str, row_id: int, payload: Row) -> Row | None:
    """Update row *row_id* with *payload*; ``None`` if no such row."""
    with _translate_errors(table, "update"):
        result = (
            get_supabase()
            .table(table)
            .update(payload)
            .eq("id", row_id)
            .execute()
        )
    return result.data[0] if result.data else None


def delete_row(table: str, row_id: int) -> bool:
    """Delete row *row_id*; ``False`` if no such row."""
    with _translate_errors(table, "delete"):
        result = get_supabase().table(table).delete().eq("id", row_id).execute()
    return bool(result.data)


def count_rows(table: str) -> int:
    with _translate_errors(table, "count"):
        result = get_supabase().table(table).select("id", count="exact").limit(1).execute()
    if result.count is not None:
        return int(result.count)
    return len(result.data or [])
