from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
from postgrest.exceptions import APIError

from ..core.exceptions import DataAccessError

logger = logging.getLogger(__name__)

# Postgres "invalid_text_representation", e.g. a malformed uuid in a filter.
INVALID_TEXT_REPRESENTATION = "22P02"


def execute(query, *, action: str):
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as e:
        logger.error("[supabase] %s failed: %s", action, e)
        raise DataAccessError(f"{action} failed") from e


def fetchone(query, *, action: str) -> Optional[Dict[str, Any]]:
    """Return the first row of a select, or None.

    A malformed identifier cannot match any row, so it is reported as a miss.
    """
    try:
        res = query.limit(1).execute()
    except APIError as e:
        if e.code == INVALID_TEXT_REPRESENTATION:
            return None
        logger.error("[supabase] %s failed: %s", action, e)
        raise DataAccessError(f"{action} failed") from e
    except httpx.HTTPError as e:
        logger.error("[supabase] %s failed: %s", action, e)
        raise DataAccessError(f"{action} failed") from e
    rows = res.data or []
    return rows[0] if rows else None


def fetchall(query, *, action: str) -> List[Dict[str, Any]]:
    res = execute(query, action=action)
    return list(res.data or [])


def fetch_counted(query, *, action: str) -> Tuple[List[Dict[str, Any]], int]:
    """Rows plus the exact total requested with ``select(..., count="exact")``."""
    res = execute(query, action=action)
    return list(res.data or []), int(res.count or 0)


def returning_row(query, *, action: str) -> Dict[str, Any]:
    """Run an insert/update and return the single row it produced."""
    rows = fetchall(query, action=action)
    if not rows:
        raise DataAccessError(f"{action} returned no row")
    return rows[0]
