"""
Async database access helpers (raw SQL) using asyncpg.

The pool is owned by the app lifespan (see `api/main.py`): it is created on
startup, stored on `app.state.pool` and closed on shutdown. Request handlers
receive it through the `get_pool` dependency and pass it explicitly to every
repository function.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import Request

from . import config
from .errors import ServerError

logger = logging.getLogger(__name__)


async def create_pool() -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=config.database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
        command_timeout=config.command_timeout_s(),
    )
    logger.info(
        "db_pool_opened min_size=%s max_size=%s",
        config.pool_min_size(),
        config.pool_max_size(),
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def get_pool(request: Request) -> asyncpg.Pool:
    """
    FastAPI dependency returning the lifespan-scoped pool.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise ServerError(log_detail="DB pool is not initialized.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]

