"""
User business logic.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import validation
from core.errors import NotFound

from . import repository


async def list_users(pool: asyncpg.Pool) -> list[dict[str, Any]]:
    return await repository.select_users(pool)


async def get_user(pool: asyncpg.Pool, raw_username: str) -> dict[str, Any]:
    username = validation.require_username(raw_username)
    user = await repository.select_user_by_username(pool, username)
    if user is None:
        raise NotFound(log_detail=f"unknown username {username!r}")
    return user
