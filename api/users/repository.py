"""
User persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db


async def select_users(pool: asyncpg.Pool) -> list[dict[str, Any]]:
    return await db.fetch_all(
        pool,
        """
        SELECT username, name, avatar_url
        FROM users
        ORDER BY username ASC
        """,
    )


async def select_user_by_username(pool: asyncpg.Pool, username: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        pool,
        """
        SELECT username, name, avatar_url
        FROM users
        WHERE username = $1
        """,
        username,
    )
