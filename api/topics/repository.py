"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db


async def select_topics(pool: asyncpg.Pool) -> list[dict[str, Any]]:
    return await db.fetch_all(
        pool,
        """
        SELECT slug, description
        FROM topics
        ORDER BY slug ASC
        """,
    )

