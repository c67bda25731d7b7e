"""
Topic business logic.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from . import repository


async def list_topics(pool: asyncpg.Pool) -> list[dict[str, Any]]:
    return await repository.select_topics(pool)
