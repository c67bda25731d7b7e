"""
Topic API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db

from . import service

router = APIRouter()


@router.get("/topics")
async def get_topics(pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    """
    List every topic.
    """
    topics = await service.list_topics(pool)
    return {"topics": topics}
