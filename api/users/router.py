"""
User API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db

from . import service

router = APIRouter()


@router.get("/users")
async def get_users(pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    """
    List every user.
    """
    users = await service.list_users(pool)
    return {"users": users}


@router.get("/users/{username}")
async def get_user(username: str, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    """
    Fetch one user by username.
    """
    user = await service.get_user(pool, username)
    return {"user": user}
