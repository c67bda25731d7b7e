"""
Article API endpoints.

Path ids are taken as raw strings and parsed in the service so that a
non-numeric id is reported as 400 by our own validator.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Query

from core import db

from . import schemas, service

router = APIRouter()


@router.get("/articles")
async def get_articles(
    topic: str | None = Query(default=None, max_length=200),
    sort_by: str | None = Query(default=None, max_length=200),
    order: str | None = Query(default=None, max_length=20),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    List articles, optionally filtered by topic and sorted by any article column.
    """
    articles = await service.list_articles(pool, topic=topic, sort_by=sort_by, order=order)
    return {"articles": articles}


@router.get("/articles/{article_id}")
async def get_article(article_id: str, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    """
    Fetch one article, including its comment_count.
    """
    article = await service.get_article(pool, article_id)
    return {"article": article}


@router.patch("/articles/{article_id}")
async def patch_article(
    article_id: str,
    request: schemas.VoteUpdate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Adjust an article's votes by `inc_votes`.
    """
    article = await service.vote_on_article(pool, article_id, inc_votes=request.inc_votes)
    return {"article": article}
