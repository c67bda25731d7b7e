"""
Article business logic.

Query-string rules for GET /api/articles:
- sort_by must be a known column, order must be asc/desc (400 otherwise)
- a numeric-looking topic is malformed (400)
- a slug-looking topic that matches no article is missing (404)
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import validation
from core.errors import NotFound

from . import repository

logger = logging.getLogger(__name__)


async def list_articles(
    pool: asyncpg.Pool,
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> list[dict[str, Any]]:
    checked_sort_by = validation.require_sort_by(sort_by)
    checked_order = validation.require_order(order)
    checked_topic = validation.require_topic_filter(topic)

    articles = await repository.select_articles(
        pool,
        topic=checked_topic,
        sort_by=checked_sort_by,
        order=checked_order,
    )
    if checked_topic is not None and not articles:
        raise NotFound(log_detail=f"no articles for topic {checked_topic!r}")
    return articles


async def get_article(pool: asyncpg.Pool, raw_article_id: str | int) -> dict[str, Any]:
    article_id = validation.parse_id(raw_article_id)
    article = await repository.select_article_by_id(pool, article_id)
    if article is None:
        raise NotFound(log_detail=f"unknown article_id {article_id}")
    return article


async def ensure_article(pool: asyncpg.Pool, article_id: int) -> None:
    if await repository.select_article_by_id(pool, article_id) is None:
        raise NotFound(log_detail=f"unknown article_id {article_id}")


async def vote_on_article(pool: asyncpg.Pool, raw_article_id: str | int, *, inc_votes: int) -> dict[str, Any]:
    article_id = validation.parse_id(raw_article_id)
    article = await repository.update_article_votes(pool, article_id, inc_votes=inc_votes)
    if article is None:
        raise NotFound(log_detail=f"unknown article_id {article_id}")
    logger.info(
        "article_votes_updated article_id=%s inc_votes=%s votes=%s",
        article_id,
        inc_votes,
        article["votes"],
    )
    return article
