"""
Article persistence (raw SQL).

`sort_by` / `order` are interpolated into ORDER BY, so callers must pass values
already checked against `core.validation.ARTICLE_SORT_COLUMNS` / `SORT_ORDERS`.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db

_SORT_EXPRESSIONS = {
    "article_id": "a.article_id",
    "title": "a.title",
    "topic": "a.topic",
    "author": "a.author",
    "body": "a.body",
    "votes": "a.votes",
    "created_at": "a.created_at",
    "comment_count": "comment_count",
}


async def select_articles(
    pool: asyncpg.Pool,
    *,
    topic: str | None = None,
    sort_by: str = "created_at",
    order: str = "DESC",
) -> list[dict[str, Any]]:
    sort_expression = _SORT_EXPRESSIONS[sort_by]
    direction = "ASC" if order == "ASC" else "DESC"
    return await db.fetch_all(
        pool,
        f"""
        SELECT
          a.article_id,
          a.title,
          a.topic,
          a.author,
          a.body,
          a.created_at,
          a.votes,
          COUNT(c.comment_id)::int AS comment_count
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        WHERE ($1::text IS NULL OR a.topic = $1::text)
        GROUP BY a.article_id
        ORDER BY {sort_expression} {direction}, a.article_id {direction}
        """,
        topic,
    )


async def select_article_by_id(pool: asyncpg.Pool, article_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        pool,
        """
        SELECT
          a.article_id,
          a.title,
          a.topic,
          a.author,
          a.body,
          a.created_at,
          a.votes,
          COUNT(c.comment_id)::int AS comment_count
        FROM articles a
        LEFT JOIN comments c ON c.article_id = a.article_id
        WHERE a.article_id = $1
        GROUP BY a.article_id
        """,
        article_id,
    )


async def update_article_votes(
    pool: asyncpg.Pool,
    article_id: int,
    *,
    inc_votes: int,
) -> dict[str, Any] | None:
    """
    Apply a vote delta; votes never drop below zero.
    """
    return await db.fetch_one(
        pool,
        """
        WITH updated AS (
            UPDATE articles
            SET votes = GREATEST(votes + $2, 0)
            WHERE article_id = $1
            RETURNING article_id, title, topic, author, body, created_at, votes
        )
        SELECT
          u.article_id,
          u.title,
          u.topic,
          u.author,
          u.body,
          u.created_at,
          u.votes,
          (SELECT count(*) FROM comments c WHERE c.article_id = u.article_id)::int AS comment_count
        FROM updated u
        """,
        article_id,
        inc_votes,
    )
