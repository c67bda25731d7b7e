"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db


async def select_comments_by_article_id(pool: asyncpg.Pool, article_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        pool,
        """
        SELECT comment_id, article_id, author, body, votes, created_at
        FROM comments
        WHERE article_id = $1
        ORDER BY created_at DESC, comment_id DESC
        """,
        article_id,
    )


async def insert_comment(
    pool: asyncpg.Pool,
    *,
    article_id: int,
    author: str,
    body: str,
) -> dict[str, Any]:
    """
    Foreign-key violations (unknown article / author) propagate to the classifier.
    """
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO comments (article_id, author, body)
        VALUES ($1, $2, $3)
        RETURNING comment_id, article_id, author, body, votes, created_at
        """,
        article_id,
        author,
        body,
    )
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row


async def update_comment_votes(
    pool: asyncpg.Pool,
    comment_id: int,
    *,
    inc_votes: int,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        pool,
        """
        UPDATE comments
        SET votes = GREATEST(votes + $2, 0)
        WHERE comment_id = $1
        RETURNING comment_id, article_id, author, body, votes, created_at
        """,
        comment_id,
        inc_votes,
    )


async def delete_comment(pool: asyncpg.Pool, comment_id: int) -> bool:
    row = await db.fetch_one(
        pool,
        """
        DELETE FROM comments
        WHERE comment_id = $1
        RETURNING comment_id
        """,
        comment_id,
    )
    return row is not None
