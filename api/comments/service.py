"""
Comment business logic.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from articles import service as article_service
from core import validation
from core.errors import BadRequest, NotFound

from . import repository, schemas

logger = logging.getLogger(__name__)

NO_COMMENTS_MSG = "No comments found"


async def list_comments(pool: asyncpg.Pool, raw_article_id: str | int) -> list[dict[str, Any]]:
    article_id = validation.parse_id(raw_article_id)
    comments = await repository.select_comments_by_article_id(pool, article_id)
    if comments:
        return comments

    # Empty result: distinguish "no such article" from "article without comments".
    await article_service.ensure_article(pool, article_id)
    raise NotFound(NO_COMMENTS_MSG, log_detail=f"article_id {article_id} has no comments")


async def add_comment(
    pool: asyncpg.Pool,
    raw_article_id: str | int,
    payload: schemas.CommentCreate,
) -> dict[str, Any]:
    article_id = validation.parse_id(raw_article_id)
    author = validation.require_username(payload.username)
    body = payload.body
    if not body.strip():
        raise BadRequest(log_detail="empty comment body")

    comment = await repository.insert_comment(
        pool,
        article_id=article_id,
        author=author,
        body=body,
    )
    logger.info(
        "comment_created comment_id=%s article_id=%s author=%s",
        comment["comment_id"],
        article_id,
        author,
    )
    return comment


async def vote_on_comment(pool: asyncpg.Pool, raw_comment_id: str | int, *, inc_votes: int) -> dict[str, Any]:
    comment_id = validation.parse_id(raw_comment_id)
    comment = await repository.update_comment_votes(pool, comment_id, inc_votes=inc_votes)
    if comment is None:
        raise NotFound(log_detail=f"unknown comment_id {comment_id}")
    logger.info(
        "comment_votes_updated comment_id=%s inc_votes=%s votes=%s",
        comment_id,
        inc_votes,
        comment["votes"],
    )
    return comment


async def remove_comment(pool: asyncpg.Pool, raw_comment_id: str | int) -> None:
    comment_id = validation.parse_id(raw_comment_id)
    deleted = await repository.delete_comment(pool, comment_id)
    if not deleted:
        raise NotFound(log_detail=f"unknown comment_id {comment_id}")
    logger.info("comment_deleted comment_id=%s", comment_id)
