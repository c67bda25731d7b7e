"""
Comment API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Response, status

from core import db

from . import schemas, service

router = APIRouter()


@router.get("/articles/{article_id}/comments")
async def get_article_comments(article_id: str, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    """
    List an article's comments, newest first.
    """
    comments = await service.list_comments(pool, article_id)
    return {"comments": comments}


@router.post("/articles/{article_id}/comments", status_code=status.HTTP_201_CREATED)
async def post_article_comment(
    article_id: str,
    request: schemas.CommentCreate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Add a comment to an article as an existing user.
    """
    comment = await service.add_comment(pool, article_id, request)
    return {"comment": comment}


@router.patch("/comments/{comment_id}")
async def patch_comment(
    comment_id: str,
    request: schemas.CommentVoteUpdate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Adjust a comment's votes by `inc_votes`.
    """
    comment = await service.vote_on_comment(pool, comment_id, inc_votes=request.inc_votes)
    return {"comment": comment}


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: str, pool: asyncpg.Pool = Depends(db.get_pool)) -> Response:
    """
    Delete a comment. Deleting it again is a 404.
    """
    await service.remove_comment(pool, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
