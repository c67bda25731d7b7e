"""
Pydantic schemas for comment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from articles.schemas import VoteUpdate


class CommentCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=200)
    body: str = Field(..., min_length=1)


class CommentVoteUpdate(VoteUpdate):
    """
    Same body as article votes: {"inc_votes": <int>}.
    """
