"""
Pydantic schemas for article endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.validation import PG_INT_MAX, PG_INT_MIN


class VoteUpdate(BaseModel):
    # strict: "1" and true are not vote deltas.
    inc_votes: int = Field(..., strict=True, ge=PG_INT_MIN, le=PG_INT_MAX)
