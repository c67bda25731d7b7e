"""
Request validators.

Everything here runs before any query and raises `BadRequest` for malformed
input. Whether a well-formed value actually exists is the service's concern
(`NotFound`), never the validator's.
"""

from __future__ import annotations

import re

from .errors import BadRequest

# PostgreSQL `integer` range; anything outside would be rejected by the database.
PG_INT_MIN = -(2**31)
PG_INT_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_NUMERIC_PATTERN = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")

ARTICLE_SORT_COLUMNS = (
    "article_id",
    "title",
    "topic",
    "author",
    "body",
    "votes",
    "created_at",
    "comment_count",
)
DEFAULT_SORT_BY = "created_at"
SORT_ORDERS = ("ASC", "DESC")
DEFAULT_ORDER = "DESC"


def _looks_numeric(raw: str) -> bool:
    return _NUMERIC_PATTERN.fullmatch(raw) is not None


def parse_id(raw: str | int) -> int:
    if isinstance(raw, bool):
        raise BadRequest(log_detail=f"invalid id {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw if raw is not None else "")
        if _INT_PATTERN.fullmatch(text) is None:
            raise BadRequest(log_detail=f"invalid id {raw!r}")
        value = int(text)
    if not PG_INT_MIN <= value <= PG_INT_MAX:
        raise BadRequest(log_detail=f"id out of range {raw!r}")
    return value


def require_username(raw: str | None) -> str:
    username = raw or ""
    # Surrounding whitespace is malformed, not something to normalise away.
    if not username or username != username.strip() or _looks_numeric(username):
        raise BadRequest(log_detail=f"invalid username {raw!r}")
    return username


def require_topic_filter(raw: str | None) -> str | None:
    """
    Numeric-looking slugs (`1234`) are malformed; anything else is a candidate
    slug that may still turn out not to exist.
    """
    if not raw:
        return None
    if raw != raw.strip() or _looks_numeric(raw):
        raise BadRequest(log_detail=f"invalid topic {raw!r}")
    return raw


def require_sort_by(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return DEFAULT_SORT_BY
    sort_by = raw.strip()
    if sort_by not in ARTICLE_SORT_COLUMNS:
        raise BadRequest(log_detail=f"invalid sort_by {raw!r}")
    return sort_by


def require_order(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return DEFAULT_ORDER
    order = raw.strip().upper()
    if order not in SORT_ORDERS:
        raise BadRequest(log_detail=f"invalid order {raw!r}")
    return order

