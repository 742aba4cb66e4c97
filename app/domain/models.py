"""
Pydantic models for requests, responses, and internal data transfer.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

TITLE_MAX_LENGTH = 40


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_reject_blank)]


# ── Blog Post ─────────────────────────────────────────────────


class BlogPost(BaseModel):
    """A stored blog post. Response model for every /blog-posts endpoint."""

    id: int
    title: str
    text: str


class BlogPostCreate(BaseModel):
    """Request body for POST /blog-posts."""

    title: NonBlankStr = Field(..., max_length=TITLE_MAX_LENGTH)
    text: NonBlankStr


class BlogPostUpdate(BaseModel):
    """Request body for PUT /blog-posts/{id}. Only the text can change."""

    text: NonBlankStr
