"""Markdown heading models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MarkdownHeading(BaseModel):
    """A heading extracted from narrative markdown."""

    title: str
    id: str
    level: int = Field(..., ge=1, le=6)
    description: str = ""
    items: list["MarkdownHeading"] = Field(default_factory=list)
