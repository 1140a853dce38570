"""Build output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from apimenu.schemas.content import ContentNode


class StructureResult(BaseModel):
    """Final build output."""

    summary: str
    outline: str
    items: list[ContentNode] = Field(default_factory=list)
