"""Pydantic models for the structure endpoint."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from apimenu.config import APIMENU_MAX_HEADING_LEVEL
from apimenu.loader import is_url
from apimenu.schemas import ContentNode


class StructureRequest(BaseModel):
    """Request model for the /api/structure endpoint.

    Attributes
    ----------
    source : str | None
        HTTP(S) URL of an API description.
    description : dict | None
        An inline, already parsed API description.
    max_heading_level : int
        Deepest markdown heading level that becomes a section.
    show_extensions : bool
        Include ``x-*`` operation extensions in the returned nodes.

    """

    source: str | None = Field(default=None, description="URL of the API description")
    description: dict[str, Any] | None = Field(default=None, description="Inline API description")
    max_heading_level: int = Field(
        default=APIMENU_MAX_HEADING_LEVEL,
        ge=1,
        le=6,
        description="Deepest heading level turned into a section",
    )
    show_extensions: bool = Field(default=False, description="Include operation vendor extensions")

    @field_validator("source")
    @classmethod
    def normalize_source(cls, v: str | None) -> str | None:
        """Strip ``source``, treat blank values as missing and require a URL."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not is_url(v):
            err = "source must be an http(s) URL"
            raise ValueError(err)
        return v

    @model_validator(mode="after")
    def check_one_input(self) -> StructureRequest:
        """Require exactly one of ``source`` and ``description``."""
        if (self.source is None) == (self.description is None):
            err = "Provide exactly one of 'source' or 'description'"
            raise ValueError(err)
        return self


class StructureSuccessResponse(BaseModel):
    """Success response model for the /api/structure endpoint.

    Attributes
    ----------
    title : str | None
        The API title.
    version : str | None
        The API version.
    security_scheme_prefix : str
        Id prefix under which security schemes are rendered.
    summary : str
        Node counts and other build facts.
    outline : str
        Indented text outline of the tree.
    items : list[ContentNode]
        The content tree.

    """

    title: str | None = Field(default=None, description="API title")
    version: str | None = Field(default=None, description="API version")
    security_scheme_prefix: str | None = Field(default=None, description="Security scheme id prefix")
    summary: str = Field(..., description="Build summary")
    outline: str = Field(..., description="Text outline of the content tree")
    items: list[ContentNode] = Field(default_factory=list, description="Content tree")


class StructureErrorResponse(BaseModel):
    """Error response model for the /api/structure endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


# Union type for API responses
StructureResponse = Union[StructureSuccessResponse, StructureErrorResponse]
