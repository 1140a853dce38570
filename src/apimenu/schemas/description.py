"""Models for the parts of an API description the tree builder reads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OperationRef(BaseModel):
    """An operation entry extended with where it was found.

    Unknown operation fields (``responses``, ``x-*`` extensions, ...) are kept
    as extra attributes so renderers still see the full operation.

    Attributes:
        path_name: The path template the operation lives under.
        http_verb: The lower-case HTTP method key.
        path_parameters: Parameters shared by every operation of the path item.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    path_name: str
    http_verb: str
    path_parameters: list[dict[str, Any]] = Field(default_factory=list)
    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    deprecated: bool = False
    parameters: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        """Identity of the operation: ``(path_name, http_verb)``."""
        return (self.path_name, self.http_verb)

    @property
    def extensions(self) -> dict[str, Any]:
        """Vendor extension fields declared on the operation."""
        extra = self.model_extra or {}
        return {key: value for key, value in extra.items() if key.startswith("x-")}


class TagInfo(BaseModel):
    """A tag with its declared metadata and the operations that carry it."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    description: str | None = None
    x_display_name: str | None = Field(default=None, alias="x-displayName")
    x_trait_tag: bool = Field(default=False, alias="x-traitTag")
    external_docs: dict[str, Any] | None = Field(default=None, alias="externalDocs")
    operations: list[OperationRef] = Field(default_factory=list)
    used: bool = False


class TagGroup(BaseModel):
    """An entry of the ``x-tagGroups`` vendor extension."""

    name: str
    tags: list[str] = Field(default_factory=list)
