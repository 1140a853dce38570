"""Content tree models.

The tree is a list of ``ContentNode`` values, a union discriminated by
``kind``. Parents own their children; a child only records the id of its
parent.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

GroupType = Literal["section", "group", "tag"]


class GroupNode(BaseModel):
    """A navigable grouping: narrative section, tag group or tag."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["group"] = "group"
    type: GroupType
    id: str
    title: str
    description: str = ""
    depth: int = Field(..., ge=0)
    parent_id: str | None = None
    external_docs: dict[str, Any] | None = Field(default=None, alias="externalDocs")
    items: list["ContentNode"] = Field(default_factory=list)


class OperationNode(BaseModel):
    """A single API operation as it appears under a tag."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["operation"] = "operation"
    id: str
    title: str
    description: str = ""
    http_verb: str
    path: str
    operation_id: str | None = Field(default=None, alias="operationId")
    parameters: list[dict[str, Any]] = Field(default_factory=list)
    deprecated: bool = False
    tags: list[str] = Field(default_factory=list)
    depth: int = Field(..., ge=0)
    parent_id: str | None = None
    extensions: dict[str, Any] = Field(default_factory=dict)


ContentNode = Annotated[Union[GroupNode, OperationNode], Field(discriminator="kind")]

GroupNode.model_rebuild()
