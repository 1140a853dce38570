"""Shared schemas for apimenu."""

from apimenu.schemas.content import ContentNode, GroupNode, OperationNode
from apimenu.schemas.description import OperationRef, TagGroup, TagInfo
from apimenu.schemas.headings import MarkdownHeading
from apimenu.schemas.result import StructureResult

__all__ = [
    "ContentNode",
    "GroupNode",
    "MarkdownHeading",
    "OperationNode",
    "OperationRef",
    "StructureResult",
    "TagGroup",
    "TagInfo",
]
