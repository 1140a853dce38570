"""Factories for content tree nodes."""

from __future__ import annotations

from typing import Any

from apimenu.context import BuildOptions
from apimenu.ids import escape_pointer_token, join_id, slugify
from apimenu.schemas import GroupNode, MarkdownHeading, OperationNode, OperationRef, TagGroup, TagInfo


def section_group(heading: MarkdownHeading, *, parent_id: str | None, depth: int) -> GroupNode:
    """Create a ``section`` group for a narrative heading (without children)."""
    return GroupNode(
        type="section",
        id=heading.id,
        title=heading.title,
        description=heading.description,
        depth=depth,
        parent_id=parent_id,
    )


def tag_group_group(group: TagGroup, *, depth: int) -> GroupNode:
    """Create a ``group`` node for an ``x-tagGroups`` entry."""
    return GroupNode(
        type="group",
        id=f"group/{slugify(group.name)}",
        title=group.name,
        depth=depth,
    )


def tag_group(tag: TagInfo, *, parent_id: str | None, depth: int) -> GroupNode:
    """Create a ``tag`` node. ``x-displayName`` overrides the tag name as title."""
    return GroupNode(
        type="tag",
        id=f"tag/{slugify(tag.name)}",
        title=tag.x_display_name or tag.name,
        description=tag.description or "",
        depth=depth,
        parent_id=parent_id,
        external_docs=tag.external_docs,
    )


def operation_node(
    operation: OperationRef,
    *,
    parent_id: str | None,
    depth: int,
    options: BuildOptions,
) -> OperationNode:
    """Create the node for one operation filed under one tag.

    The id is ``operation/<operationId>`` when the operation has one and the
    escaped ``paths/<path>/<verb>`` pointer otherwise, prefixed with the
    parent's id.
    """
    if operation.operation_id:
        suffix = f"operation/{operation.operation_id}"
    else:
        suffix = f"paths/{escape_pointer_token(operation.path_name)}/{operation.http_verb}"

    title = (
        operation.summary
        or operation.operation_id
        or f"{operation.http_verb.upper()} {operation.path_name}"
    )

    return OperationNode(
        id=join_id(parent_id, suffix),
        title=title,
        description=operation.description or "",
        http_verb=operation.http_verb,
        path=operation.path_name,
        operation_id=operation.operation_id,
        parameters=merge_parameters(operation.path_parameters, operation.parameters),
        deprecated=operation.deprecated,
        tags=list(operation.tags),
        depth=depth,
        parent_id=parent_id,
        extensions=operation.extensions if options.show_extensions else {},
    )


def merge_parameters(
    path_parameters: list[dict[str, Any]],
    operation_parameters: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """Combine path-level and operation-level parameters.

    An operation parameter replaces a path parameter with the same
    ``(name, in)`` pair. References (``$ref``) are never deduplicated.
    """
    overridden = {
        (param.get("name"), param.get("in"))
        for param in operation_parameters
        if "name" in param
    }
    merged = [
        param
        for param in path_parameters
        if "name" not in param or (param.get("name"), param.get("in")) not in overridden
    ]
    merged.extend(operation_parameters)
    return merged
