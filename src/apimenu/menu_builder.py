"""Assemble the content tree of an API description.

The tree starts with sections taken from the narrative in
``info.description`` and continues with either the ``x-tagGroups`` groups
or, when none are declared, one node per tag.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from apimenu.context import BuildContext, BuildOptions
from apimenu.headings import (
    SECURITY_DEFINITIONS_COMPONENT_NAME,
    contains_component,
    extract_headings,
    text_before_headings,
)
from apimenu.nodes import operation_node, section_group, tag_group, tag_group_group
from apimenu.schemas import ContentNode, GroupNode, MarkdownHeading, OperationNode, TagGroup, TagInfo
from apimenu.tags import ANONYMOUS_TAG, TagsInfoMap, collect_tags, find_unused_tags

logger = logging.getLogger(__name__)

GROUP_DEPTH = 0


def build_structure(
    description: Mapping[str, Any],
    options: BuildOptions | None = None,
    *,
    context: BuildContext | None = None,
    tags: TagsInfoMap | None = None,
) -> list[ContentNode]:
    """Build the ordered content tree of an API description.

    Args:
        description: The parsed API description. ``paths`` must be a mapping.
        options: Build options. Ignored when ``context`` is given.
        context: Build state to use. Pass one to read the security scheme
            prefix after the build; a fresh context is used otherwise.
        tags: A tag map from ``collect_tags``. Collected from ``description``
            when omitted; pass one to inspect ``used`` flags afterwards.

    Returns:
        Narrative sections followed by tag groups or tags.
    """
    ctx = context or BuildContext(options=options or BuildOptions())
    tags_map = tags if tags is not None else collect_tags(description)

    info = description.get("info")
    narrative = info.get("description") if isinstance(info, Mapping) else None
    if not isinstance(narrative, str):
        if narrative is not None:
            logger.warning("Ignoring non-string info.description of type %s", type(narrative).__name__)
        narrative = ""

    items: list[ContentNode] = []
    items.extend(add_markdown_items(narrative, parent_id=None, depth=1, context=ctx))

    tag_groups = parse_tag_groups(description.get("x-tagGroups"))
    ctx.grouped = bool(tag_groups)
    if tag_groups:
        items.extend(get_tag_groups_items(tag_groups, tags_map, context=ctx))
    else:
        items.extend(get_tags_items(tags_map, None, None, context=ctx))
    return items


def add_markdown_items(
    text: str,
    *,
    parent_id: str | None,
    depth: int,
    context: BuildContext,
) -> list[GroupNode]:
    """Turn the headings of a markdown text into nested ``section`` groups."""
    headings = extract_headings(
        text or "",
        parent_id=parent_id,
        max_level=context.options.max_heading_level,
    )

    def map_headings(owner_id: str | None, nodes: list[MarkdownHeading], level: int) -> list[GroupNode]:
        groups: list[GroupNode] = []
        for heading in nodes:
            group = section_group(heading, parent_id=owner_id, depth=level)
            if heading.items:
                group.items = map_headings(group.id, heading.items, level + 1)
            if contains_component(group.description, SECURITY_DEFINITIONS_COMPONENT_NAME):
                context.security_scheme_prefix = f"{group.id}/"
            groups.append(group)
        return groups

    return map_headings(parent_id, headings, depth)


def get_tag_groups_items(
    groups: list[TagGroup],
    tags: TagsInfoMap,
    *,
    context: BuildContext,
) -> list[GroupNode]:
    """Return one ``group`` node per ``x-tagGroups`` entry."""
    res: list[GroupNode] = []
    for group in groups:
        item = tag_group_group(group, depth=GROUP_DEPTH)
        item.items = get_tags_items(tags, item, group, context=context)
        res.append(item)

    unused = find_unused_tags(tags)
    if unused:
        logger.debug("Tags not referenced by any tag group: %s", ", ".join(unused))
    return res


def get_tags_items(
    tags: TagsInfoMap,
    parent: GroupNode | None,
    group: TagGroup | None,
    *,
    context: BuildContext,
) -> list[ContentNode]:
    """Return tag nodes for the tags of ``group``, or for every tag.

    The anonymous tag gets no node of its own: its sections and operations
    are spliced into the returned list instead, without a parent.
    """
    tag_names = list(tags) if group is None else group.tags

    selected: list[TagInfo] = []
    for tag_name in tag_names:
        tag = tags.get(tag_name)
        if tag is None:
            logger.warning(
                'Non-existing tag "%s" is added to the group "%s"',
                tag_name,
                group.name if group else "",
            )
            continue
        if group is not None:
            tag.used = True
        selected.append(tag)

    parent_id = parent.id if parent else None
    depth = parent.depth + 1 if parent else GROUP_DEPTH + 1

    res: list[ContentNode] = []
    for tag in selected:
        if tag.name == ANONYMOUS_TAG:
            res.extend(
                add_markdown_items(tag.description or "", parent_id=None, depth=depth + 1, context=context)
            )
            res.extend(get_operations_items(None, tag, depth + 1, context=context))
            continue

        item = tag_group(tag, parent_id=parent_id, depth=depth)
        description = tag.description or ""
        item.description = text_before_headings(description, max_level=context.options.max_heading_level)
        item.items = [
            *add_markdown_items(description, parent_id=item.id, depth=item.depth + 1, context=context),
            *get_operations_items(item, tag, item.depth + 1, context=context),
        ]
        res.append(item)
    return res


def get_operations_items(
    parent: GroupNode | None,
    tag: TagInfo,
    depth: int,
    *,
    context: BuildContext,
) -> list[OperationNode]:
    """Return one operation node per operation of ``tag`` at ``depth``."""
    if not tag.operations:
        return []

    parent_id = parent.id if parent else None
    return [
        operation_node(operation, parent_id=parent_id, depth=depth, options=context.options)
        for operation in tag.operations
    ]


def parse_tag_groups(value: Any) -> list[TagGroup]:
    """Read ``x-tagGroups``, skipping entries without a name or tag list.

    Non-string tag names inside an otherwise valid entry are dropped.
    """
    if not isinstance(value, list):
        return []
    groups: list[TagGroup] = []
    for entry in value:
        if not isinstance(entry, Mapping) or not isinstance(entry.get("name"), str):
            logger.warning("Skipping malformed x-tagGroups entry: %r", entry)
            continue
        tag_names = entry.get("tags")
        if not isinstance(tag_names, list):
            logger.warning('Skipping tag group "%s" without a tag list', entry["name"])
            continue
        groups.append(TagGroup(name=entry["name"], tags=[name for name in tag_names if isinstance(name, str)]))
    return groups
