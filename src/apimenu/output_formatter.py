"""Format a content tree into summary and outline outputs."""

from __future__ import annotations

from typing import Iterable

from apimenu.schemas import ContentNode, StructureResult

_COUNT_LABELS = (
    ("section", "Sections"),
    ("group", "Tag groups"),
    ("tag", "Tags"),
    ("operation", "Operations"),
)


def format_structure(
    items: list[ContentNode],
    *,
    title: str | None = None,
    version: str | None = None,
    unused_tags: Iterable[str] = (),
) -> StructureResult:
    """Create summary and outline for a built tree."""
    outline = "Contents:\n" + _create_outline(items)

    summary_lines = []
    if title:
        summary_lines.append(f"Title: {title}")
    if version:
        summary_lines.append(f"Version: {version}")
    counts = count_nodes(items)
    for key, label in _COUNT_LABELS:
        summary_lines.append(f"{label}: {counts[key]}")
    unused = list(unused_tags)
    if unused:
        summary_lines.append(f"Tags outside tag groups: {', '.join(unused)}")

    return StructureResult(summary="\n".join(summary_lines), outline=outline, items=items)


def count_nodes(items: Iterable[ContentNode]) -> dict[str, int]:
    """Count nodes in the tree by section/group/tag/operation."""
    counts = {key: 0 for key, _label in _COUNT_LABELS}
    for node in items:
        if node.kind == "operation":
            counts["operation"] += 1
        else:
            counts[node.type] += 1
            for key, value in count_nodes(node.items).items():
                counts[key] += value
    return counts


def _create_outline(items: list[ContentNode], indent: int = 0) -> str:
    lines: list[str] = []
    for node in items:
        prefix = " " * (indent * 4)
        if node.kind == "operation":
            line = f"{prefix}{node.http_verb.upper()} {node.path}  {node.title}"
            if node.deprecated:
                line += " (deprecated)"
            lines.append(line)
            continue
        lines.append(prefix + node.title)
        if node.items:
            lines.append(_create_outline(node.items, indent + 1))
    return "\n".join(lines)
