"""Extract navigable headings from narrative markdown."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt
from markdown_it.token import Token

from apimenu.config import APIMENU_MAX_HEADING_LEVEL
from apimenu.ids import join_id, slugify
from apimenu.schemas import MarkdownHeading

SECURITY_DEFINITIONS_COMPONENT_NAME = "security-definitions"

_WHITESPACE_RE = re.compile(r"\s+")
_md = MarkdownIt("commonmark")


def extract_headings(
    text: str,
    *,
    parent_id: str | None = None,
    max_level: int = APIMENU_MAX_HEADING_LEVEL,
) -> list[MarkdownHeading]:
    """Build the heading tree of a markdown document.

    Only headings up to ``max_level`` become items; deeper headings stay in
    the description of the item that contains them. Each item's description
    is the raw markdown between it and the next item.

    Args:
        text: Markdown source.
        parent_id: Id of the node that owns the text. Top-level heading ids
            are prefixed with it.
        max_level: Deepest heading level that becomes an item.

    Returns:
        Top-level headings with their nested ``items``.
    """
    lines, found = _scan_headings(text, max_level)

    headings: list[MarkdownHeading] = []
    stack: list[MarkdownHeading] = []

    for position, (level, title, _start, end) in enumerate(found):
        next_start = found[position + 1][2] if position + 1 < len(found) else len(lines)
        description = "\n".join(lines[end:next_start]).strip()

        while stack and stack[-1].level >= level:
            stack.pop()

        if stack:
            heading_id = f"{stack[-1].id}/{slugify(title)}"
        else:
            heading_id = join_id(parent_id, f"section/{slugify(title)}")

        node = MarkdownHeading(title=title, id=heading_id, level=level, description=description)

        if stack:
            stack[-1].items.append(node)
        else:
            headings.append(node)

        stack.append(node)

    return headings


def text_before_headings(text: str, *, max_level: int = APIMENU_MAX_HEADING_LEVEL) -> str:
    """Return the markdown that precedes the first extracted heading."""
    lines, found = _scan_headings(text, max_level)
    if not found:
        return "\n".join(lines).strip()
    return "\n".join(lines[: found[0][2]]).strip()


def contains_component(text: str, component_name: str) -> bool:
    """Check whether markdown embeds the named component.

    Recognizes ``<!-- ReDoc-Inject: <name> -->`` comments as well as
    ``<name>``/``<name />`` tags and their PascalCase spelling, each at the
    start of a line.
    """
    if not text:
        return False
    pascal_name = "".join(part.capitalize() for part in component_name.split("-"))
    names = "|".join(re.escape(name) for name in sorted({component_name, pascal_name}))
    pattern = re.compile(
        rf"^ {{0,3}}(?:<!--\s*ReDoc-Inject:\s*<(?:{names})\b[^>]*>\s*-->|<(?:{names})(?:\s[^>]*)?/?>)",
        re.IGNORECASE | re.MULTILINE,
    )
    return bool(pattern.search(text))


def _scan_headings(text: str, max_level: int) -> tuple[list[str], list[tuple[int, str, int, int]]]:
    """Return source lines and ``(level, title, start, end)`` per kept heading."""
    if not text or not text.strip():
        return [], []

    lines = text.replace("\r\n", "\n").split("\n")
    tokens = _md.parse("\n".join(lines))

    found: list[tuple[int, str, int, int]] = []
    for index, token in enumerate(tokens):
        # Headings nested in lists or blockquotes are content, not structure.
        if token.type != "heading_open" or token.level != 0 or not token.map:
            continue
        level = int(token.tag[1])
        if level > max_level:
            continue
        title = _heading_title(tokens[index + 1])
        if not title:
            continue
        found.append((level, title, token.map[0], token.map[1]))
    return lines, found


def _heading_title(inline: Token) -> str:
    if inline.type != "inline":
        return ""
    html = _md.renderInline(inline.content)
    text = BeautifulSoup(html, "lxml").get_text()
    return _WHITESPACE_RE.sub(" ", text).strip()
