"""Build pipeline: API description -> content tree -> formatted output."""

from __future__ import annotations

from typing import Any, Mapping

from apimenu.context import BuildContext, BuildOptions
from apimenu.loader import load_source
from apimenu.menu_builder import build_structure
from apimenu.output_formatter import format_structure
from apimenu.schemas import StructureResult
from apimenu.tags import collect_tags, find_unused_tags


def build_from_description(
    description: Mapping[str, Any],
    options: BuildOptions | None = None,
) -> tuple[StructureResult, dict[str, str | None]]:
    """Build and format the content tree of an already parsed description.

    Returns:
        Tuple of (result, metadata) where metadata holds the description's
        title and version and the security scheme id prefix of the build.
    """
    context = BuildContext(options=options or BuildOptions())
    tags = collect_tags(description)
    items = build_structure(description, context=context, tags=tags)

    info = description.get("info")
    info = info if isinstance(info, Mapping) else {}
    title = info.get("title") if isinstance(info.get("title"), str) else None
    version = info.get("version")
    version = str(version) if version is not None else None

    # Only explicit tag groups can leave tags out of the tree.
    result = format_structure(
        items,
        title=title,
        version=version,
        unused_tags=find_unused_tags(tags) if context.grouped else (),
    )

    metadata = {
        "title": title,
        "version": version,
        "security_scheme_prefix": context.security_scheme_prefix,
    }
    return result, metadata


async def build_from_source(
    source: str,
    options: BuildOptions | None = None,
) -> tuple[StructureResult, dict[str, str | None]]:
    """Load a description from a URL or path and build its content tree."""
    description = await load_source(source)
    return build_from_description(description, options)
