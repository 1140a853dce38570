"""apimenu: build navigable content trees from API descriptions."""

from apimenu.context import BuildContext, BuildOptions
from apimenu.exceptions import (
    ApimenuError,
    DescriptionNotFoundError,
    FetchError,
    ParseError,
)
from apimenu.headings import extract_headings
from apimenu.loader import load_description, parse_description
from apimenu.menu_builder import build_structure
from apimenu.pipeline import build_from_description, build_from_source
from apimenu.schemas import (
    ContentNode,
    GroupNode,
    OperationNode,
    StructureResult,
    TagGroup,
    TagInfo,
)
from apimenu.tags import collect_tags

__all__ = [
    "ApimenuError",
    "BuildContext",
    "BuildOptions",
    "ContentNode",
    "DescriptionNotFoundError",
    "FetchError",
    "GroupNode",
    "OperationNode",
    "ParseError",
    "StructureResult",
    "TagGroup",
    "TagInfo",
    "build_from_description",
    "build_from_source",
    "build_structure",
    "collect_tags",
    "extract_headings",
    "load_description",
    "parse_description",
]
