"""Process a structure request by loading, building and formatting."""

from __future__ import annotations

from apimenu.context import BuildOptions
from apimenu.exceptions import ApimenuError
from apimenu.loader import fetch_description, normalize_description
from apimenu.pipeline import build_from_description
from apimenu.utils.logging_config import get_logger
from server.models import StructureErrorResponse, StructureRequest, StructureResponse, StructureSuccessResponse

# Initialize logger for this module
logger = get_logger(__name__)


async def process_structure_request(request: StructureRequest) -> StructureResponse:
    """Build the content tree described by ``request``."""
    options = BuildOptions(
        max_heading_level=request.max_heading_level,
        show_extensions=request.show_extensions,
    )
    origin = request.source or "<inline>"

    try:
        if request.source is not None:
            description = await fetch_description(request.source)
        else:
            description = normalize_description(request.description, source="<inline>")
        result, metadata = build_from_description(description, options)
    except ApimenuError as exc:
        logger.error(
            "Structure build failed",
            extra={
                "source": origin,
                "error": str(exc),
            },
        )
        return StructureErrorResponse(error=str(exc))

    logger.info(
        "Structure build completed successfully",
        extra={
            "source": origin,
            "title": metadata.get("title"),
            "top_level_items": len(result.items),
        },
    )

    return StructureSuccessResponse(
        title=metadata.get("title"),
        version=metadata.get("version"),
        security_scheme_prefix=metadata.get("security_scheme_prefix"),
        summary=result.summary,
        outline=result.outline,
        items=result.items,
    )
