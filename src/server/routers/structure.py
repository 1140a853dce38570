"""Structure endpoint for the API."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from server.models import StructureErrorResponse, StructureRequest, StructureSuccessResponse
from server.query_processor import process_structure_request

router = APIRouter()

COMMON_STRUCTURE_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": StructureSuccessResponse, "description": "Content tree built"},
    status.HTTP_400_BAD_REQUEST: {"model": StructureErrorResponse, "description": "Description could not be loaded"},
}


@router.post("/api/structure", responses=COMMON_STRUCTURE_RESPONSES)
async def api_structure(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    structure_request: StructureRequest,
) -> JSONResponse:
    """Build the navigable content tree of an API description.

    **This endpoint loads an API description from a URL or the request body,**
    then returns its content tree: narrative sections, tag groups, tags and operations.

    **Parameters**

    - **structure_request** (`StructureRequest`): Pydantic model containing build parameters

    **Returns**

    - **JSONResponse**: Success response with the tree or error response with HTTP 400

    """
    response = await process_structure_request(structure_request)
    if isinstance(response, StructureErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(content=response.model_dump(mode="json", by_alias=True))
