"""API Reference — serves the API Description Document and its viewer.

Invariants:
    - GET /openapi.json returns the document stored on app.state, unmodified
    - GET /reference returns the Scalar API reference page titled with the
      document title, themed from settings, loading /openapi.json
    - Neither route appears in the document itself

Design Decisions:
    - FastAPI's generated schema, /docs and /redoc are disabled in create_app();
      these routes replace them so the hand-written document is the only one
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse
from scalar_fastapi import get_scalar_api_reference

from userdocs.core.api_document import thaw

OPENAPI_PATH = "/openapi.json"

router = APIRouter(tags=["reference"], include_in_schema=False)


@router.get(OPENAPI_PATH)
async def openapi_document(request: Request) -> JSONResponse:
    return JSONResponse(thaw(request.app.state.api_document))


@router.get("/reference")
async def api_reference(request: Request) -> HTMLResponse:
    """Interactive documentation page for the API Description Document."""
    document = request.app.state.api_document
    return get_scalar_api_reference(
        openapi_url=OPENAPI_PATH,
        title=document["info"]["title"],
        theme=request.app.state.settings.reference_theme,
    )
