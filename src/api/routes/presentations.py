"""Presentation API endpoints: slide preview and file export."""
import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query
from fastapi.responses import HTMLResponse, Response

from src.core.errors import EncodingFailed, MalformedOutline
from src.models.outline import Outline, ensure_outline
from src.services import get_presentation_service
from src.services.preview import render_html

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/presentations", tags=["presentations"])


def _parse_outline(payload: dict[str, Any]) -> Outline:
    try:
        return ensure_outline(payload)
    except MalformedOutline as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/preview")
async def preview_slide(
    payload: dict[str, Any] = Body(...),
    index: int = Query(0, description="0-based slide index; clamped into the deck"),
) -> dict[str, Any]:
    """Render one slide of the outline's deck with its navigation state."""
    outline = _parse_outline(payload)
    preview = get_presentation_service().preview(outline, index)
    return preview.model_dump(mode="json")


@router.post("/preview/html", response_class=HTMLResponse)
async def preview_slide_html(
    payload: dict[str, Any] = Body(...),
    index: int = Query(0, description="0-based slide index; clamped into the deck"),
) -> HTMLResponse:
    """Render one slide of the outline's deck as an HTML fragment."""
    outline = _parse_outline(payload)
    preview = get_presentation_service().preview(outline, index)
    return HTMLResponse(render_html(preview))


@router.post("/export")
async def export_presentation(payload: dict[str, Any] = Body(...)) -> Response:
    """Export the outline as a PowerPoint file download."""
    outline = _parse_outline(payload)
    try:
        document = await get_presentation_service().export(outline)
    except EncodingFailed as e:
        logger.error(f"Export failed for '{outline.title}': {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{document.filename}"',
            "X-Page-Count": str(document.page_count),
        },
    )
