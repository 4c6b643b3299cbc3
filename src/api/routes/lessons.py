"""Lesson API endpoints: request validation and outline generation."""
import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException
from pydantic import ValidationError

from src.core.errors import GenerationError, MalformedOutline
from src.models.outline import VisualTemplate
from src.services import get_generation_client, validate
from src.services.deck import deck_length

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/lessons", tags=["lessons"])


@router.post("/validate")
async def validate_lesson(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """
    Check a lesson request without generating anything.

    Every field is checked; all violations are reported at once.
    """
    result = validate(payload)
    return {
        "accepted": result.accepted,
        "field_errors": result.field_errors,
    }


@router.post("/generate")
async def generate_lesson(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """
    Generate a lesson outline.

    The optional ``template`` member carries ``titleBackground`` and
    ``contentBackground`` data URLs that are attached to the generated
    outline as its visual template.
    """
    result = validate(payload)
    if not result.accepted:
        raise HTTPException(
            status_code=422,
            detail={"message": "Invalid lesson request", "field_errors": result.field_errors},
        )

    template = None
    if payload.get("template"):
        try:
            template = VisualTemplate.model_validate(payload["template"])
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=f"Invalid visual template: {e}")

    client = get_generation_client()
    try:
        outline = await client.generate(result.request)
        if template is not None:
            outline = outline.with_template(template)
    except GenerationError as e:
        logger.error(f"Generation failed for '{result.request.title}': {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except MalformedOutline as e:
        logger.error(f"Generation returned a malformed outline: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "outline": outline.to_payload(),
        "slide_count": deck_length(outline),
        "sample": client.uses_sample,
    }
