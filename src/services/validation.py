"""
Validation gate for lesson generation requests.

Every rule is checked independently and all violations are collected, so the
form can highlight each offending field at once.
"""
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from src.models.lesson import (
    MAX_TARGET_SLIDES,
    MIN_TARGET_SLIDES,
    Category,
    LessonRequest,
    Level,
)

MIN_TITLE_LENGTH = 5
MIN_DESCRIPTION_LENGTH = 20

# Accepted spellings of the slide count field, wire name first
SLIDE_COUNT_KEYS = ("targetSlideCount", "targetSlides", "target_slide_count")


class ValidationResult(BaseModel):
    """Outcome of validating a lesson request."""

    accepted: bool
    field_errors: dict[str, str] = Field(default_factory=dict)
    request: Optional[LessonRequest] = None


def _slide_count(raw: Mapping[str, Any]) -> Any:
    for key in SLIDE_COUNT_KEYS:
        if key in raw:
            return raw[key]
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def validate(raw: Mapping[str, Any]) -> ValidationResult:
    """
    Validate raw form input.

    Args:
        raw: Form fields keyed by their wire names

    Returns:
        An accepted result carrying the parsed request, or a rejected result
        with one message per offending field.
    """
    errors: dict[str, str] = {}

    title = raw.get("title")
    if not isinstance(title, str) or len(title) < MIN_TITLE_LENGTH:
        errors["title"] = f"Title is required (at least {MIN_TITLE_LENGTH} characters)"

    description = raw.get("description")
    if not isinstance(description, str) or len(description) < MIN_DESCRIPTION_LENGTH:
        errors["description"] = f"Description is required (at least {MIN_DESCRIPTION_LENGTH} characters)"

    category = raw.get("category")
    if category not in [c.value for c in Category]:
        errors["category"] = "Category must be one of: " + ", ".join(c.value for c in Category)

    level = raw.get("level")
    if level not in [lv.value for lv in Level]:
        errors["level"] = "Level must be one of: " + ", ".join(lv.value for lv in Level)

    count = _as_int(_slide_count(raw))
    if count is None or not MIN_TARGET_SLIDES <= count <= MAX_TARGET_SLIDES:
        errors["targetSlideCount"] = (
            f"Slide count must be between {MIN_TARGET_SLIDES} and {MAX_TARGET_SLIDES}"
        )

    if errors:
        return ValidationResult(accepted=False, field_errors=errors)

    request = LessonRequest(
        title=title,
        description=description,
        category=Category(category),
        level=Level(level),
        target_slide_count=count,
    )
    return ValidationResult(accepted=True, request=request)
