"""Lesson request models."""
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MIN_TARGET_SLIDES = 1
MAX_TARGET_SLIDES = 50


class Category(str, Enum):
    """Course track a lesson belongs to."""

    GAME_DEV = "Game Development"
    WEB_DEV = "Web Development"
    MOBILE_DEV = "Mobile App Development"


class Level(str, Enum):
    """Audience level of a lesson."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class LessonRequest(BaseModel):
    """Parameters submitted to the generation webhook."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(..., min_length=1, description="Lesson title")
    description: str = Field(..., description="What the lesson should cover")
    category: Category = Field(..., description="Course track")
    level: Level = Field(..., description="Audience level")
    target_slide_count: int = Field(
        ...,
        validation_alias=AliasChoices("targetSlideCount", "targetSlides", "target_slide_count"),
        serialization_alias="targetSlides",
        ge=MIN_TARGET_SLIDES,
        le=MAX_TARGET_SLIDES,
        description="Number of content slides requested"
    )

    def to_payload(self) -> dict:
        """Serialize with the webhook's field names."""
        return self.model_dump(mode="json", by_alias=True)
