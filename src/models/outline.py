"""
Lesson outline models.

The outline is the canonical, immutable representation of a generated lesson.
Field aliases follow the camelCase JSON produced by the generation webhook;
snake_case attribute names are accepted as well.
"""
import base64
import binascii
import re
from typing import Any, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_serializer,
    model_validator,
)

from src.core.errors import MalformedOutline

DATA_URL_PATTERN = re.compile(
    r"^data:(?P<media_type>[\w.+-]+/[\w.+-]+)?(?:;[\w-]+=[\w.-]+)*;base64,(?P<payload>.*)$",
    re.DOTALL,
)
DEFAULT_IMAGE_MEDIA_TYPE = "image/png"


class ImagePayload(BaseModel):
    """
    An embeddable image.

    Accepts a base64 ``data:`` URL (what the browser file picker produces) or
    raw bytes, and serializes back to a data URL.
    """

    model_config = ConfigDict(frozen=True)

    media_type: str = Field(default=DEFAULT_IMAGE_MEDIA_TYPE, description="MIME type of the image")
    data: bytes = Field(..., description="Raw image bytes")

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        if isinstance(value, str):
            return cls._split_data_url(value)
        if isinstance(value, (bytes, bytearray)):
            return {"data": bytes(value)}
        return value

    @staticmethod
    def _split_data_url(value: str) -> dict:
        match = DATA_URL_PATTERN.match(value.strip())
        if not match:
            raise ValueError("Image must be a base64 data URL")
        try:
            data = base64.b64decode(match.group("payload"), validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 image data: {e}") from e
        if not data:
            raise ValueError("Image data is empty")
        return {
            "media_type": match.group("media_type") or DEFAULT_IMAGE_MEDIA_TYPE,
            "data": data,
        }

    @property
    def data_url(self) -> str:
        """Encode the image as a data URL for inline display."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.media_type};base64,{encoded}"

    @model_serializer
    def _serialize(self) -> str:
        return self.data_url


class CodeExample(BaseModel):
    """A code listing shown verbatim on a content slide."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(default="", description="Language label, informational only")
    code: str = Field(..., description="Source code, kept verbatim")


class ContentSlide(BaseModel):
    """One body slide of the generated outline."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    index: int = Field(..., alias="slideNumber", ge=1, description="1-based position in the outline")
    title: str = Field(..., description="Slide heading")
    bullet_points: tuple[str, ...] = Field(default=(), alias="content", description="Visible bullet points")
    speaker_notes: Optional[str] = Field(default=None, alias="notes", description="Presenter-only notes")
    code_example: Optional[CodeExample] = Field(default=None, alias="codeSnippet")
    illustration: Optional[str] = Field(default=None, alias="imageUrl", description="Image reference")


class OutlineSummary(BaseModel):
    """Lesson metadata shown on the summary slide and in the UI."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_slide_count_estimate: int = Field(default=0, alias="totalSlides", ge=0)
    estimated_duration_label: str = Field(default="", alias="estimatedDuration")
    prerequisites: tuple[str, ...] = Field(default=())
    learning_outcomes: tuple[str, ...] = Field(default=(), alias="learningOutcomes")


class VisualTemplate(BaseModel):
    """Optional custom backgrounds overriding the default theme."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title_background_image: Optional[ImagePayload] = Field(default=None, alias="titleBackground")
    content_background_image: Optional[ImagePayload] = Field(default=None, alias="contentBackground")

    @property
    def is_empty(self) -> bool:
        return self.title_background_image is None and self.content_background_image is None


class Outline(BaseModel):
    """A generated lesson, ready to be previewed and exported."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(..., description="Lesson title")
    subtitle: str = Field(default="", description="Lesson subtitle")
    content_slides: tuple[ContentSlide, ...] = Field(default=(), alias="outline")
    summary: OutlineSummary = Field(default_factory=OutlineSummary, alias="metadata")
    visual_template: Optional[VisualTemplate] = Field(default=None, alias="template")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject blank titles."""
        if not v.strip():
            raise ValueError("Outline title must not be blank")
        return v

    @property
    def title_background(self) -> Optional[ImagePayload]:
        if self.visual_template is None:
            return None
        return self.visual_template.title_background_image

    @property
    def content_background(self) -> Optional[ImagePayload]:
        if self.visual_template is None:
            return None
        return self.visual_template.content_background_image

    def with_template(self, template: Union["VisualTemplate", Mapping, None]) -> "Outline":
        """Return a copy of this outline carrying the given visual template."""
        if template is not None and not isinstance(template, VisualTemplate):
            try:
                template = VisualTemplate.model_validate(template)
            except ValidationError as e:
                raise MalformedOutline(f"Invalid visual template: {e}") from e
        if template is not None and template.is_empty:
            template = None
        return self.model_copy(update={"visual_template": template})

    def to_payload(self) -> dict:
        """Serialize with the webhook's field names."""
        return self.model_dump(mode="json", by_alias=True)


def ensure_outline(value: Union[Outline, Mapping]) -> Outline:
    """
    Return ``value`` as a validated Outline.

    Raises:
        MalformedOutline: if the value is not an outline or fails validation
    """
    if isinstance(value, Outline):
        return value
    if not isinstance(value, Mapping):
        raise MalformedOutline(f"Expected an outline mapping, got {type(value).__name__}")
    try:
        return Outline.model_validate(value)
    except ValidationError as e:
        raise MalformedOutline(f"Invalid outline: {e}") from e
