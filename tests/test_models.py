"""
Unit tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError

from src.core.errors import MalformedOutline
from src.models import (
    Category,
    CodeExample,
    ContentSlide,
    ImagePayload,
    LessonRequest,
    Level,
    Outline,
    VisualTemplate,
    ensure_outline,
)


class TestOutline:
    """Tests for the Outline model."""

    def test_parses_wire_format(self, outline_data):
        """Test parsing the webhook's camelCase payload."""
        outline = Outline.model_validate(outline_data)

        assert outline.title == "Building Flappy Bird with Unity"
        assert len(outline.content_slides) == 3
        assert outline.content_slides[0].index == 1
        assert outline.content_slides[0].bullet_points[0] == "What is Flappy Bird?"
        assert outline.content_slides[2].code_example.language == "csharp"
        assert outline.summary.estimated_duration_label == "90 minutes"
        assert outline.summary.learning_outcomes[0] == "Build a simple 2D game"
        assert outline.visual_template is None

    def test_accepts_field_names(self):
        """Test that snake_case attribute names are accepted too."""
        outline = Outline(
            title="Intro to Flexbox",
            content_slides=[ContentSlide(index=1, title="Axes", bullet_points=["Main axis"])],
        )

        assert outline.content_slides[0].bullet_points == ("Main axis",)
        assert outline.subtitle == ""

    def test_is_immutable(self, outline):
        """Test that outlines cannot be modified after creation."""
        with pytest.raises(ValidationError):
            outline.title = "Changed"

        assert isinstance(outline.content_slides, tuple)

    def test_blank_title_rejected(self):
        """Test that a blank title fails validation."""
        with pytest.raises(ValidationError):
            Outline(title="   ")

    def test_slide_index_must_be_positive(self):
        """Test that slide indices start at 1."""
        with pytest.raises(ValidationError):
            ContentSlide(index=0, title="Zero")

    def test_round_trip_payload(self, outline_data):
        """Test that to_payload uses the wire names."""
        payload = Outline.model_validate(outline_data).to_payload()

        assert payload["outline"][2]["codeSnippet"]["code"] == outline_data["outline"][2]["codeSnippet"]["code"]
        assert payload["metadata"]["learningOutcomes"] == outline_data["metadata"]["learningOutcomes"]

    def test_with_template(self, outline, png_data_url, png_bytes):
        """Test attaching a visual template returns a new outline."""
        themed = outline.with_template({"contentBackground": png_data_url})

        assert outline.visual_template is None
        assert themed.title_background is None
        assert themed.content_background.data == png_bytes
        assert themed.content_slides == outline.content_slides

    def test_with_empty_template(self, outline):
        """Test that an empty template is dropped."""
        assert outline.with_template({}).visual_template is None
        assert outline.with_template(None).visual_template is None

    def test_with_invalid_template(self, outline):
        """Test that an undecodable template is a malformed outline."""
        with pytest.raises(MalformedOutline):
            outline.with_template({"titleBackground": "not-a-data-url"})


class TestImagePayload:
    """Tests for ImagePayload."""

    def test_from_data_url(self, png_data_url, png_bytes):
        """Test parsing a base64 data URL."""
        image = ImagePayload.model_validate(png_data_url)

        assert image.media_type == "image/png"
        assert image.data == png_bytes
        assert image.data_url == png_data_url

    def test_from_bytes(self, png_bytes):
        """Test building from raw bytes."""
        image = ImagePayload.model_validate(png_bytes)

        assert image.media_type == "image/png"
        assert image.data == png_bytes

    def test_serializes_to_data_url(self, png_data_url):
        """Test that templates serialize images back to data URLs."""
        template = VisualTemplate(titleBackground=png_data_url)

        dumped = template.model_dump(mode="json", by_alias=True)
        assert dumped["titleBackground"] == png_data_url
        assert dumped["contentBackground"] is None

    @pytest.mark.parametrize("value", [
        "https://example.com/background.png",
        "data:image/png;base64,",
        "data:image/png;base64,@@@not-base64@@@",
    ])
    def test_invalid_data_url(self, value):
        """Test that non data URLs are rejected."""
        with pytest.raises(ValidationError):
            ImagePayload.model_validate(value)


class TestEnsureOutline:
    """Tests for ensure_outline."""

    def test_returns_instance_unchanged(self, outline):
        assert ensure_outline(outline) is outline

    def test_validates_mapping(self, outline_data):
        assert ensure_outline(outline_data).title == outline_data["title"]

    def test_missing_title(self, outline_data):
        """Test that a missing title raises MalformedOutline."""
        del outline_data["title"]

        with pytest.raises(MalformedOutline):
            ensure_outline(outline_data)

    def test_wrong_type(self):
        with pytest.raises(MalformedOutline):
            ensure_outline(["not", "an", "outline"])


class TestLessonRequest:
    """Tests for LessonRequest."""

    def test_payload_uses_wire_names(self):
        """Test serialization for the generation webhook."""
        request = LessonRequest(
            title="Hello World",
            description="An introduction to programming",
            category=Category.WEB_DEV,
            level=Level.BEGINNER,
            target_slide_count=12,
        )

        payload = request.to_payload()
        assert payload == {
            "title": "Hello World",
            "description": "An introduction to programming",
            "category": "Web Development",
            "level": "Beginner",
            "targetSlides": 12,
        }

    def test_accepts_slide_count_aliases(self):
        base = {"title": "Hello World", "description": "x" * 25, "category": "Game Development", "level": "Advanced"}

        assert LessonRequest.model_validate({**base, "targetSlideCount": 3}).target_slide_count == 3
        assert LessonRequest.model_validate({**base, "targetSlides": 4}).target_slide_count == 4

    def test_slide_count_bounds(self):
        with pytest.raises(ValidationError):
            LessonRequest(
                title="Hello World",
                description="x" * 25,
                category=Category.GAME_DEV,
                level=Level.BEGINNER,
                target_slide_count=51,
            )


class TestCodeExample:
    def test_language_optional(self):
        assert CodeExample(code="print('hi')").language == ""
