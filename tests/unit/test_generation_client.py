"""
Unit tests for the generation webhook client.
Tests reply normalization and transport error handling.
"""
import asyncio
import json

import aiohttp
import pytest
from unittest.mock import AsyncMock, patch

from src.core.errors import GenerationError, MalformedOutline
from src.models import Category, LessonRequest, Level
from src.services.generation import SAMPLE_OUTLINE, GenerationClient
from src.services.generation.client import normalize_payload, strip_markdown_fence

WEBHOOK_URL = "https://automation.example.com/webhook/lesson"


@pytest.fixture
def lesson_request():
    return LessonRequest(
        title="Building Flappy Bird with Unity",
        description="Make a first 2D game in Unity",
        category=Category.GAME_DEV,
        level=Level.BEGINNER,
        target_slide_count=3,
    )


@pytest.fixture
def success_reply(outline_data):
    return {"status": "success", "data": outline_data}


class TestStripMarkdownFence:
    """Tests for strip_markdown_fence."""

    def test_json_fence(self):
        assert strip_markdown_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        assert strip_markdown_fence('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_markdown_fence('  {"a": 1}  ') == '{"a": 1}'


class TestNormalizePayload:
    """Tests for normalize_payload."""

    def test_plain_object(self, success_reply):
        outline = normalize_payload(success_reply)

        assert outline.title == "Building Flappy Bird with Unity"
        assert len(outline.content_slides) == 3

    def test_wrapped_in_list(self, success_reply):
        assert normalize_payload([success_reply]).title == "Building Flappy Bird with Unity"

    def test_output_string(self, success_reply):
        """Test the workflow-style reply with fenced JSON under output."""
        raw = [{"output": "```json\n" + json.dumps(success_reply) + "\n```"}]

        assert len(normalize_payload(raw).content_slides) == 3

    def test_output_object(self, success_reply):
        assert normalize_payload({"output": success_reply}).subtitle == "A Complete Beginner's Guide"

    def test_empty_list(self):
        with pytest.raises(GenerationError):
            normalize_payload([])

    def test_unparseable_output(self):
        with pytest.raises(GenerationError, match="could not parse JSON"):
            normalize_payload({"output": "Sorry, I cannot help with that."})

    def test_error_status_message(self):
        with pytest.raises(GenerationError, match="quota exceeded"):
            normalize_payload({"status": "error", "message": "quota exceeded"})

    def test_missing_data(self):
        with pytest.raises(GenerationError, match="invalid data structure"):
            normalize_payload({"status": "success"})

    def test_unexpected_type(self):
        with pytest.raises(GenerationError):
            normalize_payload("just text")

    def test_invalid_outline(self):
        with pytest.raises(MalformedOutline):
            normalize_payload({"status": "success", "data": {"subtitle": "no title"}})


class TestGenerationClient:
    """Tests for GenerationClient."""

    def test_uses_sample_without_url(self):
        assert GenerationClient(webhook_url="").uses_sample is True
        assert GenerationClient(webhook_url=WEBHOOK_URL).uses_sample is False

    def test_request_body(self, lesson_request):
        body = GenerationClient(webhook_url=WEBHOOK_URL).build_request_body(lesson_request)

        assert body["title"] == lesson_request.title
        assert body["category"] == "Game Development"
        assert body["targetSlides"] == 3
        assert "timestamp" in body

    @pytest.mark.asyncio
    async def test_sample_fallback(self, lesson_request):
        """Test that no webhook URL returns the sample outline."""
        client = GenerationClient(webhook_url="")

        with patch.object(client, "_post", new_callable=AsyncMock) as mock_post:
            outline = await client.generate(lesson_request)

        mock_post.assert_not_called()
        assert outline.title == SAMPLE_OUTLINE["title"]

    @pytest.mark.asyncio
    async def test_generate(self, lesson_request, success_reply):
        client = GenerationClient(webhook_url=WEBHOOK_URL, timeout=30)

        with patch.object(client, "_post", new=AsyncMock(return_value=[success_reply])) as mock_post:
            outline = await client.generate(lesson_request)

        body = mock_post.call_args.args[0]
        assert body["description"] == lesson_request.description
        assert len(outline.content_slides) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        aiohttp.ClientConnectionError("connection refused"),
        asyncio.TimeoutError(),
    ])
    async def test_transport_errors(self, lesson_request, error):
        client = GenerationClient(webhook_url=WEBHOOK_URL)

        with patch.object(client, "_post", new=AsyncMock(side_effect=error)):
            with pytest.raises(GenerationError):
                await client.generate(lesson_request)

    @pytest.mark.asyncio
    async def test_http_error_propagates(self, lesson_request):
        client = GenerationClient(webhook_url=WEBHOOK_URL)
        error = GenerationError("Generation webhook error 500: boom")

        with patch.object(client, "_post", new=AsyncMock(side_effect=error)):
            with pytest.raises(GenerationError, match="500"):
                await client.generate(lesson_request)

    @pytest.mark.asyncio
    async def test_failed_status(self, lesson_request):
        client = GenerationClient(webhook_url=WEBHOOK_URL)
        reply = {"status": "error", "message": "Model overloaded"}

        with patch.object(client, "_post", new=AsyncMock(return_value=reply)):
            with pytest.raises(GenerationError, match="Model overloaded"):
                await client.generate(lesson_request)
