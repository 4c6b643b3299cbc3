"""
Generation Webhook Client

Posts a lesson request to the generation webhook and normalizes its reply
into an Outline. The webhook is a workflow automation endpoint whose reply
may be wrapped in a list, carry the real JSON as a string under ``output``,
and fence that string in markdown.
"""
import asyncio
import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

import aiohttp

from src.core import get_settings
from src.core.errors import GenerationError
from src.models.lesson import LessonRequest
from src.models.outline import Outline, ensure_outline

from .sample import SAMPLE_OUTLINE

logger = logging.getLogger(__name__)

FENCE_START = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
FENCE_END = re.compile(r"\s*```$")
ERROR_PREVIEW_LENGTH = 200


def strip_markdown_fence(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence, if any."""
    text = text.strip()
    text = FENCE_START.sub("", text)
    return FENCE_END.sub("", text)


def normalize_payload(raw: Any) -> Outline:
    """
    Normalize a webhook reply into an Outline.

    Args:
        raw: Decoded JSON body of the webhook response

    Returns:
        The validated outline

    Raises:
        GenerationError: if the reply does not carry a successful result
        MalformedOutline: if the result does not describe a valid outline
    """
    data = raw
    if isinstance(data, list):
        if not data:
            raise GenerationError("Empty array response from generation webhook")
        data = data[0]

    if isinstance(data, dict) and data.get("output"):
        output = data["output"]
        if isinstance(output, str):
            try:
                output = json.loads(strip_markdown_fence(output))
            except json.JSONDecodeError as e:
                logger.error(f"Could not parse webhook output: {output[:ERROR_PREVIEW_LENGTH]}")
                raise GenerationError("Invalid response format from AI: could not parse JSON") from e
        data = output

    if not isinstance(data, dict):
        raise GenerationError(f"Unexpected response type from generation webhook: {type(data).__name__}")

    if data.get("status") != "success" or not data.get("data"):
        logger.error(f"Webhook reply rejected. Status: {data.get('status')}, data present: {bool(data.get('data'))}")
        raise GenerationError(
            data.get("message") or "Failed to generate presentation: invalid data structure"
        )

    return ensure_outline(data["data"])


class GenerationClient:
    """
    Client for the lesson generation webhook.

    Falls back to a built-in sample outline when no webhook URL is configured
    so the preview and export can be exercised offline.
    """

    def __init__(self, webhook_url: Optional[str] = None, timeout: Optional[int] = None):
        settings = get_settings()
        self._webhook_url = webhook_url if webhook_url is not None else settings.webhook_url
        self._timeout = timeout if timeout is not None else settings.webhook_timeout

    @property
    def uses_sample(self) -> bool:
        """Whether generation is served from the sample outline."""
        return not self._webhook_url

    def build_request_body(self, request: LessonRequest) -> dict:
        body = request.to_payload()
        body["timestamp"] = datetime.now(timezone.utc).isoformat()
        return body

    async def _post(self, body: dict) -> Any:
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(self._webhook_url, json=body) as resp:
                if resp.status >= 400:
                    error_text = await resp.text()
                    raise GenerationError(
                        f"Generation webhook error {resp.status}: {error_text[:ERROR_PREVIEW_LENGTH]}"
                    )
                return await resp.json(content_type=None)

    async def generate(self, request: LessonRequest) -> Outline:
        """
        Generate an outline for ``request``.

        Raises:
            GenerationError: on transport failures or unusable replies
            MalformedOutline: if the reply describes an invalid outline
        """
        if self.uses_sample:
            logger.warning("No WEBHOOK_URL configured, using the sample outline")
            return ensure_outline(SAMPLE_OUTLINE)

        logger.info(f"Requesting outline for '{request.title}' ({request.target_slide_count} slides)")
        try:
            raw = await self._post(self.build_request_body(request))
        except GenerationError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Generation webhook request failed: {e}")
            raise GenerationError(f"Generation webhook request failed: {e}") from e
        except json.JSONDecodeError as e:
            raise GenerationError("Generation webhook returned invalid JSON") from e

        outline = normalize_payload(raw)
        logger.info(f"Received outline '{outline.title}' with {len(outline.content_slides)} content slides")
        return outline


# Singleton instance
_generation_client: Optional[GenerationClient] = None


def get_generation_client() -> GenerationClient:
    """Get the singleton generation client instance."""
    global _generation_client
    if _generation_client is None:
        _generation_client = GenerationClient()
    return _generation_client
