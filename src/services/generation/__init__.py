"""Lesson generation webhook client package."""

from .client import GenerationClient, get_generation_client, normalize_payload, strip_markdown_fence
from .sample import SAMPLE_OUTLINE

__all__ = [
    "GenerationClient",
    "get_generation_client",
    "normalize_payload",
    "strip_markdown_fence",
    "SAMPLE_OUTLINE",
]
