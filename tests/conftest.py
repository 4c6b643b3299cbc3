"""
Pytest configuration and fixtures.
"""
import base64
import copy
from io import BytesIO

import pytest
from PIL import Image

from src.models.outline import Outline
from src.services.generation.sample import SAMPLE_OUTLINE


def make_png(color=(0, 78, 137), size=(32, 18)) -> bytes:
    """Create a small PNG image."""
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def to_data_url(data: bytes, media_type: str = "image/png") -> str:
    return f"data:{media_type};base64,{base64.b64encode(data).decode('ascii')}"


@pytest.fixture
def outline_data():
    """Outline in the webhook's wire format (three content slides, one with code)."""
    return copy.deepcopy(SAMPLE_OUTLINE)


@pytest.fixture
def outline(outline_data):
    return Outline.model_validate(outline_data)


@pytest.fixture
def empty_outline():
    """Outline without content slides."""
    return Outline(title="Empty Lesson", subtitle="Nothing here yet")


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def png_data_url(png_bytes):
    return to_data_url(png_bytes)


@pytest.fixture
def title_background_outline(outline, png_data_url):
    return outline.with_template({"titleBackground": png_data_url})


@pytest.fixture
def content_background_outline(outline, png_data_url):
    return outline.with_template({"contentBackground": png_data_url})


@pytest.fixture
def clean_environment(monkeypatch):
    """Provide a clean environment for tests."""
    env_vars = [
        "WEBHOOK_URL",
        "WEBHOOK_TIMEOUT",
        "APP_NAME",
        "PORT",
        "LOG_LEVEL",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
