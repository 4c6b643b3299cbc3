"""Core configuration module for LessonDeck."""

from .config import Settings, get_settings
from .errors import LessonDeckError, MalformedOutline, EncodingFailed, GenerationError
from .logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "LessonDeckError",
    "MalformedOutline",
    "EncodingFailed",
    "GenerationError",
    "setup_logging",
]
