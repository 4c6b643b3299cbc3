"""Service layer for LessonDeck."""

from .generation import GenerationClient, get_generation_client
from .presentation import PresentationService, get_presentation_service
from .validation import ValidationResult, validate

__all__ = [
    "GenerationClient",
    "get_generation_client",
    "PresentationService",
    "get_presentation_service",
    "ValidationResult",
    "validate",
]
