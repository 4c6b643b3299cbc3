"""Pydantic models and schemas for type-safe data handling."""

from .lesson import Category, Level, LessonRequest
from .outline import (
    CodeExample,
    ContentSlide,
    ImagePayload,
    Outline,
    OutlineSummary,
    VisualTemplate,
    ensure_outline,
)
from .deck import (
    AgendaSlide,
    ContentPage,
    Deck,
    QASlide,
    SlideDescriptor,
    SummarySlide,
    ThankYouSlide,
    TitleSlide,
)

__all__ = [
    # Lesson request
    "Category",
    "Level",
    "LessonRequest",
    # Outline models
    "CodeExample",
    "ContentSlide",
    "ImagePayload",
    "Outline",
    "OutlineSummary",
    "VisualTemplate",
    "ensure_outline",
    # Deck descriptors
    "AgendaSlide",
    "ContentPage",
    "Deck",
    "QASlide",
    "SlideDescriptor",
    "SummarySlide",
    "ThankYouSlide",
    "TitleSlide",
]
