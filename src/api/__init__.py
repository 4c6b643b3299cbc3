"""API routes for LessonDeck."""

from .routes import lessons, presentations

__all__ = [
    "lessons",
    "presentations",
]
