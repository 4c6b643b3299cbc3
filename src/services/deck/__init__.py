"""Deck expansion service package."""

from .expander import FIXED_SLIDE_COUNT, deck_length, expand

__all__ = [
    "FIXED_SLIDE_COUNT",
    "deck_length",
    "expand",
]
