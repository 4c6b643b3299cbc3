"""
Slide Preview Service
Renders expanded decks into view models and HTML for the preview modal.
"""

from .models import (
    CodeBlockView,
    ColorScheme,
    FooterView,
    NavigationState,
    SlidePreview,
    SlideView,
)
from .renderer import PreviewNavigator, render_descriptor, render_html, render_slide

__all__ = [
    "CodeBlockView",
    "ColorScheme",
    "FooterView",
    "NavigationState",
    "SlidePreview",
    "SlideView",
    "PreviewNavigator",
    "render_descriptor",
    "render_html",
    "render_slide",
]
