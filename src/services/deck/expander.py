"""Expansion of an outline into the ordered deck both renderers consume."""
import logging
from typing import Mapping, Union

from src.models.deck import (
    AgendaSlide,
    ContentPage,
    Deck,
    QASlide,
    SummarySlide,
    ThankYouSlide,
    TitleSlide,
)
from src.models.outline import Outline, ensure_outline

logger = logging.getLogger(__name__)

# Title, Agenda, Summary, Q&A and Thank You
FIXED_SLIDE_COUNT = 5


def expand(outline: Union[Outline, Mapping]) -> Deck:
    """
    Expand an outline into its slide descriptors.

    The order is fixed: Title, Agenda, one Content page per content slide in
    outline order, Summary, Q&A, Thank You.

    Raises:
        MalformedOutline: if ``outline`` is not a valid outline
    """
    outline = ensure_outline(outline)
    slides = outline.content_slides

    expected = tuple(range(1, len(slides) + 1))
    if tuple(s.index for s in slides) != expected:
        logger.debug(f"Outline '{outline.title}' has non-contiguous slide indices; keeping given order")

    return (
        TitleSlide(title=outline.title, subtitle=outline.subtitle),
        AgendaSlide(items=tuple(s.title for s in slides)),
        *(ContentPage(slide=s) for s in slides),
        SummarySlide(outcomes=outline.summary.learning_outcomes),
        QASlide(),
        ThankYouSlide(),
    )


def deck_length(outline: Outline) -> int:
    """Number of slides ``expand`` produces for ``outline``."""
    return FIXED_SLIDE_COUNT + len(outline.content_slides)
