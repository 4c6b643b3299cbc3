"""
Preview renderer.

Turns one descriptor of an expanded deck into a ``SlideView`` and keeps the
read-only navigation state of the preview modal.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.models.deck import (
    AgendaSlide,
    ContentPage,
    Deck,
    QASlide,
    SlideDescriptor,
    SummarySlide,
    ThankYouSlide,
    TitleSlide,
)
from src.models.outline import Outline
from src.services import theme
from src.services.deck import expand

from .models import (
    CodeBlockView,
    ColorScheme,
    FooterView,
    NavigationState,
    SlidePreview,
    SlideView,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

_environment: Optional[Environment] = None


def clamp_index(index: int, total: int) -> int:
    """Clamp ``index`` into ``[0, total - 1]``."""
    return max(0, min(index, total - 1))


def navigation_state(index: int, total: int) -> NavigationState:
    return NavigationState(
        current_index=index,
        total_count=total,
        can_go_back=index > 0,
        can_go_forward=index < total - 1,
    )


def _render_title(outline: Outline, slide: TitleSlide) -> SlideView:
    background = outline.title_background
    if background is not None:
        return SlideView(
            kind=slide.kind,
            heading=slide.title,
            subheading=slide.subtitle,
            color_scheme=ColorScheme.IMAGE,
            background_color=theme.css_color(theme.WHITE),
            background_image=background.data_url,
            heading_color=theme.css_color(theme.TEXT),
            subheading_color=theme.css_color(theme.TEXT),
            text_color=theme.css_color(theme.TEXT),
            text_panel=True,
        )
    return SlideView(
        kind=slide.kind,
        heading=slide.title,
        subheading=slide.subtitle,
        background_color=theme.css_color(theme.SECONDARY),
        overlay_color=theme.css_color(theme.PRIMARY),
        overlay_opacity=theme.TITLE_OVERLAY_OPACITY / 100,
        heading_color=theme.css_color(theme.WHITE),
        subheading_color=theme.css_color(theme.ACCENT),
        text_color=theme.css_color(theme.WHITE),
        wordmark=theme.BRAND_WORDMARK,
    )


def _content_view(outline: Outline, position: int, **fields) -> SlideView:
    """Build a view for a page that uses the shared master."""
    background = outline.content_background
    return SlideView(
        color_scheme=ColorScheme.IMAGE if background is not None else ColorScheme.THEME,
        background_color=theme.css_color(theme.WHITE),
        background_image=background.data_url if background is not None else None,
        heading_color=theme.css_color(theme.SECONDARY),
        text_color=theme.css_color(theme.TEXT),
        text_panel=background is not None,
        footer=FooterView(
            label=theme.BRAND_LABEL,
            slide_number=position,
            background_color=theme.css_color(theme.SECONDARY),
            text_color=theme.css_color(theme.WHITE),
        ),
        **fields,
    )


def render_descriptor(outline: Outline, descriptor: SlideDescriptor, position: int) -> SlideView:
    """
    Render a single descriptor.

    Args:
        outline: The outline the descriptor was expanded from
        descriptor: The slide to render
        position: 1-based position of the slide in the full deck

    Returns:
        The slide view
    """
    if isinstance(descriptor, TitleSlide):
        return _render_title(outline, descriptor)
    if isinstance(descriptor, AgendaSlide):
        return _content_view(
            outline, position,
            kind=descriptor.kind,
            heading=theme.AGENDA_HEADING,
            items=descriptor.items,
        )
    if isinstance(descriptor, ContentPage):
        source = descriptor.slide
        code = None
        if source.code_example is not None:
            code = CodeBlockView(
                language=source.code_example.language,
                code=source.code_example.code,
                background_color=theme.css_color(theme.LIGHT_GRAY),
            )
        return _content_view(
            outline, position,
            kind=descriptor.kind,
            heading=source.title,
            items=source.bullet_points,
            code=code,
            notes=source.speaker_notes or None,
        )
    if isinstance(descriptor, SummarySlide):
        return _content_view(
            outline, position,
            kind=descriptor.kind,
            heading=theme.SUMMARY_HEADING,
            items=descriptor.outcomes,
        )
    if isinstance(descriptor, QASlide):
        return SlideView(
            kind=descriptor.kind,
            heading=theme.QA_HEADING,
            background_color=theme.css_color(theme.SECONDARY),
            heading_color=theme.css_color(theme.WHITE),
            text_color=theme.css_color(theme.WHITE),
        )
    if isinstance(descriptor, ThankYouSlide):
        return SlideView(
            kind=descriptor.kind,
            heading=theme.THANK_YOU_HEADING,
            subheading=theme.BRAND_LABEL,
            background_color=theme.css_color(theme.PRIMARY),
            heading_color=theme.css_color(theme.WHITE),
            subheading_color=theme.css_color(theme.WHITE),
            text_color=theme.css_color(theme.WHITE),
        )
    raise TypeError(f"Unsupported slide descriptor: {type(descriptor).__name__}")


def render_slide(outline: Outline, deck: Deck, index: int) -> SlidePreview:
    """
    Render ``deck[index]`` together with its navigation state.

    Out-of-range indices are clamped to the first or last slide.
    """
    total = len(deck)
    index = clamp_index(index, total)
    view = render_descriptor(outline, deck[index], index + 1)
    return SlidePreview(slide=view, navigation=navigation_state(index, total))


def _get_environment() -> Environment:
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )
    return _environment


def render_html(preview: SlidePreview) -> str:
    """Render a slide preview as an HTML fragment."""
    template = _get_environment().get_template("slide.html")
    return template.render(slide=preview.slide, navigation=preview.navigation)


@dataclass
class PreviewNavigator:
    """
    Read-only slide navigation over one outline.

    Uses dataclass for the mutable current index; the outline and its deck
    are never modified.
    """
    outline: Outline
    deck: Deck = field(init=False)
    index: int = 0

    def __post_init__(self) -> None:
        self.deck = expand(self.outline)
        self.index = clamp_index(self.index, len(self.deck))

    @property
    def total(self) -> int:
        return len(self.deck)

    @property
    def state(self) -> NavigationState:
        return navigation_state(self.index, self.total)

    def current(self) -> SlidePreview:
        """Render the slide at the current index."""
        return render_slide(self.outline, self.deck, self.index)

    def advance(self) -> SlidePreview:
        """Move to the next slide; stays put on the last one."""
        if self.index < self.total - 1:
            self.index += 1
        return self.current()

    def retreat(self) -> SlidePreview:
        """Move to the previous slide; stays put on the first one."""
        if self.index > 0:
            self.index -= 1
        return self.current()

    def go_to(self, index: int) -> SlidePreview:
        """Jump to ``index``, clamped into the deck."""
        self.index = clamp_index(index, self.total)
        return self.current()
