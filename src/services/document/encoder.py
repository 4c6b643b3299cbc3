"""
Presentation document encoder.

Builds a ``.pptx`` file from a lesson outline with python-pptx. The page
order comes from the deck expander so the exported file and the preview
always agree; each page type has its own layout, and content-bearing pages
share a master (background, top bar, footer band, page number).
"""
import logging
import re
from dataclasses import dataclass
from datetime import date
from io import BytesIO
from typing import Mapping, Optional, Union

from pptx import Presentation
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN

from src.core.errors import EncodingFailed, MalformedOutline
from src.models.deck import (
    AgendaSlide,
    ContentPage,
    QASlide,
    SlideDescriptor,
    SummarySlide,
    ThankYouSlide,
    TitleSlide,
)
from src.models.outline import Outline, ensure_outline
from src.services import theme
from src.services.deck import expand

from . import layout
from .shapes import (
    add_background_picture,
    add_bullets,
    add_rect,
    add_slide_number,
    add_text,
    full_page_rect,
    rgb,
    set_notes,
)

logger = logging.getLogger(__name__)

PPTX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
FILENAME_PREFIX = "clevio-coder-camp"
SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse every non-alphanumeric run into one dash."""
    slug = SLUG_PATTERN.sub("-", text.lower()).strip("-")
    return slug or "untitled"


def build_filename(title: str, today: Optional[date] = None) -> str:
    """File name for an exported outline, stamped with the current date."""
    today = today or date.today()
    return f"{FILENAME_PREFIX}-{slugify(title)}-{today.isoformat()}.pptx"


@dataclass(frozen=True)
class EncodedDocument:
    """An exported presentation and its download metadata."""
    filename: str
    content: bytes
    page_count: int
    media_type: str = PPTX_MEDIA_TYPE


class DocumentEncoder:
    """
    Renders one outline into a presentation.

    An encoder instance builds exactly one document; create a new one per
    export.
    """

    def __init__(self, outline: Union[Outline, Mapping]):
        self.outline = ensure_outline(outline)
        self.prs = Presentation()
        self.prs.slide_width = layout.PAGE_WIDTH
        self.prs.slide_height = layout.PAGE_HEIGHT
        self._blank_layout = self.prs.slide_layouts[layout.BLANK_LAYOUT_INDEX]

    @property
    def _content_panel(self) -> dict:
        """Panel styling for text on master pages over a custom background."""
        if self.outline.content_background is None:
            return {}
        return {"fill": theme.WHITE, "fill_opacity": theme.CONTENT_PANEL_OPACITY}

    def build(self) -> bytes:
        """Render every page and serialize the presentation."""
        deck = expand(self.outline)
        for position, descriptor in enumerate(deck, start=1):
            slide = self.prs.slides.add_slide(self._blank_layout)
            if descriptor.uses_master:
                self._apply_master(slide, position)
            self._render(slide, descriptor)

        props = self.prs.core_properties
        props.title = self.outline.title
        props.subject = self.outline.subtitle
        props.author = theme.BRAND_LABEL

        buffer = BytesIO()
        self.prs.save(buffer)
        return buffer.getvalue()

    def _render(self, slide, descriptor: SlideDescriptor) -> None:
        if isinstance(descriptor, TitleSlide):
            self._render_title(slide, descriptor)
        elif isinstance(descriptor, AgendaSlide):
            self._render_list_page(slide, theme.AGENDA_HEADING, descriptor.items, size=18, line_spacing=30)
        elif isinstance(descriptor, ContentPage):
            self._render_content(slide, descriptor)
        elif isinstance(descriptor, SummarySlide):
            self._render_list_page(slide, theme.SUMMARY_HEADING, descriptor.outcomes, size=20, line_spacing=30)
        elif isinstance(descriptor, QASlide):
            self._render_qa(slide)
        elif isinstance(descriptor, ThankYouSlide):
            self._render_thank_you(slide)
        else:
            raise TypeError(f"Unsupported slide descriptor: {type(descriptor).__name__}")

    # --- Master ---

    def _apply_master(self, slide, position: int) -> None:
        background = self.outline.content_background
        if background is not None:
            add_background_picture(slide, background, self.prs.slide_width, self.prs.slide_height)
        else:
            fill = slide.background.fill
            fill.solid()
            fill.fore_color.rgb = rgb(theme.WHITE)

        add_rect(slide, layout.TOP_BAR, theme.PRIMARY)
        add_rect(slide, layout.FOOTER_BAND, theme.SECONDARY)
        add_text(
            slide, theme.BRAND_LABEL, layout.FOOTER_LABEL,
            size=10, color=theme.WHITE, font=theme.HEADING_FONT, anchor=MSO_ANCHOR.MIDDLE,
        )
        add_slide_number(
            slide, position, layout.PAGE_NUMBER,
            size=10, color=theme.WHITE, font=theme.HEADING_FONT,
        )

    # --- Pages ---

    def _render_title(self, slide, descriptor: TitleSlide) -> None:
        background = self.outline.title_background
        if background is not None:
            add_background_picture(slide, background, self.prs.slide_width, self.prs.slide_height)
            panel = {"fill": theme.WHITE, "fill_opacity": theme.TITLE_PANEL_OPACITY}
            title_color = subtitle_color = theme.TEXT
        else:
            full_page_rect(slide, theme.SECONDARY)
            full_page_rect(slide, theme.PRIMARY, theme.TITLE_OVERLAY_OPACITY)
            panel = {}
            title_color, subtitle_color = theme.WHITE, theme.ACCENT

        add_text(
            slide, descriptor.title, layout.TITLE,
            size=44, bold=True, color=title_color, font=theme.HEADING_FONT,
            anchor=MSO_ANCHOR.MIDDLE, **panel,
        )
        add_text(
            slide, descriptor.subtitle, layout.SUBTITLE,
            size=24, color=subtitle_color, font=theme.HEADING_FONT,
            anchor=MSO_ANCHOR.MIDDLE, **panel,
        )
        if background is None:
            add_text(
                slide, theme.BRAND_WORDMARK, layout.WORDMARK,
                size=14, bold=True, color=theme.WHITE, font=theme.HEADING_FONT,
            )

    def _add_heading(self, slide, text: str) -> None:
        add_text(
            slide, text, layout.HEADING,
            size=32, bold=True, color=theme.SECONDARY, font=theme.HEADING_FONT,
            anchor=MSO_ANCHOR.MIDDLE, **self._content_panel,
        )

    def _render_list_page(self, slide, heading: str, items, *, size: int, line_spacing: int) -> None:
        self._add_heading(slide, heading)
        add_bullets(
            slide, items, layout.BODY,
            size=size, color=theme.TEXT, font=theme.BODY_FONT, line_spacing=line_spacing,
            **self._content_panel,
        )

    def _render_content(self, slide, descriptor: ContentPage) -> None:
        source = descriptor.slide
        code = source.code_example

        self._add_heading(slide, source.title)
        add_bullets(
            slide, source.bullet_points,
            layout.BODY_WITH_CODE if code is not None else layout.BODY,
            size=20, color=theme.TEXT, font=theme.BODY_FONT, line_spacing=28,
            **self._content_panel,
        )

        if code is not None:
            add_rect(slide, layout.CODE_BAND, theme.LIGHT_GRAY)
            add_text(
                slide, code.code, layout.CODE_TEXT,
                size=12, color=theme.TEXT, font=theme.CODE_FONT,
            )

        if source.speaker_notes:
            set_notes(slide, source.speaker_notes)

    def _render_qa(self, slide) -> None:
        full_page_rect(slide, theme.SECONDARY)
        add_text(
            slide, theme.QA_HEADING, layout.CENTER_HEADING,
            size=60, bold=True, color=theme.WHITE, font=theme.HEADING_FONT,
            align=PP_ALIGN.CENTER, anchor=MSO_ANCHOR.MIDDLE,
        )

    def _render_thank_you(self, slide) -> None:
        full_page_rect(slide, theme.PRIMARY)
        add_text(
            slide, theme.THANK_YOU_HEADING, layout.CENTER_HEADING,
            size=50, bold=True, color=theme.WHITE, font=theme.HEADING_FONT,
            align=PP_ALIGN.CENTER, anchor=MSO_ANCHOR.MIDDLE,
        )
        add_text(
            slide, theme.BRAND_LABEL, layout.CENTER_SUBHEADING,
            size=24, color=theme.WHITE, font=theme.BODY_FONT,
            align=PP_ALIGN.CENTER, anchor=MSO_ANCHOR.MIDDLE,
        )


def encode(outline: Union[Outline, Mapping], today: Optional[date] = None) -> EncodedDocument:
    """
    Encode an outline as a presentation document.

    Args:
        outline: The outline to export
        today: Date stamped into the file name (defaults to today)

    Returns:
        The encoded document

    Raises:
        MalformedOutline: if the outline is invalid; nothing is built
        EncodingFailed: if the document could not be produced
    """
    encoder = DocumentEncoder(outline)
    try:
        content = encoder.build()
    except (MalformedOutline, EncodingFailed):
        raise
    except Exception as e:
        logger.exception(f"Failed to encode '{encoder.outline.title}': {e}")
        raise EncodingFailed(f"Could not build presentation: {e}") from e

    page_count = len(encoder.prs.slides)
    logger.info(f"Encoded '{encoder.outline.title}' ({page_count} pages, {len(content)} bytes)")
    return EncodedDocument(
        filename=build_filename(encoder.outline.title, today),
        content=content,
        page_count=page_count,
    )
