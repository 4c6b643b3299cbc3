"""
Page geometry for the encoded document.

Every frame is expressed in percent of the page width and height so the
layout does not depend on the page size.
"""
from dataclasses import dataclass

from pptx.util import Emu, Inches

# 16:9 page, same size PowerPoint uses for its widescreen preset at 10in wide
PAGE_WIDTH = Inches(10)
PAGE_HEIGHT = Inches(5.625)

BLANK_LAYOUT_INDEX = 6


@dataclass(frozen=True)
class Frame:
    """A rectangle in fractional page coordinates (0-100)."""
    x: float
    y: float
    w: float
    h: float

    def to_emu(self, page_width: int = PAGE_WIDTH, page_height: int = PAGE_HEIGHT) -> tuple[Emu, Emu, Emu, Emu]:
        """Convert to ``(left, top, width, height)`` in EMU."""
        return (
            Emu(round(page_width * self.x / 100)),
            Emu(round(page_height * self.y / 100)),
            Emu(round(page_width * self.w / 100)),
            Emu(round(page_height * self.h / 100)),
        )

    @property
    def bottom(self) -> float:
        return self.y + self.h


FULL_PAGE = Frame(0, 0, 100, 100)

# Master
TOP_BAR = Frame(0, 0, 100, 1.8)
FOOTER_BAND = Frame(0, 95, 100, 5)
FOOTER_LABEL = Frame(5, 95, 50, 5)
PAGE_NUMBER = Frame(88, 95, 10, 5)

# Title page
WORDMARK = Frame(5, 8.9, 30, 8.9)
TITLE = Frame(10, 40, 80, 14)
SUBTITLE = Frame(10, 55, 80, 12)

# Master pages
HEADING = Frame(5, 8.9, 90, 14.2)
BODY = Frame(5, 26.7, 90, 64)
BODY_WITH_CODE = Frame(5, 26.7, 90, 38)
CODE_BAND = Frame(5, 66, 90, 27)
CODE_TEXT = Frame(6, 67.5, 88, 24)

# Closing pages
CENTER_HEADING = Frame(0, 40, 100, 20)
CENTER_SUBHEADING = Frame(0, 60, 100, 12)
