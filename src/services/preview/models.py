"""View models produced by the preview renderer."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ColorScheme(str, Enum):
    """Text colour scheme of a slide."""

    # Light text on the themed background (or dark text on plain white)
    THEME = "theme"
    # Dark text on translucent white panels over a custom background image
    IMAGE = "image"


class FooterView(BaseModel):
    """Persistent footer of content-bearing slides."""

    model_config = ConfigDict(frozen=True)

    label: str
    slide_number: int = Field(..., ge=1, description="1-based position in the full deck")
    background_color: str
    text_color: str


class CodeBlockView(BaseModel):
    """A verbatim, monospaced code listing."""

    model_config = ConfigDict(frozen=True)

    language: str = ""
    code: str
    background_color: str


class SlideView(BaseModel):
    """Everything a UI needs to draw one slide."""

    model_config = ConfigDict(frozen=True)

    kind: str
    heading: str
    subheading: str = ""
    items: tuple[str, ...] = ()
    code: Optional[CodeBlockView] = None
    notes: Optional[str] = None

    color_scheme: ColorScheme = ColorScheme.THEME
    background_color: str = Field(..., description="CSS colour of the slide background")
    background_image: Optional[str] = Field(default=None, description="Data URL of a full-bleed background")
    overlay_color: Optional[str] = None
    overlay_opacity: float = 0.0
    heading_color: str
    text_color: str
    subheading_color: Optional[str] = None
    text_panel: bool = Field(default=False, description="Draw text on translucent white panels")

    wordmark: Optional[str] = None
    footer: Optional[FooterView] = None


class NavigationState(BaseModel):
    """Position of the preview within the deck."""

    model_config = ConfigDict(frozen=True)

    current_index: int = Field(..., ge=0)
    total_count: int = Field(..., ge=1)
    can_go_back: bool
    can_go_forward: bool

    @property
    def progress(self) -> float:
        """Fraction of the deck shown so far, for the progress bar."""
        return (self.current_index + 1) / self.total_count


class SlidePreview(BaseModel):
    """One rendered slide plus the navigation state around it."""

    model_config = ConfigDict(frozen=True)

    slide: SlideView
    navigation: NavigationState
