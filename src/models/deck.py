"""Slide descriptor models: the typed entries of an expanded deck."""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .outline import ContentSlide


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def uses_master(self) -> bool:
        """Whether the page carries the shared background, footer and page number."""
        return False


class TitleSlide(_Descriptor):
    kind: Literal["title"] = "title"
    title: str
    subtitle: str = ""


class AgendaSlide(_Descriptor):
    kind: Literal["agenda"] = "agenda"
    items: tuple[str, ...] = Field(default=(), description="Content slide titles, in outline order")

    @property
    def uses_master(self) -> bool:
        return True


class ContentPage(_Descriptor):
    kind: Literal["content"] = "content"
    slide: ContentSlide

    @property
    def uses_master(self) -> bool:
        return True


class SummarySlide(_Descriptor):
    kind: Literal["summary"] = "summary"
    outcomes: tuple[str, ...] = Field(default=(), description="Learning outcomes")

    @property
    def uses_master(self) -> bool:
        return True


class QASlide(_Descriptor):
    kind: Literal["qa"] = "qa"


class ThankYouSlide(_Descriptor):
    kind: Literal["thank_you"] = "thank_you"


SlideDescriptor = Annotated[
    Union[TitleSlide, AgendaSlide, ContentPage, SummarySlide, QASlide, ThankYouSlide],
    Field(discriminator="kind"),
]

Deck = tuple[SlideDescriptor, ...]
