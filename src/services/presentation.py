"""
Presentation service.

Glue between the API and the rendering core: previews are rendered inline,
exports run the encoder in a worker thread, one at a time.
"""
import asyncio
import logging
from typing import Mapping, Optional, Union

from src.models.outline import Outline, ensure_outline
from src.services.deck import expand
from src.services.preview import SlidePreview, render_slide
from src.services.document import EncodedDocument, encode

logger = logging.getLogger(__name__)


class PresentationService:
    """Preview and export of generated outlines."""

    def __init__(self):
        self._export_lock = asyncio.Lock()

    def preview(self, outline: Union[Outline, Mapping], index: int = 0) -> SlidePreview:
        """Render one slide of the outline's deck; the index is clamped."""
        outline = ensure_outline(outline)
        return render_slide(outline, expand(outline), index)

    async def export(self, outline: Union[Outline, Mapping]) -> EncodedDocument:
        """
        Encode the outline as a presentation file.

        Exports are serialized: a second call waits for the first to finish.
        """
        outline = ensure_outline(outline)
        async with self._export_lock:
            logger.info(f"Exporting '{outline.title}'")
            return await asyncio.to_thread(encode, outline)


# Singleton instance
_presentation_service: Optional[PresentationService] = None


def get_presentation_service() -> PresentationService:
    """Get the singleton presentation service instance."""
    global _presentation_service
    if _presentation_service is None:
        _presentation_service = PresentationService()
    return _presentation_service
