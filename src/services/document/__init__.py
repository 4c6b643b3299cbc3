"""PowerPoint document encoding."""

from .encoder import (
    PPTX_MEDIA_TYPE,
    DocumentEncoder,
    EncodedDocument,
    build_filename,
    encode,
    slugify,
)

__all__ = [
    "PPTX_MEDIA_TYPE",
    "DocumentEncoder",
    "EncodedDocument",
    "build_filename",
    "encode",
    "slugify",
]
