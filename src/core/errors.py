"""Exception types shared by the LessonDeck services."""


class LessonDeckError(Exception):
    """Base class for all LessonDeck errors."""


class MalformedOutline(LessonDeckError):
    """The outline handed to the expander or encoder violates a model invariant."""


class EncodingFailed(LessonDeckError):
    """The presentation document could not be produced."""


class GenerationError(LessonDeckError):
    """The generation webhook failed or returned an unusable payload."""
