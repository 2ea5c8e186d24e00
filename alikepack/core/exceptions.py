"""Core subsystem exceptions."""


class AlikeError(Exception):
    """Base class for AlikeKit errors."""


class HighlightError(AlikeError, ValueError):
    """Raised when a highlight span is malformed."""


class RenderableError(AlikeError, ValueError):
    """Raised when rendered text or its highlights are inconsistent."""


class NotesValidationError(AlikeError, ValueError):
    """Raised when notes, titles or subtitles contain disallowed text."""
