"""Core value model, comparator and renderer for AlikeKit."""

from alikepack.core.compare import determine_whether_alike
from alikepack.core.exceptions import (
    AlikeError,
    HighlightError,
    NotesValidationError,
    RenderableError,
)
from alikepack.core.highlight import Highlight
from alikepack.core.renderable import Renderable, RenderedParts, renderable_from
from alikepack.core.text import normalize_notes, truncate, validate_title
from alikepack.core.types import (
    DEFAULT_MAX_DEPTH,
    HIGHLIGHT_KINDS,
    MAX_TEXT_LENGTH,
    HighlightKind,
    ValueKind,
)
from alikepack.core.values import UNDEFINED, classify_value

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "HIGHLIGHT_KINDS",
    "MAX_TEXT_LENGTH",
    "HighlightKind",
    "ValueKind",
    "UNDEFINED",
    "AlikeError",
    "HighlightError",
    "NotesValidationError",
    "RenderableError",
    "Highlight",
    "Renderable",
    "RenderedParts",
    "classify_value",
    "determine_whether_alike",
    "renderable_from",
    "normalize_notes",
    "truncate",
    "validate_title",
]
