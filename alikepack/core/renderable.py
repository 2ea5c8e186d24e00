"""Render arbitrary values to single-line text with typed highlight spans."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import functools
import inspect
import json
import logging
import math
import re
from typing import Any, NamedTuple

from alikepack.core.exceptions import RenderableError
from alikepack.core.highlight import Highlight
from alikepack.core.text import truncate, truncation_lengths
from alikepack.core.types import DEFAULT_MAX_DEPTH, MAX_TEXT_LENGTH, HighlightKind
from alikepack.core.values import classify_value, is_opaque_value, own_properties

logger = logging.getLogger(__name__)

SHORT_TEXT_LENGTH = 110
OVERVIEW_LENGTH = 100
ANONYMOUS_NAME = "<anon>"
CIRCULAR_TEXT = "[Circular]"

_WHITESPACE_RE = re.compile(r"\s+")
_REGEXP_FLAG_LETTERS: tuple[tuple[re.RegexFlag, str], ...] = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.LOCALE, "L"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


class RenderedParts(NamedTuple):
    highlights: tuple[Highlight, ...]
    text: str


def renderable_from(
    value: Any,
    start: int = 0,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> RenderedParts:
    """Render ``value`` as if it began at character offset ``start``.

    Every highlight offset in the result is absolute, so a caller embedding the
    text at position ``start`` of a larger line can use the spans directly.
    Nesting deeper than ``max_depth`` is elided as ``[...]`` or ``{...}`` and a
    container that contains itself is shown as ``[Circular]``.
    """
    highlights: list[Highlight] = []
    text = _render(value, start, max_depth, frozenset(), highlights)
    return RenderedParts(highlights=tuple(highlights), text=text)


def quote_string(text: str) -> str:
    if '"' in text and "'" not in text:
        return f"'{text}'"
    return json.dumps(text, ensure_ascii=False)


def format_number(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)
    if isinstance(value, Decimal) and value.is_nan():
        return "NaN"
    return str(value)


def describe_callable(value: Any) -> str:
    target = value.func if isinstance(value, functools.partial) else value
    name = getattr(target, "__name__", "") or ""
    if not name or name == "<lambda>":
        name = ANONYMOUS_NAME
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        logger.debug("No signature available for %r", value)
        return f"{name}(...)"
    parameters = str(signature.replace(return_annotation=inspect.Signature.empty))
    return f"{name}({_WHITESPACE_RE.sub('', parameters)[1:-1]})"


def describe_pattern(value: re.Pattern) -> str:
    pattern = value.pattern
    if isinstance(pattern, bytes):
        pattern = pattern.decode("ascii", errors="backslashreplace")
    flags = "".join(letter for flag, letter in _REGEXP_FLAG_LETTERS if value.flags & flag)
    return f"/{pattern}/{flags}"


def describe_exception(value: BaseException) -> str:
    message = str(value)
    return f"{type(value).__name__}({quote_string(message) if message else ''})"


def _leaf_text(value: Any, kind: str) -> tuple[str, HighlightKind] | None:
    if kind == "null":
        return "null", "NULLISH"
    if kind == "undefined":
        return "undefined", "NULLISH"
    if kind == "boolean":
        return ("true" if value else "false"), "BOOLNUM"
    if kind == "number":
        return format_number(value), "BOOLNUM"
    if kind == "bigint":
        return f"{value}n", "BOOLNUM"
    if kind == "string":
        return quote_string(value), "STRING"
    if kind == "bytes":
        return repr(bytes(value) if isinstance(value, memoryview) else value), "STRING"
    if kind == "symbol":
        return f"{type(value).__name__}.{value.name}", "SYMBOL"
    if kind == "function":
        return describe_callable(value), "FUNCTION"
    if kind == "regexp":
        return describe_pattern(value), "REGEXP"
    if kind == "error":
        return describe_exception(value), "ERROR"
    if kind == "object" and is_opaque_value(value):
        return repr(value) or f"{type(value).__name__}()", "OBJECT"
    return None


def _render(
    value: Any,
    start: int,
    depth: int,
    ancestors: frozenset[int],
    highlights: list[Highlight],
) -> str:
    kind = classify_value(value)
    leaf = _leaf_text(value, kind)
    if leaf is not None:
        text, highlight_kind = leaf
        highlights.append(Highlight(kind=highlight_kind, start=start, stop=start + len(text)))
        return text

    container_kind: HighlightKind = "ARRAY" if kind == "array" else "OBJECT"
    if id(value) in ancestors:
        logger.debug("Circular reference to %s elided", type(value).__name__)
        highlights.append(
            Highlight(kind=container_kind, start=start, stop=start + len(CIRCULAR_TEXT))
        )
        return CIRCULAR_TEXT
    if depth <= 0:
        elided = "[...]" if kind == "array" else "{...}"
        highlights.append(Highlight(kind=container_kind, start=start, stop=start + len(elided)))
        return elided

    inner_ancestors = ancestors | {id(value)}
    if kind == "array":
        return _render_sequence(value, start, depth, inner_ancestors, highlights)
    if kind == "set":
        return _render_set(value, start, depth, inner_ancestors, highlights)
    return _render_object(value, start, depth, inner_ancestors, highlights)


def _render_sequence(
    value: Any,
    start: int,
    depth: int,
    ancestors: frozenset[int],
    highlights: list[Highlight],
) -> str:
    opener, closer = ("( ", " )") if isinstance(value, tuple) else ("[ ", " ]")
    if len(value) == 0:
        return opener.strip() + closer.strip()

    parts: list[str] = []
    position = start + len(opener)
    for item in value:
        text = _render(item, position, depth - 1, ancestors, highlights)
        parts.append(text)
        position += len(text) + 2
    return f"{opener}{', '.join(parts)}{closer}"


def _render_set(
    value: Any,
    start: int,
    depth: int,
    ancestors: frozenset[int],
    highlights: list[Highlight],
) -> str:
    if len(value) == 0:
        return f"{type(value).__name__}()"

    rendered: list[tuple[str, list[Highlight]]] = []
    for item in value:
        item_highlights: list[Highlight] = []
        text = _render(item, 0, depth - 1, ancestors, item_highlights)
        rendered.append((text, item_highlights))
    # Set iteration order is arbitrary; sort for stable output.
    rendered.sort(key=lambda pair: pair[0])

    position = start + 2
    for text, item_highlights in rendered:
        highlights.extend(highlight.shifted(position) for highlight in item_highlights)
        position += len(text) + 2
    return "{ " + ", ".join(text for text, _ in rendered) + " }"


def _render_object(
    value: Any,
    start: int,
    depth: int,
    ancestors: frozenset[int],
    highlights: list[Highlight],
) -> str:
    properties = own_properties(value)
    if not properties:
        return "{}"

    parts: list[str] = []
    position = start + 2
    for key, item in properties:
        if isinstance(key, str):
            key_text = key
        else:
            key_text = _render(key, 0, depth - 1, ancestors, [])
        position += len(key_text) + 1
        item_text = _render(item, position, depth - 1, ancestors, highlights)
        parts.append(f"{key_text}:{item_text}")
        position += len(item_text) + 2
    return "{ " + ", ".join(parts) + " }"


def _truncate_parts(
    highlights: tuple[Highlight, ...],
    text: str,
    length: int,
) -> RenderedParts:
    truncated_text = truncate(text, length)
    if truncated_text == text:
        return RenderedParts(highlights=tuple(highlights), text=text)

    post_length, pre_length = truncation_lengths(length)
    tail_start = len(text) - post_length
    shift = pre_length + 3 - tail_start
    clipped: list[Highlight] = []
    for highlight in highlights:
        if highlight.start < pre_length:
            clipped.append(
                Highlight(
                    kind=highlight.kind,
                    start=highlight.start,
                    stop=min(highlight.stop, pre_length),
                )
            )
        if highlight.stop > tail_start:
            clipped.append(
                Highlight(
                    kind=highlight.kind,
                    start=max(highlight.start, tail_start) + shift,
                    stop=highlight.stop + shift,
                )
            )
    return RenderedParts(highlights=tuple(clipped), text=truncated_text)


@dataclass(frozen=True, slots=True)
class Renderable:
    """Rendered text of a value, plus highlight spans over that text."""

    highlights: tuple[Highlight, ...]
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise RenderableError(
                f"Renderable `text` must be a str, got {type(self.text).__name__}."
            )
        if not 1 <= len(self.text) <= MAX_TEXT_LENGTH:
            raise RenderableError(
                f"Renderable `text` length {len(self.text)} is outside 1..{MAX_TEXT_LENGTH}."
            )

        highlights = tuple(self.highlights)
        object.__setattr__(self, "highlights", highlights)
        previous_stop = 0
        for index, highlight in enumerate(highlights):
            if not isinstance(highlight, Highlight):
                raise RenderableError(
                    f"Renderable `highlights[{index}]` is {type(highlight).__name__}, "
                    "not Highlight."
                )
            if highlight.start < previous_stop:
                raise RenderableError(
                    f"Renderable `highlights[{index}]` starts at {highlight.start}, "
                    f"overlapping or preceding the previous span ending at {previous_stop}."
                )
            if highlight.stop > len(self.text):
                raise RenderableError(
                    f"Renderable `highlights[{index}]` stops at {highlight.stop}, "
                    f"past the end of the {len(self.text)}-character text."
                )
            previous_stop = highlight.stop

    @classmethod
    def from_value(cls, value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Renderable:
        parts = renderable_from(value, max_depth=max_depth)
        if len(parts.text) > MAX_TEXT_LENGTH:
            logger.debug(
                "Clipping %d-character rendering to %d characters",
                len(parts.text),
                MAX_TEXT_LENGTH,
            )
            parts = _truncate_parts(parts.highlights, parts.text, MAX_TEXT_LENGTH)
        return cls(highlights=parts.highlights, text=parts.text)

    def is_short(self) -> bool:
        return len(self.text) <= SHORT_TEXT_LENGTH

    @property
    def overview(self) -> str:
        """Text suitable for a one-line summary.

        Quoted strings already carry delimiters; anything else is wrapped in
        backticks.
        """
        if self.text[0] in ("'", '"'):
            return truncate(self.text, OVERVIEW_LENGTH)
        return f"`{truncate(self.text, OVERVIEW_LENGTH - 2)}`"

    def truncated(self, length: int) -> Renderable:
        parts = _truncate_parts(self.highlights, self.text, length)
        return Renderable(highlights=parts.highlights, text=parts.text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "highlights": [highlight.to_dict() for highlight in self.highlights],
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Renderable:
        return cls(
            highlights=tuple(Highlight.from_dict(item) for item in payload["highlights"]),
            text=payload["text"],
        )
