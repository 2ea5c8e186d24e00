"""Text helpers shared by renderables, reports and tools."""

from __future__ import annotations

import re
from typing import Any

from alikepack.core.exceptions import NotesValidationError

MIN_TRUNCATE_LENGTH = 12
MAX_NOTE_LINES = 100
MAX_NOTE_LINE_LENGTH = 120
MAX_TITLE_LENGTH = 64

# Printable ASCII, excluding backslash.
_PRINTABLE_RE = re.compile(r"[ -\[\]-~]*")


def truncate(text: str, length: int) -> str:
    """Shorten ``text`` to ``length`` characters, replacing its middle with ``...``.

    Roughly the first 70% of the budget keeps the head of the text and the
    remainder (never fewer than four characters) keeps its tail.

    Raises:
        ValueError: If ``length`` is less than 12.
    """
    if length < MIN_TRUNCATE_LENGTH:
        raise ValueError(f"truncate(): `length` {length} is < {MIN_TRUNCATE_LENGTH}")
    if len(text) <= length:
        return text
    post_length, pre_length = truncation_lengths(length)
    return f"{text[:pre_length]}...{text[-post_length:]}"


def truncation_lengths(length: int) -> tuple[int, int]:
    """Return ``(tail, head)`` character counts kept when truncating to ``length``."""
    post_length = max(4, length - int(length * 0.7))
    pre_length = length - post_length - 3
    return post_length, pre_length


def is_printable(text: str) -> bool:
    return _PRINTABLE_RE.fullmatch(text) is not None


def validate_title(value: Any, *, label: str) -> str:
    """Check a suite title or section subtitle and return it unchanged."""
    if not isinstance(value, str):
        raise NotesValidationError(f"`{label}` is type '{type(value).__name__}' not 'str'")
    if len(value) > MAX_TITLE_LENGTH:
        raise NotesValidationError(
            f"`{label}` has length {len(value)} which is > {MAX_TITLE_LENGTH}"
        )
    if not is_printable(value):
        raise NotesValidationError(
            f"`{label}` contains a character outside printable ASCII or a backslash"
        )
    return value


def normalize_notes(notes: Any, *, label: str = "notes") -> list[str]:
    """Turn ``None``, a single line or a sequence of lines into validated note lines.

    Raises:
        NotesValidationError: If there are more than 100 lines, a line is longer
            than 120 characters, or a line contains anything other than printable
            ASCII (backslash excluded).
    """
    if notes is None:
        return []
    if isinstance(notes, str):
        lines = [notes]
    elif isinstance(notes, (list, tuple)):
        lines = list(notes)
    else:
        raise NotesValidationError(
            f"`{label}` is type '{type(notes).__name__}' not 'str', 'list' or 'tuple'"
        )

    if len(lines) > MAX_NOTE_LINES:
        raise NotesValidationError(
            f"`{label}` has {len(lines)} lines which is > {MAX_NOTE_LINES}"
        )
    for index, line in enumerate(lines):
        name = label if isinstance(notes, str) else f"{label}[{index}]"
        if not isinstance(line, str):
            raise NotesValidationError(f"`{name}` is type '{type(line).__name__}' not 'str'")
        if len(line) > MAX_NOTE_LINE_LENGTH:
            raise NotesValidationError(
                f"`{name}` has length {len(line)} which is > {MAX_NOTE_LINE_LENGTH}"
            )
        if not is_printable(line):
            raise NotesValidationError(
                f"`{name}` contains a character outside printable ASCII or a backslash"
            )
    return lines
