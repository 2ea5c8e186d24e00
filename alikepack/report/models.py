"""Data models for recorded results and section breaks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from alikepack.core.exceptions import NotesValidationError
from alikepack.core.renderable import Renderable
from alikepack.core.text import normalize_notes, validate_title
from alikepack.core.types import RESULT_STATUSES, ResultStatus
from alikepack.report.exceptions import ResultError

FAILING_STATUSES: tuple[str, ...] = ("FAIL", "UNEXPECTED_EXCEPTION")


def _require_index(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ResultError(f"`{name}` must be an int, got {type(value).__name__}")
    if value < minimum:
        raise ResultError(f"`{name}` {value} is < {minimum}")


@dataclass(frozen=True, slots=True)
class Section:
    """Marks the start of a named group of results."""

    index: int
    subtitle: str

    def __post_init__(self) -> None:
        _require_index("index", self.index, 1)
        validate_title(self.subtitle, label="subtitle")

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "section", "index": self.index, "subtitle": self.subtitle}


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of a single assertion, with both values already rendered."""

    actually: Renderable
    expected: Renderable
    notes: str
    section_index: int
    status: ResultStatus

    def __post_init__(self) -> None:
        for name in ("actually", "expected"):
            value = getattr(self, name)
            if not isinstance(value, Renderable):
                raise ResultError(f"`{name}` must be a Renderable, got {type(value).__name__}")
        if not isinstance(self.notes, str):
            raise ResultError(f"`notes` must be a str, got {type(self.notes).__name__}")
        try:
            normalize_notes(self.note_lines)
        except NotesValidationError as error:
            raise ResultError(str(error)) from error
        _require_index("section_index", self.section_index, 0)
        if self.status not in RESULT_STATUSES:
            raise ResultError(
                f"Unsupported result status: {self.status}. "
                f"Supported values: {', '.join(RESULT_STATUSES)}."
            )

    @property
    def note_lines(self) -> list[str]:
        return self.notes.split("\n") if self.notes else []

    @property
    def failed(self) -> bool:
        return self.status in FAILING_STATUSES

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "result",
            "actually": self.actually.to_dict(),
            "expected": self.expected.to_dict(),
            "notes": self.notes,
            "section_index": self.section_index,
            "status": self.status,
        }
