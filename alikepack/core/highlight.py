"""Typed character spans inside rendered text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from alikepack.core.exceptions import HighlightError
from alikepack.core.types import HIGHLIGHT_KINDS, MAX_SAFE_INTEGER, HighlightKind


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise HighlightError(
            f"Highlight `{name}` must be an int, got {type(value).__name__}."
        )


@dataclass(frozen=True, slots=True)
class Highlight:
    """Half-open span ``[start, stop)`` tagged with the kind of value it covers."""

    kind: HighlightKind
    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.kind not in HIGHLIGHT_KINDS:
            raise HighlightError(
                f"Unknown highlight kind {self.kind!r}; expected one of "
                f"{', '.join(HIGHLIGHT_KINDS)}."
            )
        _require_int("start", self.start)
        _require_int("stop", self.stop)
        if self.start < 0 or self.start > MAX_SAFE_INTEGER - 1:
            raise HighlightError(
                f"Highlight `start` {self.start} is outside 0..{MAX_SAFE_INTEGER - 1}."
            )
        if self.stop < self.start + 1 or self.stop > MAX_SAFE_INTEGER:
            raise HighlightError(
                f"Highlight `stop` {self.stop} is outside {self.start + 1}..{MAX_SAFE_INTEGER}."
            )

    @property
    def length(self) -> int:
        return self.stop - self.start

    def shifted(self, offset: int) -> Highlight:
        return Highlight(kind=self.kind, start=self.start + offset, stop=self.stop + offset)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "start": self.start, "stop": self.stop}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Highlight:
        return cls(kind=payload["kind"], start=payload["start"], stop=payload["stop"])
