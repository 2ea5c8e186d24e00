"""Shared plumbing for the assertion tools."""

from __future__ import annotations

from typing import Any

from alikepack.core.text import truncate
from alikepack.core.types import ResultStatus
from alikepack.tools.exceptions import ToolBindingError

CONTINUATION_PREFIX = "    : "
FIRST_NOTE_LENGTH = 114


def check_suite(begin: str, suite: Any, *, required: bool = False) -> None:
    if suite is None:
        if required:
            raise ToolBindingError(
                f"{begin} `suite` is missing; bind this tool with bind_to_suite()"
            )
        return
    if not callable(getattr(suite, "add_result", None)) or not callable(
        getattr(suite, "add_section", None)
    ):
        raise ToolBindingError(
            f"{begin} `suite` is type '{type(suite).__name__}', which is not a Suite"
        )


def build_overview(status: ResultStatus, note_lines: list[str], details: list[str]) -> str:
    """Join a status, the first note line (if any) and detail lines into an overview."""
    lines = [truncate(note_lines[0], FIRST_NOTE_LENGTH)] if note_lines else []
    lines.extend(details)
    return f"{status}: " + f"\n{CONTINUATION_PREFIX}".join(lines)
