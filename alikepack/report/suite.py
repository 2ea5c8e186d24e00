"""Suite bookkeeping: ordered results, section breaks and tallies."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from alikepack.config import get_active_config
from alikepack.core.renderable import Renderable
from alikepack.core.text import normalize_notes, validate_title
from alikepack.core.types import Formatting, ResultStatus, Verbosity
from alikepack.report.formatting import render_suite
from alikepack.report.models import Result, Section

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Suite:
    """Ordered record of results and section breaks, with running tallies."""

    title: str = ""
    _fail_tally: int = field(default=0, init=False, repr=False)
    _pass_tally: int = field(default=0, init=False, repr=False)
    _pending_tally: int = field(default=0, init=False, repr=False)
    _current_section_index: int = field(default=0, init=False, repr=False)
    _results_and_sections: list[Result | Section] = field(
        default_factory=list,
        init=False,
        repr=False,
    )

    def __post_init__(self) -> None:
        validate_title(self.title, label="title")

    @property
    def fail_tally(self) -> int:
        return self._fail_tally

    @property
    def pass_tally(self) -> int:
        return self._pass_tally

    @property
    def pending_tally(self) -> int:
        return self._pending_tally

    @property
    def current_section_index(self) -> int:
        return self._current_section_index

    @property
    def results_and_sections(self) -> tuple[Result | Section, ...]:
        """Snapshot of everything recorded so far, in order."""
        return tuple(self._results_and_sections)

    def add_result(
        self,
        actually: Renderable,
        expected: Renderable,
        notes: str | list[str] | tuple[str, ...] | None,
        status: ResultStatus,
    ) -> Result:
        """Record one result under the current section and update the tallies.

        The result is fully validated before anything about the suite changes.
        """
        note_lines = normalize_notes(notes)
        result = Result(
            actually=actually,
            expected=expected,
            notes="\n".join(note_lines),
            section_index=self._current_section_index,
            status=status,
        )

        if result.failed:
            self._fail_tally += 1
        elif result.status == "PASS":
            self._pass_tally += 1
        else:
            self._pending_tally += 1
        self._results_and_sections.append(result)
        logger.debug(
            "Suite %r recorded %s in section %d",
            self.title,
            result.status,
            result.section_index,
        )

        return result

    def add_section(self, subtitle: str) -> Section:
        section = Section(index=self._current_section_index + 1, subtitle=subtitle)
        self._current_section_index = section.index
        self._results_and_sections.append(section)
        logger.debug("Suite %r opened section %d %r", self.title, section.index, subtitle)

        return section

    def render(
        self,
        filter_sections: str = "",
        filter_results: str = "",
        formatting: Formatting | None = None,
        verbosity: Verbosity | None = None,
    ) -> str:
        """Render the suite, defaulting style and detail to the active config."""
        config = get_active_config()
        return render_suite(
            self,
            filter_sections=filter_sections,
            filter_results=filter_results,
            formatting=formatting if formatting is not None else config.formatting,
            verbosity=verbosity if verbosity is not None else config.verbosity,
        )

    def render_ansi(
        self,
        filter_sections: str = "",
        filter_results: str = "",
        verbosity: Verbosity | None = None,
    ) -> str:
        return self.render(
            filter_sections=filter_sections,
            filter_results=filter_results,
            formatting="ANSI",
            verbosity=verbosity,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "fail_tally": self._fail_tally,
            "pass_tally": self._pass_tally,
            "pending_tally": self._pending_tally,
            "results_and_sections": [item.to_dict() for item in self._results_and_sections],
        }
