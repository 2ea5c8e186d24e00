"""Rendering of a suite's results as plain text, ANSI, HTML or JSON."""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any

from rich.text import Text

from alikepack.core.text import MIN_TRUNCATE_LENGTH
from alikepack.core.types import FORMATTINGS, VERBOSITIES, Formatting, Verbosity
from alikepack.report.exceptions import ReportConfigError
from alikepack.report.models import Result, Section
from alikepack.report.styling import STATUS_STYLES, export_document, highlighted_text

if TYPE_CHECKING:
    from alikepack.report.suite import Suite

logger = logging.getLogger(__name__)

LINE_WIDTH = 120
CONTINUATION_PREFIX = "    : "

_PLACEHOLDER_RE = re.compile(r"\{\{(actually|expected)\}\}")

ResultGroup = tuple[Section | None, list[Result]]


def summarize(fail_tally: int, pass_tally: int, pending_tally: int) -> tuple[str, str | None]:
    """Return the one-sentence summary and the status whose style it takes."""
    total = fail_tally + pass_tally + pending_tally
    if total == 0:
        return "No tests were run.", None
    if pending_tally:
        noun = "test" if pending_tally == 1 else "tests"
        return f"{pending_tally} {noun} still pending.", "PENDING"
    if fail_tally:
        if fail_tally < total:
            return f"{fail_tally} of {total} tests failed.", "FAIL"
        return _all_of(total, "failed"), "FAIL"
    return _all_of(total, "passed"), "PASS"


def _all_of(total: int, outcome: str) -> str:
    if total == 1:
        return f"The test {outcome}."
    if total == 2:
        return f"Both tests {outcome}."
    return f"All {total} tests {outcome}."


def group_results(
    results_and_sections: tuple[Result | Section, ...] | list[Result | Section],
    *,
    filter_sections: str = "",
    filter_results: str = "",
    failures_only: bool = False,
) -> list[ResultGroup]:
    """Group results under their sections, dropping anything filtered out.

    Results recorded before the first section belong to an untitled group,
    which is hidden whenever ``filter_sections`` is set. Groups left without
    results are omitted.
    """
    groups: list[ResultGroup] = []
    current_section: Section | None = None
    current_results: list[Result] = []
    for item in results_and_sections:
        if isinstance(item, Section):
            groups.append((current_section, current_results))
            current_section = item
            current_results = []
        else:
            current_results.append(item)
    groups.append((current_section, current_results))

    selected: list[ResultGroup] = []
    for section, results in groups:
        if filter_sections and (section is None or filter_sections not in section.subtitle):
            continue
        kept = [
            result
            for result in results
            if (not failures_only or result.failed)
            and (not filter_results or filter_results in result.notes)
        ]
        if kept:
            selected.append((section, kept))
    return selected


def expand_note_line(line: str, result: Result, *, budget: int | None) -> Text:
    """Substitute ``{{actually}}``/``{{expected}}`` with the highlighted values.

    When ``budget`` is given, substituted values are truncated so the line
    fits in that many columns (each value keeps at least 12 characters).
    """
    pieces = _PLACEHOLDER_RE.split(line)
    literals = pieces[0::2]
    names = pieces[1::2]
    per_value: int | None = None
    if budget is not None and names:
        available = budget - sum(len(literal) for literal in literals)
        per_value = max(MIN_TRUNCATE_LENGTH, available // len(names))

    expanded = Text()
    for index, piece in enumerate(pieces):
        if index % 2 == 0:
            expanded.append(piece)
            continue
        renderable = result.actually if piece == "actually" else result.expected
        if per_value is not None:
            renderable = renderable.truncated(per_value)
        expanded.append_text(highlighted_text(renderable))
    return expanded


def render_result(result: Result, verbosity: Verbosity) -> Text:
    lines = result.note_lines
    if verbosity == "VERBOSE":
        lines = lines[:1]

    block = Text()
    block.append(result.status, style=STATUS_STYLES[result.status])
    block.append(":")
    for index, line in enumerate(lines):
        if index == 0:
            prefix_length = len(result.status) + 2
            block.append(" ")
        else:
            prefix_length = len(CONTINUATION_PREFIX)
            block.append("\n" + CONTINUATION_PREFIX)
        budget = None if verbosity == "VERYVERY" else LINE_WIDTH - prefix_length
        block.append_text(expand_note_line(line, result, budget=budget))
    return block


def build_document(suite: Suite, groups: list[ResultGroup], verbosity: Verbosity) -> Text:
    title = suite.title
    document = Text()
    document.append(f"{'-' * len(title)}\n{title}\n{'=' * len(title)}\n\n")

    summary, summary_status = summarize(suite.fail_tally, suite.pass_tally, suite.pending_tally)
    document.append(summary, style=STATUS_STYLES[summary_status] if summary_status else None)

    for section, results in groups:
        document.append("\n\n")
        if section is not None:
            document.append(f"{section.subtitle}\n{'-' * len(section.subtitle)}\n\n")
        for index, result in enumerate(results):
            if index:
                document.append("\n")
            document.append_text(render_result(result, verbosity))

    document.append("\n")
    return document


def render_suite_json(suite: Suite, groups: list[ResultGroup]) -> str:
    items: list[dict[str, Any]] = []
    for section, results in groups:
        if section is not None:
            items.append(section.to_dict())
        items.extend(result.to_dict() for result in results)

    summary, _ = summarize(suite.fail_tally, suite.pass_tally, suite.pending_tally)
    payload = {
        "title": suite.title,
        "summary": summary,
        "fail_tally": suite.fail_tally,
        "pass_tally": suite.pass_tally,
        "pending_tally": suite.pending_tally,
        "results_and_sections": items,
    }
    return json.dumps(payload, ensure_ascii=True, sort_keys=True, indent=2) + "\n"


def render_suite(
    suite: Suite,
    *,
    filter_sections: str = "",
    filter_results: str = "",
    formatting: Formatting = "PLAIN",
    verbosity: Verbosity = "QUIET",
) -> str:
    """Render a suite's heading, summary and details.

    ``QUIET`` lists failing results only, ``VERBOSE`` gives one line per
    result, ``VERY`` every note line and ``VERYVERY`` every note line with
    values left untruncated.
    """
    if formatting not in FORMATTINGS:
        raise ReportConfigError(
            f"Unsupported formatting: {formatting}. Supported values: {', '.join(FORMATTINGS)}."
        )
    if verbosity not in VERBOSITIES:
        raise ReportConfigError(
            f"Unsupported verbosity: {verbosity}. Supported values: {', '.join(VERBOSITIES)}."
        )
    for name, value in (("filter_sections", filter_sections), ("filter_results", filter_results)):
        if not isinstance(value, str):
            raise ReportConfigError(f"`{name}` must be a str, got {type(value).__name__}")

    groups = group_results(
        suite.results_and_sections,
        filter_sections=filter_sections,
        filter_results=filter_results,
        failures_only=verbosity == "QUIET",
    )
    if formatting == "JSON":
        output = render_suite_json(suite, groups)
    else:
        output = export_document(build_document(suite, groups, verbosity), formatting)
    logger.debug(
        "Rendered suite %r as %s/%s: %d groups, %d characters",
        suite.title,
        formatting,
        verbosity,
        len(groups),
        len(output),
    )
    return output
