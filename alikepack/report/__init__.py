"""Report subsystem for AlikeKit: results, sections, suites and rendering."""

from alikepack.report.exceptions import ReportConfigError, ReportError, ResultError
from alikepack.report.formatting import group_results, render_suite, summarize
from alikepack.report.models import FAILING_STATUSES, Result, Section
from alikepack.report.styling import HIGHLIGHT_STYLES, STATUS_STYLES, highlighted_text
from alikepack.report.suite import Suite

__all__ = [
    "FAILING_STATUSES",
    "HIGHLIGHT_STYLES",
    "STATUS_STYLES",
    "ReportError",
    "ReportConfigError",
    "ResultError",
    "Result",
    "Section",
    "Suite",
    "group_results",
    "highlighted_text",
    "render_suite",
    "summarize",
]
