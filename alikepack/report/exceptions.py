"""Report subsystem exceptions."""

from alikepack.core.exceptions import AlikeError


class ReportError(AlikeError):
    """Base class for report errors."""


class ResultError(ReportError, ValueError):
    """Raised when a result or section cannot be recorded."""


class ReportConfigError(ReportError, ValueError):
    """Unsupported formatting, verbosity or filter for suite rendering."""
