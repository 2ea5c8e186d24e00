"""Test tool exceptions."""

from alikepack.core.exceptions import AlikeError


class ToolError(AlikeError):
    """Base class for test tool errors."""


class ToolBindingError(ToolError, TypeError):
    """Raised when a tool is used without, or bound to, something other than a suite."""


class AlikeAssertionError(AlikeError, AssertionError):
    """Raised by an unbound tool when its check fails.

    The message is the same overview the tool would otherwise return.
    """

    def __init__(self, overview: str) -> None:
        super().__init__(overview)
        self.overview = overview
