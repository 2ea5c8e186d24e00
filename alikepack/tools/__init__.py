"""Test tools for AlikeKit: assertions, sections and suite binding."""

from alikepack.tools.binding import (
    DEFAULT_SUITE_TITLE,
    add_section,
    bind_to_suite,
    render_ansi,
    render_plain,
)
from alikepack.tools.compare import alike, is_equal
from alikepack.tools.exceptions import AlikeAssertionError, ToolBindingError, ToolError
from alikepack.tools.throws import throws_error

__all__ = [
    "DEFAULT_SUITE_TITLE",
    "ToolError",
    "ToolBindingError",
    "AlikeAssertionError",
    "alike",
    "is_equal",
    "throws_error",
    "add_section",
    "render_plain",
    "render_ansi",
    "bind_to_suite",
]
