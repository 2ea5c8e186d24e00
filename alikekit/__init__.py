"""Stable public API surface for AlikeKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Any

from alikepack.config import AlikeConfig, get_active_config, use_config
from alikepack.core import (
    UNDEFINED,
    Highlight,
    Renderable,
    determine_whether_alike,
    truncate,
)
from alikepack.core.types import Formatting, Verbosity
from alikepack.report import Result, Section, Suite
from alikepack.tools import (
    AlikeAssertionError,
    add_section,
    alike,
    bind_to_suite,
    is_equal,
    render_ansi,
    render_plain,
    throws_error,
)

__version__ = "0.1.0"


def compare_alike(actually: Any, expected: Any, *, max_depth: int | None = None) -> bool:
    """Decide whether two values are deeply alike.

    Args:
        actually: The value produced by the code under test.
        expected: The value it should resemble.
        max_depth: Container nesting to descend before treating the rest as
            alike. Defaults to the active config's ``max_depth``.

    Returns:
        ``True`` when the values are alike. Never raises, including for cyclic
        structures.
    """
    depth = get_active_config().max_depth if max_depth is None else max_depth
    return determine_whether_alike(actually, expected, depth)


def render(value: Any, *, max_depth: int | None = None) -> Renderable:
    """Render a value to a single line of text with highlight spans.

    Args:
        value: Any Python value.
        max_depth: Container nesting to show before eliding as ``[...]`` or
            ``{...}``. Defaults to the active config's ``render_depth``.

    Returns:
        Renderable whose highlights cover every scalar inside ``value``.
    """
    depth = get_active_config().render_depth if max_depth is None else max_depth
    return Renderable.from_value(value, max_depth=depth)


__all__ = [
    "__version__",
    "Formatting",
    "Verbosity",
    "UNDEFINED",
    "AlikeAssertionError",
    "AlikeConfig",
    "Highlight",
    "Renderable",
    "Result",
    "Section",
    "Suite",
    "use_config",
    "compare_alike",
    "render",
    "truncate",
    "alike",
    "is_equal",
    "throws_error",
    "add_section",
    "render_plain",
    "render_ansi",
    "bind_to_suite",
]
