"""Suite-bound tools: sections, rendering and binding tools to a shared suite."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable

from alikepack.core.types import Verbosity
from alikepack.report.models import Section
from alikepack.report.suite import Suite
from alikepack.tools.common import check_suite
from alikepack.tools.exceptions import ToolBindingError

DEFAULT_SUITE_TITLE = "Untitled Test Suite"


def add_section(subtitle: str, *, suite: Any = None) -> Section:
    """Start a new section in the bound suite."""
    check_suite("add_section():", suite, required=True)
    return suite.add_section(subtitle)


def render_plain(
    filter_sections: str = "",
    filter_results: str = "",
    verbosity: Verbosity | None = None,
    *,
    suite: Any = None,
) -> str:
    """Render the bound suite without colours or styling."""
    check_suite("render_plain():", suite, required=True)
    return suite.render(filter_sections, filter_results, "PLAIN", verbosity)


def render_ansi(
    filter_sections: str = "",
    filter_results: str = "",
    verbosity: Verbosity | None = None,
    *,
    suite: Any = None,
) -> str:
    """Render the bound suite with ANSI colours."""
    check_suite("render_ansi():", suite, required=True)
    return suite.render(filter_sections, filter_results, "ANSI", verbosity)


def _accepts_suite(tool: Callable[..., Any]) -> bool:
    try:
        parameters = inspect.signature(tool).parameters
    except (TypeError, ValueError):
        return False
    parameter = parameters.get("suite")
    if parameter is not None:
        return parameter.kind in (
            inspect.Parameter.KEYWORD_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        )
    return any(item.kind is inspect.Parameter.VAR_KEYWORD for item in parameters.values())


def bind_to_suite(
    title_or_suite: str | Suite,
    *tools: Callable[..., Any],
) -> tuple[Suite, tuple[Callable[..., Any], ...]]:
    """Bind tools to one shared suite.

    ``title_or_suite`` is either an existing :class:`Suite` or the title for a
    new one (an empty title becomes ``"Untitled Test Suite"``). Each tool must
    accept a ``suite`` keyword argument; the returned tools have it filled in.

    Raises:
        ToolBindingError: If ``title_or_suite`` is neither a string nor a suite,
            or a tool cannot take a ``suite`` keyword.
    """
    begin = "bind_to_suite():"
    if isinstance(title_or_suite, Suite):
        suite = title_or_suite
    elif isinstance(title_or_suite, str):
        suite = Suite(title=title_or_suite or DEFAULT_SUITE_TITLE)
    else:
        raise ToolBindingError(
            f"{begin} `title_or_suite` is type '{type(title_or_suite).__name__}' "
            "not 'str' or 'Suite'"
        )

    bound: list[Callable[..., Any]] = []
    for index, tool in enumerate(tools):
        if not callable(tool):
            raise ToolBindingError(
                f"{begin} `tools[{index}]` is type '{type(tool).__name__}' not callable"
            )
        if not _accepts_suite(tool):
            raise ToolBindingError(
                f"{begin} `tools[{index}]` ({getattr(tool, '__name__', repr(tool))}) "
                "has no `suite` keyword parameter"
            )
        bound.append(functools.update_wrapper(functools.partial(tool, suite=suite), tool))
    return suite, tuple(bound)
