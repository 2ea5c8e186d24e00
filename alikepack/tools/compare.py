"""Value assertion tools: ``alike`` and ``is_equal``."""

from __future__ import annotations

from typing import Any, Callable

from alikepack.config import get_active_config
from alikepack.core.compare import determine_whether_alike
from alikepack.core.renderable import Renderable
from alikepack.core.text import normalize_notes
from alikepack.tools.common import build_overview, check_suite
from alikepack.tools.exceptions import AlikeAssertionError

Notes = str | list[str] | tuple[str, ...] | None


def alike(actually: Any, expected: Any, notes: Notes = None, *, suite: Any = None) -> str:
    """Check that two values are deeply alike.

    Unbound, a failure raises ``AlikeAssertionError``; bound to a suite, the
    outcome is recorded there instead. Either way the overview is returned on
    success.
    """
    max_depth = get_active_config().max_depth
    return _check(
        "alike():",
        actually,
        expected,
        notes,
        suite,
        lambda left, right: determine_whether_alike(left, right, max_depth),
    )


def is_equal(actually: Any, expected: Any, notes: Notes = None, *, suite: Any = None) -> str:
    """Check that ``actually == expected``, reporting like :func:`alike`."""
    return _check(
        "is_equal():",
        actually,
        expected,
        notes,
        suite,
        lambda left, right: bool(left == right),
    )


def _check(
    begin: str,
    actually: Any,
    expected: Any,
    notes: Notes,
    suite: Any,
    predicate: Callable[[Any, Any], bool],
) -> str:
    check_suite(begin, suite)
    note_lines = normalize_notes(notes)
    passed = predicate(actually, expected)

    render_depth = get_active_config().render_depth
    actually_renderable = Renderable.from_value(actually, max_depth=render_depth)
    expected_renderable = Renderable.from_value(expected, max_depth=render_depth)

    if passed:
        details = [f"`actually` is {actually_renderable.overview} as expected"]
    else:
        details = [
            f"`actually` is {actually_renderable.overview}",
            f"`expected` is {expected_renderable.overview}",
        ]
    status = "PASS" if passed else "FAIL"
    overview = build_overview(status, note_lines, details)

    if suite is None:
        if not passed:
            raise AlikeAssertionError(overview)
        return overview

    if passed:
        auto_notes = ["{{actually}} as expected"]
    elif actually_renderable.is_short() and expected_renderable.is_short():
        auto_notes = ["actually: {{actually}}", "expected: {{expected}}"]
    else:
        auto_notes = ["actually:", "{{actually}}", "expected:", "{{expected}}"]
    suite.add_result(actually_renderable, expected_renderable, note_lines + auto_notes, status)
    return overview
