"""Exception assertion tool: ``throws_error``."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from alikepack.config import get_active_config
from alikepack.core.renderable import Renderable, describe_pattern
from alikepack.core.text import normalize_notes, truncate
from alikepack.core.values import UNDEFINED
from alikepack.tools.common import FIRST_NOTE_LENGTH, build_overview, check_suite
from alikepack.tools.compare import Notes
from alikepack.tools.exceptions import AlikeAssertionError

logger = logging.getLogger(__name__)

MESSAGE_LENGTH = 92


def _describe_expected(expected: Any) -> str:
    if isinstance(expected, str):
        return f'"{truncate(expected, FIRST_NOTE_LENGTH)}"' if expected else "an empty string"
    if isinstance(expected, re.Pattern):
        return truncate(describe_pattern(expected), FIRST_NOTE_LENGTH)
    return truncate(repr(expected), FIRST_NOTE_LENGTH)


def throws_error(
    actually: Callable[[], Any],
    expected: Any,
    notes: Notes = None,
    *,
    suite: Any = None,
) -> str:
    """Check that calling ``actually()`` raises an exception with a matching message.

    ``expected`` is either the exact message string, or any object with a
    ``search()`` method (such as a compiled ``re.Pattern``) that must find a
    match in the message.

    Raises:
        TypeError: If ``actually`` is not callable or ``expected`` is neither a
            string nor searchable.
        AlikeAssertionError: If unbound and the check fails.
    """
    begin = "throws_error():"
    if not callable(actually):
        raise TypeError(f"{begin} `actually` is type '{type(actually).__name__}' not callable")
    is_pattern = not isinstance(expected, str)
    if is_pattern and not callable(getattr(expected, "search", None)):
        raise TypeError(
            f"{begin} `expected` is type '{type(expected).__name__}' "
            "not 'str' or an object with search()"
        )
    check_suite(begin, suite)
    note_lines = normalize_notes(notes)

    raised: Exception | None = None
    try:
        actually()
    except Exception as error:
        raised = error
        logger.debug("%s caught %s", begin, error.__class__.__name__)

    expected_display = _describe_expected(expected)
    kind = type(expected).__name__
    if raised is None:
        passed = False
        details = [
            "`actually()` did not throw an exception",
            f"`expected` is {expected_display}",
        ]
    else:
        message = str(raised)
        passed = expected.search(message) is not None if is_pattern else message == expected
        shown = f'"{truncate(message, MESSAGE_LENGTH)}"'
        if passed and not is_pattern:
            details = [f"`actually()` throws {expected_display} as expected"]
        elif passed:
            details = [
                f"`actually()` throws {shown}",
                f"`expected`, {kind} {expected_display}, allows it",
            ]
        elif is_pattern:
            details = [
                f"`actually()` throws {shown}",
                f"`expected`, {kind} {expected_display}, disallows it",
            ]
        else:
            details = [
                f"`actually()` throws {shown}",
                f"`expected` message is {expected_display}",
            ]

    status = "PASS" if passed else "FAIL"
    overview = build_overview(status, note_lines, details)

    if suite is None:
        if not passed:
            raise AlikeAssertionError(overview)
        return overview

    render_depth = get_active_config().render_depth
    actually_renderable = Renderable.from_value(
        raised if raised is not None else UNDEFINED,
        max_depth=render_depth,
    )
    expected_renderable = Renderable.from_value(expected, max_depth=render_depth)
    if passed:
        auto_notes = ["{{actually}} as expected"]
    elif raised is None:
        auto_notes = ["`actually()` did not throw an exception", "expected: {{expected}}"]
    else:
        auto_notes = ["actually: {{actually}}", "expected: {{expected}}"]
    suite.add_result(actually_renderable, expected_renderable, note_lines + auto_notes, status)
    return overview
