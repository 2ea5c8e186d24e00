"""Deep structural likeness between two values."""

from __future__ import annotations

import logging
from typing import Any

from alikepack.core.types import DEFAULT_MAX_DEPTH, SCALAR_VALUE_KINDS
from alikepack.core.values import classify_value, is_nan, is_opaque_value, own_properties

logger = logging.getLogger(__name__)

ActivePairs = frozenset[tuple[int, int]]


def determine_whether_alike(
    actually: Any,
    expected: Any,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> bool:
    """Return True when ``actually`` and ``expected`` are deeply alike.

    Rules apply in order and the first one that matches decides the outcome.
    Containers are only descended while ``max_depth`` is positive; once it is
    exhausted the remaining structure counts as alike. A pair of containers
    that is met again while it is still being compared also counts as alike,
    so cyclic values finish in time proportional to their size.
    """
    return _alike(actually, expected, max_depth, frozenset())


def _alike(actually: Any, expected: Any, depth: int, active: ActivePairs) -> bool:
    actually_kind = classify_value(actually)
    expected_kind = classify_value(expected)

    if actually_kind == "null" or expected_kind == "null":
        return actually_kind == expected_kind

    actually_is_nan = is_nan(actually)
    expected_is_nan = is_nan(expected)
    if actually_is_nan or expected_is_nan:
        return actually_is_nan and expected_is_nan

    if actually_kind != expected_kind:
        return False

    if actually_kind == "symbol":
        return actually is expected
    if actually_kind in SCALAR_VALUE_KINDS:
        return bool(actually == expected)

    if actually is expected:
        return True

    if actually_kind == "function":
        return False

    if actually_kind == "regexp":
        return actually.pattern == expected.pattern and actually.flags == expected.flags

    if type(actually) is not type(expected):
        return False

    pair = (id(actually), id(expected))
    if pair in active:
        logger.debug("Revisited %s pair treated as alike", type(actually).__name__)
        return True
    active = active | {pair}

    if actually_kind == "set":
        if depth <= 0:
            logger.debug("Depth budget exhausted at set of %d items", len(actually))
            return True
        return _sets_alike(actually, expected, depth - 1, active)

    if actually_kind == "array":
        if depth <= 0:
            logger.debug("Depth budget exhausted at sequence of %d items", len(actually))
            return True
        if len(actually) != len(expected):
            return False
        return all(
            _alike(actually_item, expected_item, depth - 1, active)
            for actually_item, expected_item in zip(actually, expected)
        )

    # Objects and exceptions.
    if is_opaque_value(actually):
        return bool(actually == expected)
    actually_properties = own_properties(actually)
    expected_properties = own_properties(expected)
    if len(actually_properties) != len(expected_properties):
        return False
    if depth <= 0:
        logger.debug(
            "Depth budget exhausted at %s with %d properties",
            type(actually).__name__,
            len(actually_properties),
        )
        return True

    expected_lookup = dict(expected_properties)
    for key, actually_item in actually_properties:
        if key not in expected_lookup:
            return False
        if not _alike(actually_item, expected_lookup[key], depth - 1, active):
            return False
    return True


def _sets_alike(actually: Any, expected: Any, depth: int, active: ActivePairs) -> bool:
    # Each item must pair off with a distinct alike item on the other side.
    if len(actually) != len(expected):
        return False
    unmatched = list(expected)
    for actually_item in actually:
        for index, expected_item in enumerate(unmatched):
            if _alike(actually_item, expected_item, depth, active):
                del unmatched[index]
                break
        else:
            return False
    return True
