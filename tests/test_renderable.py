from datetime import date
import enum
import re

import pytest

from alikepack.core import (
    MAX_TEXT_LENGTH,
    UNDEFINED,
    Highlight,
    HighlightError,
    Renderable,
    RenderableError,
    renderable_from,
)


class Color(enum.Enum):
    RED = 1


class Plain:
    def __init__(self, a, b=2):
        self.a = a
        self.b = b


def _add(a, b=2, *rest):
    return a + b


def _spans(parts) -> list[tuple[str, int, int]]:
    return [(highlight.kind, highlight.start, highlight.stop) for highlight in parts.highlights]


def test_scalars_render_with_one_highlight() -> None:
    cases = [
        (None, "null", "NULLISH"),
        (UNDEFINED, "undefined", "NULLISH"),
        (True, "true", "BOOLNUM"),
        (False, "false", "BOOLNUM"),
        (42, "42", "BOOLNUM"),
        (1.5, "1.5", "BOOLNUM"),
        (float("nan"), "NaN", "BOOLNUM"),
        (float("inf"), "Infinity", "BOOLNUM"),
        (float("-inf"), "-Infinity", "BOOLNUM"),
        (2**60, "1152921504606846976n", "BOOLNUM"),
        ("abc", '"abc"', "STRING"),
        (b"hi", "b'hi'", "STRING"),
        (Color.RED, "Color.RED", "SYMBOL"),
        (re.compile(r"ab+c", re.I | re.M), "/ab+c/im", "REGEXP"),
        (ValueError("boom"), 'ValueError("boom")', "ERROR"),
        (ValueError(), "ValueError()", "ERROR"),
    ]
    for value, text, kind in cases:
        parts = renderable_from(value)
        assert parts.text == text
        assert _spans(parts) == [(kind, 0, len(text))]


def test_start_offsets_every_highlight() -> None:
    parts = renderable_from(True, 5)
    assert parts.text == "true"
    assert _spans(parts) == [("BOOLNUM", 5, 9)]


def test_string_quoting_rules() -> None:
    assert renderable_from('say "hi"').text == "'say \"hi\"'"
    assert renderable_from("it's \"x\"").text == '"it\'s \\"x\\""'
    assert renderable_from("it's").text == '"it\'s"'
    assert renderable_from("line\nbreak").text == '"line\\nbreak"'
    assert renderable_from("").text == '""'


def test_empty_composites_have_no_highlights() -> None:
    for value, text in [([], "[]"), ((), "()"), ({}, "{}"), (set(), "set()")]:
        parts = renderable_from(value)
        assert parts.text == text
        assert parts.highlights == ()


def test_sequence_items_get_absolute_offsets() -> None:
    parts = renderable_from([1, "a", None])
    assert parts.text == '[ 1, "a", null ]'
    assert _spans(parts) == [("BOOLNUM", 2, 3), ("STRING", 5, 8), ("NULLISH", 10, 14)]

    shifted = renderable_from([1, "a", None], 3)
    assert _spans(shifted) == [("BOOLNUM", 5, 6), ("STRING", 8, 11), ("NULLISH", 13, 17)]


def test_mixed_sequence_highlights_match_substrings() -> None:
    parts = renderable_from([1, True, "ok", [None]])
    assert parts.text == '[ 1, true, "ok", [ null ] ]'
    assert _spans(parts) == [
        ("BOOLNUM", 2, 3),
        ("BOOLNUM", 5, 9),
        ("STRING", 11, 15),
        ("NULLISH", 19, 23),
    ]
    assert [parts.text[h.start : h.stop] for h in parts.highlights] == ["1", "true", '"ok"', "null"]


def test_value_objects_render_with_repr() -> None:
    parts = renderable_from(date(2020, 1, 1))
    assert parts.text == "datetime.date(2020, 1, 1)"
    assert _spans(parts) == [("OBJECT", 0, len(parts.text))]

    nested = renderable_from({"when": date(2020, 1, 1)})
    assert nested.text == "{ when:datetime.date(2020, 1, 1) }"
    assert _spans(nested) == [("OBJECT", 7, 32)]


def test_nested_sequences_and_tuples() -> None:
    parts = renderable_from([[1], 2])
    assert parts.text == "[ [ 1 ], 2 ]"
    assert _spans(parts) == [("BOOLNUM", 4, 5), ("BOOLNUM", 9, 10)]

    assert renderable_from((1, 2)).text == "( 1, 2 )"


def test_objects_render_keys_and_values() -> None:
    parts = renderable_from({"a": 1, "bc": "x"})
    assert parts.text == '{ a:1, bc:"x" }'
    assert _spans(parts) == [("BOOLNUM", 4, 5), ("STRING", 10, 13)]

    assert renderable_from(Plain(1)).text == "{ a:1, b:2 }"
    assert renderable_from({1: True}).text == "{ 1:true }"


def test_sets_render_in_sorted_order() -> None:
    parts = renderable_from({2, 1})
    assert parts.text == "{ 1, 2 }"
    assert _spans(parts) == [("BOOLNUM", 2, 3), ("BOOLNUM", 5, 6)]


def test_callables_render_name_and_parameters() -> None:
    assert renderable_from(_add).text == "_add(a,b=2,*rest)"
    assert renderable_from(lambda x, y: x).text == "<anon>(x,y)"
    assert renderable_from(Plain).text == "Plain(a,b=2)"
    assert _spans(renderable_from(_add)) == [("FUNCTION", 0, 17)]


def test_cycles_render_as_circular() -> None:
    items: list = [1]
    items.append(items)
    parts = renderable_from(items)
    assert parts.text == "[ 1, [Circular] ]"
    assert _spans(parts) == [("BOOLNUM", 2, 3), ("ARRAY", 5, 15)]

    mapping: dict = {"a": 1}
    mapping["self"] = mapping
    parts = renderable_from(mapping)
    assert parts.text == "{ a:1, self:[Circular] }"
    assert _spans(parts)[-1] == ("OBJECT", 12, 22)


def test_depth_cap_elides_deeper_containers() -> None:
    parts = renderable_from([[[1]]], max_depth=1)
    assert parts.text == "[ [...] ]"
    assert _spans(parts) == [("ARRAY", 2, 7)]

    assert renderable_from({"a": {"b": 1}}, max_depth=1).text == "{ a:{...} }"


def test_highlights_are_ascending_and_inside_text() -> None:
    value = {"list": [1, None, "x", [True, 2.5]], "fn": _add, "err": KeyError("k")}
    parts = renderable_from(value, 7)
    previous_stop = 7
    for highlight in parts.highlights:
        assert highlight.start >= previous_stop
        assert highlight.stop <= 7 + len(parts.text)
        previous_stop = highlight.stop
    assert len(parts.highlights) == 7


def test_highlight_validation() -> None:
    assert Highlight("STRING", 0, 1).length == 1
    with pytest.raises(HighlightError, match="Unknown highlight kind"):
        Highlight("COLOUR", 0, 1)
    with pytest.raises(HighlightError, match="start"):
        Highlight("STRING", -1, 1)
    with pytest.raises(HighlightError, match="stop"):
        Highlight("STRING", 3, 3)
    with pytest.raises(HighlightError, match="must be an int"):
        Highlight("STRING", True, 3)
    with pytest.raises(ValueError):
        Highlight("STRING", 0, 2**53)


def test_renderable_validation() -> None:
    with pytest.raises(RenderableError, match="length 0"):
        Renderable(highlights=(), text="")
    with pytest.raises(RenderableError, match="past the end"):
        Renderable(highlights=(Highlight("STRING", 0, 5),), text="abc")
    with pytest.raises(RenderableError, match="overlapping"):
        Renderable(
            highlights=(Highlight("STRING", 0, 3), Highlight("STRING", 2, 4)),
            text="abcdef",
        )
    with pytest.raises(RenderableError, match="not Highlight"):
        Renderable(highlights=("STRING",), text="abc")

    renderable = Renderable(highlights=[Highlight("STRING", 0, 3)], text="abc")
    assert renderable.highlights == (Highlight("STRING", 0, 3),)


def test_overview_and_is_short() -> None:
    assert Renderable.from_value("x").overview == '"x"'
    assert Renderable.from_value(42).overview == "`42`"
    assert Renderable.from_value([1]).overview == "`[ 1 ]`"

    long_overview = Renderable.from_value("a" * 200).overview
    assert len(long_overview) == 100
    assert "..." in long_overview

    assert Renderable.from_value("a" * 108).is_short() is True
    assert Renderable.from_value("a" * 109).is_short() is False


def test_truncated_keeps_highlights_aligned() -> None:
    renderable = Renderable.from_value("abcdefghijklmnopqrstuvwxyz")
    truncated = renderable.truncated(12)
    assert truncated.text == '"abcd...xyz"'
    assert truncated.highlights == (Highlight("STRING", 0, 5), Highlight("STRING", 8, 12))
    assert renderable.truncated(100) == renderable


def test_from_value_clips_oversized_text() -> None:
    renderable = Renderable.from_value("a" * 70000)
    assert len(renderable.text) == MAX_TEXT_LENGTH
    assert renderable.highlights[-1].stop == MAX_TEXT_LENGTH
    assert renderable.highlights[0] == Highlight("STRING", 0, 45871)


def test_renderable_dict_round_trip() -> None:
    renderable = Renderable.from_value([1, "a"])
    assert Renderable.from_dict(renderable.to_dict()) == renderable
