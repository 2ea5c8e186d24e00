import pytest

from alikepack.core import NotesValidationError, normalize_notes, truncate, validate_title


def test_truncate_leaves_short_text_alone() -> None:
    assert truncate("abc", 12) == "abc"
    assert truncate("a" * 12, 12) == "a" * 12


def test_truncate_keeps_head_and_tail() -> None:
    assert truncate("0123456789abcdefghij", 12) == "01234...ghij"

    truncated = truncate("x" * 150 + "TAIL", 100)
    assert len(truncated) == 100
    assert truncated[67:70] == "..."
    assert truncated.endswith("TAIL")


def test_truncate_rejects_tiny_lengths() -> None:
    with pytest.raises(ValueError, match="11 is < 12"):
        truncate("a" * 20, 11)


def test_normalize_notes_accepts_none_str_and_sequences() -> None:
    assert normalize_notes(None) == []
    assert normalize_notes("one line") == ["one line"]
    assert normalize_notes(["a", "b"]) == ["a", "b"]
    assert normalize_notes(("a",)) == ["a"]
    assert normalize_notes(["{{actually}} as expected"]) == ["{{actually}} as expected"]


def test_normalize_notes_rejects_bad_lines() -> None:
    with pytest.raises(NotesValidationError, match="101 lines"):
        normalize_notes(["x"] * 101)
    with pytest.raises(NotesValidationError, match=r"`notes\[0\]` has length 121"):
        normalize_notes(["x" * 121])
    with pytest.raises(NotesValidationError, match="backslash"):
        normalize_notes("back\\slash")
    with pytest.raises(NotesValidationError, match="printable ASCII"):
        normalize_notes("café")
    with pytest.raises(NotesValidationError, match="printable ASCII"):
        normalize_notes("two\nlines")
    with pytest.raises(NotesValidationError, match=r"`notes\[1\]` is type 'int' not 'str'"):
        normalize_notes(["ok", 3])
    with pytest.raises(NotesValidationError, match="is type 'dict'"):
        normalize_notes({"a": 1})


def test_validate_title() -> None:
    assert validate_title("", label="title") == ""
    assert validate_title("x" * 64, label="title") == "x" * 64
    with pytest.raises(NotesValidationError, match="length 65"):
        validate_title("x" * 65, label="title")
    with pytest.raises(NotesValidationError, match="`subtitle` is type 'NoneType'"):
        validate_title(None, label="subtitle")
    with pytest.raises(ValueError):
        validate_title("tab\there", label="title")
