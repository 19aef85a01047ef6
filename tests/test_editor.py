"""Tests for `autorun/editor.py`."""

import pytest

from autorun.editor import (
    apply_dialog_result,
    insert_snippet,
    location_to_offset,
    offset_to_location,
)
from autorun.ui.results import Cancelled, Selected


@pytest.mark.parametrize(
    "text,selection,expected",
    [
        ("", None, ("X", 1)),
        ("abc", None, ("abcX", 4)),
        ("abc", (0, 0), ("Xabc", 1)),
        ("abc", (1, 1), ("aXbc", 2)),
        ("abc", (1, 3), ("aX", 2)),
        ("abc", (3, 1), ("aX", 2)),
        ("abc", (-1, -1), ("abcX", 4)),
        ("abc", (10, 20), ("abcX", 4)),
    ],
)
def test_insert_snippet(text, selection, expected):
    assert insert_snippet(text, "X", selection) == expected


def test_apply_dialog_result_inserts_only_selected_examples():
    assert apply_dialog_result("a", Selected("b"), (1, 1)) == ("ab", 2)
    assert apply_dialog_result("a", Cancelled(), (1, 1)) == ("a", None)
    assert apply_dialog_result("a", None) == ("a", None)
    assert apply_dialog_result("a", Selected(""), (0, 0)) == ("a", None)


def test_location_offset_conversions_agree():
    text = "line one\nline two\n\nend"
    for offset in range(len(text) + 1):
        assert location_to_offset(text, offset_to_location(text, offset)) == offset


def test_location_to_offset_clamps():
    assert location_to_offset("ab\ncd", (5, 9)) == 5
    assert location_to_offset("ab\ncd", (0, 9)) == 2
    assert offset_to_location("ab", 99) == (0, 2)
