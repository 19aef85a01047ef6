"""Snippet insertion for the script editor.

Pure text helpers used by the caller of the integrations help dialog: the
returned example is inserted at the cursor, replacing any selected text.
Offsets are character offsets into the script; ``TextArea`` locations are
``(row, column)`` pairs and are converted with :func:`location_to_offset`
and :func:`offset_to_location`.
"""

from __future__ import annotations

from autorun.ui.results import DialogResult, Selected

Selection = tuple[int, int]
Location = tuple[int, int]


def insert_snippet(
    text: str, snippet: str, selection: Selection | None = None
) -> tuple[str, int]:
    r"""Insert ``snippet`` into ``text`` at the selection.

    Parameters
    ----------
    text : str
        Current script source.
    snippet : str
        Text to insert.
    selection : tuple[int, int] | None, optional
        ``(start, end)`` offsets. A non-empty range is replaced; a collapsed
        range inserts at that offset; ``None`` or negative offsets append
        at the end. Offsets past the end are clamped.

    Returns
    -------
    tuple[str, int]
        New text and the cursor offset right after the inserted snippet.

    Examples
    --------
    >>> insert_snippet("ab", "X", (1, 1))
    ('aXb', 2)
    >>> insert_snippet("hello world", "there", (6, 11))
    ('hello there', 11)
    >>> insert_snippet("ab", "X")
    ('abX', 3)
    """
    length = len(text)
    if selection is None or selection[0] < 0 or selection[1] < 0:
        start = end = length
    else:
        start, end = sorted((min(selection[0], length), min(selection[1], length)))
    updated = text[:start] + snippet + text[end:]
    return updated, start + len(snippet)


def apply_dialog_result(
    text: str, result: DialogResult | None, selection: Selection | None = None
) -> tuple[str, int | None]:
    """Insert a selected example; anything else leaves ``text`` untouched.

    Returns the new text and cursor offset, or ``(text, None)`` when nothing
    was inserted.
    """
    if not isinstance(result, Selected) or not result.example:
        return text, None
    return insert_snippet(text, result.example, selection)


def location_to_offset(text: str, location: Location) -> int:
    """Convert a ``(row, column)`` location into a character offset.

    >>> location_to_offset("ab\\ncd", (1, 1))
    4
    """
    row, column = location
    lines = text.split("\n")
    row = max(0, min(row, len(lines) - 1))
    offset = sum(len(line) + 1 for line in lines[:row])
    return offset + max(0, min(column, len(lines[row])))


def offset_to_location(text: str, offset: int) -> Location:
    """Convert a character offset into a ``(row, column)`` location.

    >>> offset_to_location("ab\\ncd", 4)
    (1, 1)
    """
    offset = max(0, min(offset, len(text)))
    before = text[:offset]
    row = before.count("\n")
    return row, offset - (before.rfind("\n") + 1)


__all__ = [
    "apply_dialog_result",
    "insert_snippet",
    "location_to_offset",
    "offset_to_location",
]
