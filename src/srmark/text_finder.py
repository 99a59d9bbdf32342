"""Locate a (possibly multi-line) span inside a document and replace it."""
from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"\r\n|\r")


def split_lines(text: str) -> list[str]:
    """Split on any line break convention."""
    return _LINE_BREAK_RE.sub("\n", text).split("\n")


def find_lines(source_lines: list[str], search_lines: list[str]) -> int | None:
    """Index of the first source line where ``search_lines`` match in sequence.

    Lines compare after ``strip()``, so indentation or trailing-space drift
    in the document does not prevent a match.
    """
    if not search_lines:
        return None
    wanted = [line.strip() for line in search_lines]
    n = len(wanted)
    for start in range(len(source_lines) - n + 1):
        if all(
            source_lines[start + i].strip() == wanted[i] for i in range(n)
        ):
            return start
    return None


def find_and_replace(source: str, search: str, replacement: str) -> str | None:
    """Replace the first occurrence of ``search`` in ``source``.

    An exact substring match is tried first. Failing that, the texts are
    compared line by line (line endings normalised, lines stripped) and the
    matching lines are replaced; the result then uses ``\\n`` line endings.
    Returns None when ``search`` is not present.
    """
    if not search.strip():
        return None
    if search in source:
        return source.replace(search, replacement, 1)

    source_lines = split_lines(source)
    search_lines = split_lines(search)
    line_no = find_lines(source_lines, search_lines)
    if line_no is None:
        return None
    source_lines[line_no:line_no + len(search_lines)] = split_lines(replacement)
    return "\n".join(source_lines)
