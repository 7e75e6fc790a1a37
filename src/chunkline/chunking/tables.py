"""
Pipe-table detection for markdown-like text.

This is a layout heuristic, not a markdown parser: a table is a row-shaped
header line immediately followed by an alignment row, plus every directly
following row-shaped line.
"""

import re
from typing import List, NamedTuple


class TableSpan(NamedTuple):
    """Character span of one table block within the scanned text."""

    start: int
    end: int
    text: str


_ALIGNMENT_ROW = re.compile(r"^[\s|:\-]+$")


def is_table_row(line: str) -> bool:
    """True when ``line`` has the shape of a pipe-delimited row."""
    stripped = line.strip()
    if "|" not in stripped:
        return False
    return (
        stripped.startswith("|")
        or stripped.endswith("|")
        or stripped.count("|") >= 2
    )


def is_alignment_row(line: str) -> bool:
    """True for rows such as ``|---|:---:|`` made only of pipes, dashes and colons."""
    return (
        bool(_ALIGNMENT_ROW.match(line))
        and "|" in line
        and "-" in line
    )


def detect_tables(text: str) -> List[TableSpan]:
    """Return the pipe tables in ``text`` in document order.

    Offsets address ``text`` itself, so the detector can be re-run on any
    substring. Malformed pipe usage never raises; it simply fails the
    header + alignment test and is treated as ordinary text.
    """
    lines = text.split("\n")

    # Start offset of every line (newline separators included)
    offsets = []
    pos = 0
    for line in lines:
        offsets.append(pos)
        pos += len(line) + 1

    tables: List[TableSpan] = []
    i = 0
    while i < len(lines) - 1:
        if not (is_table_row(lines[i]) and is_alignment_row(lines[i + 1])):
            i += 1
            continue

        last = i + 1
        while last + 1 < len(lines) and is_table_row(lines[last + 1]):
            last += 1

        start = offsets[i]
        end = offsets[last] + len(lines[last])
        tables.append(TableSpan(start=start, end=end, text=text[start:end]))
        i = last + 1

    return tables


def holds_table(text: str) -> bool:
    return bool(detect_tables(text))
