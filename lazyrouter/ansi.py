"""ANSI-aware measurement and column layout for styled row cells.

Presentation formatters emit cells carrying SGR escapes; these helpers measure
and pad them by visible width so rows line up in a table.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\033[0m"


def colorize(sgr: str, text: str) -> str:
    """Wrap ``text`` in ``sgr`` and a reset; empty ``sgr`` means plain text."""
    if not sgr:
        return text
    return f"{sgr}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width of one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return visible column width of ``text``, ignoring escape sequences."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    while i < len(text) and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        w = char_display_width(text[i])
        if col + w > max_cols:
            break
        out.append(text[i])
        col += w
        i += 1
    return "".join(out)


def align_columns(rows: list[list[str]], separator: str = " ") -> list[str]:
    """Pad styled cells so each column starts at the same visible offset.

    Rows may have different lengths; the last cell of a row is never padded.
    """
    widths: list[int] = []
    for row in rows:
        for idx, cell in enumerate(row):
            width = display_width(cell)
            if idx >= len(widths):
                widths.append(width)
            elif width > widths[idx]:
                widths[idx] = width

    lines: list[str] = []
    for row in rows:
        cells: list[str] = []
        for idx, cell in enumerate(row):
            if idx == len(row) - 1:
                cells.append(cell)
            else:
                cells.append(cell + " " * (widths[idx] - display_width(cell)))
        lines.append(separator.join(cells).rstrip())
    return lines
