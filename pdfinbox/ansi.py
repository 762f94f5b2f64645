"""Display-width measurement and clipping for terminal cells.

Plain text only: styling is applied by the renderer after a row has been
clipped and padded, so escape sequences never need to be measured here.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks and control characters consume no columns; East Asian
    wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if ch < " " or ch == "\x7f":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        if w == 0 and (ch < " " or ch == "\x7f"):
            continue
        out.append(ch)
        col += w
    return "".join(out)


def fit_text(text: str, width: int) -> str:
    """Clip and right-pad ``text`` to exactly ``width`` display columns."""
    clipped = clip_text(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def truncate_with_ellipsis(text: str, width: int) -> str:
    """Clip to ``width`` columns, marking a cut with a trailing ellipsis."""
    if display_width(text) <= width:
        return text
    if width <= 1:
        return clip_text(text, width)
    return clip_text(text, width - 1) + "…"


__all__ = [
    "char_display_width",
    "clip_text",
    "display_width",
    "fit_text",
    "truncate_with_ellipsis",
]
