"""Cell grid that frames are composed into before being written out."""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import char_display_width, clip_text

_WIDE_CONTINUATION = ""


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    def inner(self) -> Rect:
        """Area inside a one-cell border."""
        return Rect(
            self.x + 1,
            self.y + 1,
            max(0, self.width - 2),
            max(0, self.height - 2),
        )


def split_horizontal(rect: Rect, left_percent: int) -> tuple[Rect, Rect]:
    """Split into left/right columns, ``left_percent`` of the width on the left."""
    left_width = max(0, min(rect.width, rect.width * left_percent // 100))
    return (
        Rect(rect.x, rect.y, left_width, rect.height),
        Rect(rect.x + left_width, rect.y, rect.width - left_width, rect.height),
    )


def split_vertical(rect: Rect, top_percent: int) -> tuple[Rect, Rect]:
    """Split into top/bottom rows, ``top_percent`` of the height on top."""
    top_height = max(0, min(rect.height, rect.height * top_percent // 100))
    return (
        Rect(rect.x, rect.y, rect.width, top_height),
        Rect(rect.x, rect.y + top_height, rect.width, rect.height - top_height),
    )


def take_rows(rect: Rect, rows: int) -> tuple[Rect, Rect]:
    """Cut a fixed number of rows off the top of ``rect``."""
    rows = max(0, min(rows, rect.height))
    return (
        Rect(rect.x, rect.y, rect.width, rows),
        Rect(rect.x, rect.y + rows, rect.width, rect.height - rows),
    )


def centered(area: Rect, width: int, height: int) -> Rect:
    width = max(0, min(width, area.width))
    height = max(0, min(height, area.height))
    return Rect(
        area.x + (area.width - width) // 2,
        area.y + (area.height - height) // 2,
        width,
        height,
    )


class Canvas:
    """Fixed-size grid of characters, each with an ANSI style prefix."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._chars = [[" "] * self.width for _ in range(self.height)]
        self._styles = [[""] * self.width for _ in range(self.height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_text(self, x: int, y: int, text: str, style: str = "", max_width: int | None = None) -> int:
        """Write ``text`` starting at ``(x, y)``; return columns written."""
        if not (0 <= y < self.height) or x >= self.width:
            return 0
        limit = self.width - x if max_width is None else min(max_width, self.width - x)
        col = x
        for ch in clip_text(text, limit):
            w = char_display_width(ch)
            if w == 0:
                continue
            if self._in_bounds(col, y):
                self._chars[y][col] = ch
                self._styles[y][col] = style
            if w == 2 and self._in_bounds(col + 1, y):
                self._chars[y][col + 1] = _WIDE_CONTINUATION
                self._styles[y][col + 1] = style
            col += w
        return col - x

    def fill(self, rect: Rect, ch: str = " ", style: str = "") -> None:
        for y in range(rect.y, rect.bottom):
            for x in range(rect.x, rect.right):
                if self._in_bounds(x, y):
                    self._chars[y][x] = ch
                    self._styles[y][x] = style

    def style_row(self, x: int, y: int, width: int, style: str) -> None:
        """Apply ``style`` to a run of existing cells."""
        for col in range(x, x + width):
            if self._in_bounds(col, y):
                self._styles[y][col] = style

    def row_text(self, y: int) -> str:
        """Plain text of one row, for tests and debugging."""
        return "".join(self._chars[y])

    def style_at(self, x: int, y: int) -> str:
        return self._styles[y][x]

    def to_ansi(self, reset: str = "\033[0m") -> str:
        """Compose the grid into one frame string starting at the home position."""
        out: list[str] = ["\033[H"]
        for y in range(self.height):
            if y:
                out.append("\r\n")
            current = ""
            for x in range(self.width):
                ch = self._chars[y][x]
                if ch == _WIDE_CONTINUATION:
                    continue
                style = self._styles[y][x]
                if style != current:
                    if current and reset:
                        out.append(reset)
                    if style:
                        out.append(style)
                    current = style
                out.append(ch)
            if current and reset:
                out.append(reset)
        return "".join(out)


__all__ = [
    "Canvas",
    "Rect",
    "centered",
    "split_horizontal",
    "split_vertical",
    "take_rows",
]
