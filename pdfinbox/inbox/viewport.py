"""Vertical viewport math for scrollable list panes.

``calc_scroll_top`` is the pure scroll-offset rule shared by every list.
``VerticalScroll`` wraps it with the per-pane ``top``/``max_top`` state.
"""

from __future__ import annotations

from enum import Enum


class ScrollDirection(Enum):
    UP = -1
    DOWN = 1


def calc_scroll_top(
    current_top: int,
    visible_height: int,
    selection: int,
    total_count: int,
) -> int:
    """Return the first visible row that keeps ``selection`` on screen.

    The window only moves when the selection leaves it, and then just far
    enough to put the selection on the nearest edge row.
    """
    if visible_height <= 0:
        return 0
    if total_count <= visible_height:
        return 0
    if current_top + visible_height <= selection:
        return max(0, selection - visible_height) + 1
    if current_top > selection:
        return selection
    return current_top


def max_scroll_top(total_count: int, visible_height: int) -> int:
    """Largest valid ``top`` for a list of ``total_count`` rows."""
    if visible_height <= 0:
        return 0
    return max(0, total_count - visible_height)


def scrollbar_thumb(top: int, max_top: int, track_height: int) -> int | None:
    """Row index of the scrollbar thumb, or ``None`` when nothing scrolls."""
    if max_top <= 0 or track_height <= 0:
        return None
    if track_height == 1:
        return 0
    clamped = max(0, min(top, max_top))
    return round(clamped * (track_height - 1) / max_top)


class VerticalScroll:
    """Scroll offset owned by exactly one list pane."""

    def __init__(self) -> None:
        self._top = 0
        self._max_top = 0

    @property
    def top(self) -> int:
        return self._top

    @property
    def max_top(self) -> int:
        return self._max_top

    def reset(self) -> None:
        self._top = 0

    def move_top(self, direction: ScrollDirection) -> bool:
        """Pan one row without touching the selection; return whether ``top`` moved."""
        previous = self._top
        self._top = max(0, min(previous + direction.value, self._max_top))
        return self._top != previous

    def update(self, selection: int, total_count: int, visible_height: int) -> int:
        """Re-derive ``top`` and ``max_top`` for the current frame."""
        self._max_top = max_scroll_top(total_count, visible_height)
        new_top = calc_scroll_top(self._top, visible_height, selection, total_count)
        self._top = max(0, min(new_top, self._max_top))
        return self._top


__all__ = [
    "ScrollDirection",
    "VerticalScroll",
    "calc_scroll_top",
    "max_scroll_top",
    "scrollbar_thumb",
]
