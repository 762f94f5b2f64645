"""Rendering engine for the inbox screen.

Lays out the panes, asks each pane for its view model with a ``focused``
flag derived from the router, and paints everything into a ``Canvas``.
Painting never changes focus or records.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from ..ansi import fit_text, truncate_with_ellipsis
from ..inbox.list_pane import ListView
from ..inbox.panes import DetailView, format_size
from ..inbox.records import FileRecord
from ..inbox.types import Focus
from ..inbox.viewport import scrollbar_thumb
from ..ui_theme import UITheme
from .canvas import Canvas, Rect, centered, split_horizontal, split_vertical, take_rows

if TYPE_CHECKING:
    from ..app import App

MIN_WIDTH = 52
MIN_HEIGHT = 28
SEARCH_ROWS = 3
LIST_COLUMN_PERCENT = 60
MANAGED_ROW_PERCENT = 50
MODAL_WIDTH = 60
MODAL_HEIGHT = 8

_BOX_CHARS = ("┌", "┐", "└", "┘", "─", "│")
_SCROLL_THUMB = "█"


def draw_box(
    canvas: Canvas,
    rect: Rect,
    title: str,
    focused: bool,
    theme: UITheme,
    *,
    border_style: str | None = None,
    title_style: str | None = None,
) -> Rect:
    """Draw a bordered box and return its inner area."""
    if rect.width < 2 or rect.height < 2:
        return Rect(rect.x, rect.y, 0, 0)
    top_left, top_right, bottom_left, bottom_right, horizontal, vertical = _BOX_CHARS
    if border_style is None:
        border_style = theme.border_focused if focused else theme.border
    if title_style is None:
        title_style = theme.title_focused if focused else theme.title
    inner_width = rect.width - 2
    canvas.put_text(rect.x, rect.y, top_left + horizontal * inner_width + top_right, border_style)
    for y in range(rect.y + 1, rect.bottom - 1):
        canvas.put_text(rect.x, y, vertical, border_style)
        canvas.put_text(rect.right - 1, y, vertical, border_style)
    canvas.put_text(
        rect.x,
        rect.bottom - 1,
        bottom_left + horizontal * inner_width + bottom_right,
        border_style,
    )
    if title and inner_width > 2:
        label = truncate_with_ellipsis(title, inner_width - 2)
        canvas.put_text(
            rect.x + 1,
            rect.y,
            f" {label} ",
            title_style,
        )
    inner = rect.inner()
    canvas.fill(inner)
    return inner


def draw_list(canvas: Canvas, rect: Rect, view: ListView, theme: UITheme) -> None:
    """Paint the visible window ``[top, top + height)`` of a list view."""
    inner = draw_box(canvas, rect, view.title, view.focused, theme)
    if inner.height == 0 or inner.width == 0:
        return
    if not view.labels:
        if view.notice:
            message, style = view.notice, theme.notice
        elif view.loading:
            message, style = "Loading...", theme.detail_text
        else:
            message, style = "No PDF files", theme.detail_text
        canvas.put_text(inner.x + 1, inner.y, message, style, max_width=inner.width - 1)
        return

    for row in range(inner.height):
        index = view.top + row
        if index >= len(view.labels):
            break
        text = fit_text(f" {view.labels[index]}", inner.width)
        if index == view.highlighted:
            style = theme.row_selected if view.focused else theme.row_selected_unfocused
        else:
            style = theme.row_default
        canvas.put_text(inner.x, inner.y + row, text, style)

    if view.notice:
        canvas.put_text(
            inner.x + 1,
            rect.bottom - 1,
            f" {view.notice} ",
            theme.notice,
            max_width=inner.width - 1,
        )

    thumb = scrollbar_thumb(view.top, view.max_top, inner.height)
    if thumb is not None:
        canvas.put_text(rect.right - 1, inner.y + thumb, _SCROLL_THUMB, theme.scrollbar)


def draw_search(canvas: Canvas, rect: Rect, query: str, focused: bool, theme: UITheme) -> None:
    inner = draw_box(canvas, rect, "Search", focused, theme)
    if inner.height == 0:
        return
    if query or focused:
        cursor = "_" if focused else ""
        canvas.put_text(
            inner.x + 1,
            inner.y,
            f"{query}{cursor}",
            theme.search_query,
            max_width=inner.width - 1,
        )
    else:
        canvas.put_text(
            inner.x + 1,
            inner.y,
            "press / to filter by name, Enter to reload",
            theme.search_placeholder,
            max_width=inner.width - 1,
        )


def draw_detail(canvas: Canvas, rect: Rect, view: DetailView, theme: UITheme) -> None:
    inner = draw_box(canvas, rect, view.title, view.focused, theme)
    for row, text in enumerate(view.rows[: inner.height]):
        style = theme.detail_heading if text.startswith("--") or row == 0 else theme.detail_text
        canvas.put_text(inner.x + 1, inner.y + row, text, style, max_width=inner.width - 1)


def draw_modal(canvas: Canvas, area: Rect, record: FileRecord, theme: UITheme) -> None:
    """Overlay the import dialog for ``record`` centered in ``area``."""
    rect = centered(area, min(MODAL_WIDTH, area.width - 4), MODAL_HEIGHT)
    inner = draw_box(
        canvas,
        rect,
        "Import",
        True,
        theme,
        border_style=theme.modal_border,
        title_style=theme.modal_title,
    )
    if inner.height == 0:
        return
    rows = [
        record.label,
        f"Size: {format_size(record.size)}",
        "",
        "Esc close",
    ]
    for row, text in enumerate(rows[: inner.height]):
        style = theme.modal_title if row == 0 else theme.detail_text
        canvas.put_text(inner.x + 1, inner.y + row, text, style, max_width=inner.width - 1)


def draw_status(canvas: Canvas, rect: Rect, message: str, hint: str, theme: UITheme) -> None:
    if rect.height == 0:
        return
    width = rect.width
    right = f" {hint} " if hint else ""
    left_width = max(0, width - len(right))
    line = fit_text(f" {message}", left_width) + right
    canvas.put_text(rect.x, rect.y, fit_text(line, width), theme.status)


def draw_too_small(canvas: Canvas, width: int, height: int, theme: UITheme) -> None:
    message = f"Terminal too small: need {MIN_WIDTH}x{MIN_HEIGHT}, got {width}x{height}"
    y = max(0, height // 2)
    x = max(0, (width - len(message)) // 2)
    canvas.put_text(x, y, message, theme.notice)


def render_app(app: App, width: int, height: int, theme: UITheme) -> Canvas:
    """Compose one full frame for ``app`` at the given terminal size."""
    canvas = Canvas(width, height)
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        draw_too_small(canvas, width, height, theme)
        return canvas

    router = app.router
    body, status = take_rows(Rect(0, 0, width, height), height - 1)
    search_rect, rest = take_rows(body, SEARCH_ROWS)
    lists_rect, detail_rect = split_horizontal(rest, LIST_COLUMN_PERCENT)
    managed_rect, unmanaged_rect = split_vertical(lists_rect, MANAGED_ROW_PERCENT)

    draw_search(canvas, search_rect, router.search.query, router.focused_pane_is(Focus.SEARCH), theme)
    draw_list(
        canvas,
        managed_rect,
        router.managed.view(managed_rect.inner().height, router.focused_pane_is(Focus.MANAGED_LIST)),
        theme,
    )
    draw_list(
        canvas,
        unmanaged_rect,
        router.unmanaged.view(unmanaged_rect.inner().height, router.focused_pane_is(Focus.UNMANAGED_LIST)),
        theme,
    )
    active = router.active_list
    draw_detail(
        canvas,
        detail_rect,
        router.detail.view(
            active.selected_record,
            active.title,
            app.help_rows,
            router.focused_pane_is(Focus.DETAIL),
        ),
        theme,
    )
    if router.modal.visible and router.modal.record is not None:
        draw_modal(canvas, body, router.modal.record, theme)

    draw_status(canvas, status, app.status_message, app.status_hint, theme)
    return canvas


def render_frame(app: App, width: int, height: int, theme: UITheme) -> str:
    """Full ANSI frame text for ``app``, ready to be written out."""
    return render_app(app, width, height, theme).to_ansi(theme.reset or "\033[0m")


def write_frame(canvas: Canvas, theme: UITheme, fd: int | None = None) -> None:
    """Write a composed frame to the terminal in one ``os.write`` call."""
    target = sys.stdout.fileno() if fd is None else fd
    payload = canvas.to_ansi(theme.reset or "\033[0m")
    os.write(target, payload.encode("utf-8", errors="replace"))


__all__ = [
    "Canvas",
    "MIN_HEIGHT",
    "MIN_WIDTH",
    "Rect",
    "draw_box",
    "draw_detail",
    "draw_list",
    "draw_modal",
    "draw_search",
    "draw_status",
    "render_app",
    "render_frame",
    "write_frame",
]
