"""Tests for screen layout and pane painting."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from pdfinbox.app import App
from pdfinbox.inbox.list_pane import ListView
from pdfinbox.inbox.records import FileRecord
from pdfinbox.render import MIN_HEIGHT, MIN_WIDTH, draw_list, render_app, render_frame, write_frame
from pdfinbox.render.canvas import Canvas, Rect, centered, split_horizontal, split_vertical, take_rows
from pdfinbox.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _app(managed: list[str] = (), unmanaged: list[str] = ()) -> App:
    app = App(Path("/tmp/managed"), Path("/tmp/unmanaged"), theme=DEFAULT_THEME)
    app.managed.apply([FileRecord(name) for name in managed])
    app.unmanaged.apply([FileRecord(name) for name in unmanaged])
    return app


class LayoutTests(unittest.TestCase):
    def test_splits_cover_the_whole_rect(self) -> None:
        rect = Rect(0, 3, 80, 26)
        left, right = split_horizontal(rect, 60)
        self.assertEqual((left.width, right.x, right.width), (48, 48, 32))

        top, bottom = split_vertical(left, 50)
        self.assertEqual((top.y, top.height, bottom.y, bottom.height), (3, 13, 16, 13))

        head, rest = take_rows(rect, 3)
        self.assertEqual((head.height, rest.y, rest.height), (3, 6, 23))

    def test_centered_and_inner(self) -> None:
        box = centered(Rect(0, 0, 20, 10), 10, 4)
        self.assertEqual(box, Rect(5, 3, 10, 4))
        self.assertEqual(box.inner(), Rect(6, 4, 8, 2))
        self.assertEqual(Rect(0, 0, 1, 1).inner(), Rect(1, 1, 0, 0))


class CanvasTests(unittest.TestCase):
    def test_put_text_clips_to_width(self) -> None:
        canvas = Canvas(5, 1)
        self.assertEqual(canvas.put_text(3, 0, "abcdef"), 2)
        self.assertEqual(canvas.row_text(0), "   ab")
        self.assertEqual(canvas.put_text(0, 5, "x"), 0)

    def test_to_ansi_groups_styles_and_resets(self) -> None:
        canvas = Canvas(3, 2)
        canvas.put_text(0, 0, "ab", "\033[1m")

        frame = canvas.to_ansi("\033[0m")

        self.assertTrue(frame.startswith("\033[H"))
        self.assertEqual(frame, "\033[H\033[1mab\033[0m \r\n   ")


class DrawListTests(unittest.TestCase):
    def _view(self, **overrides) -> ListView:
        values = dict(
            title="Managed (3)",
            labels=["a.pdf", "b.pdf", "c.pdf"],
            highlighted=1,
            top=1,
            max_top=1,
            focused=True,
        )
        values.update(overrides)
        return ListView(**values)

    def test_paints_window_from_top(self) -> None:
        canvas = Canvas(20, 4)
        draw_list(canvas, Rect(0, 0, 20, 4), self._view(), DEFAULT_THEME)

        self.assertIn("Managed (3)", canvas.row_text(0))
        self.assertIn("b.pdf", canvas.row_text(1))
        self.assertIn("c.pdf", canvas.row_text(2))
        self.assertEqual(canvas.style_at(1, 1), DEFAULT_THEME.row_selected)
        self.assertEqual(canvas.style_at(1, 2), DEFAULT_THEME.row_default)
        self.assertEqual(canvas.row_text(2)[19], "█")

    def test_unfocused_highlight_and_border(self) -> None:
        canvas = Canvas(20, 4)
        draw_list(canvas, Rect(0, 0, 20, 4), self._view(focused=False), DEFAULT_THEME)

        self.assertEqual(canvas.style_at(1, 1), DEFAULT_THEME.row_selected_unfocused)
        self.assertEqual(canvas.style_at(0, 1), DEFAULT_THEME.border)

    def test_empty_list_messages(self) -> None:
        canvas = Canvas(20, 4)
        draw_list(canvas, Rect(0, 0, 20, 4), self._view(labels=[], highlighted=None, top=0, max_top=0), DEFAULT_THEME)
        self.assertIn("No PDF files", canvas.row_text(1))

        canvas = Canvas(30, 4)
        draw_list(
            canvas,
            Rect(0, 0, 30, 4),
            self._view(labels=[], highlighted=None, top=0, max_top=0, notice="scan failed"),
            DEFAULT_THEME,
        )
        self.assertIn("scan failed", canvas.row_text(1))


class RenderAppTests(unittest.TestCase):
    def test_full_layout(self) -> None:
        app = _app(managed=["a.pdf", "b.pdf"], unmanaged=["c.pdf"])

        rows = app.frame(80, 30)

        self.assertEqual(len(rows), 30)
        self.assertIn("Search", rows[0])
        self.assertIn("press / to filter", rows[1])
        self.assertIn("Managed (2)", rows[3])
        self.assertIn("a.pdf", rows[4])
        self.assertIn("Unmanaged (1)", rows[16])
        self.assertIn("c.pdf", rows[17])
        self.assertIn("Details", rows[3][48:])
        self.assertIn("a.pdf", rows[4][48:])
        self.assertIn("List: Managed", rows[5][48:])
        self.assertIn("Tab focus", rows[29])

    def test_focus_flag_follows_router(self) -> None:
        app = _app(managed=["a.pdf"], unmanaged=["c.pdf"])

        canvas = render_app(app, 80, 30, DEFAULT_THEME)
        self.assertEqual(canvas.style_at(0, 3), DEFAULT_THEME.border_focused)
        self.assertEqual(canvas.style_at(0, 16), DEFAULT_THEME.border)

        app.event("TAB")
        canvas = render_app(app, 80, 30, DEFAULT_THEME)
        self.assertEqual(canvas.style_at(0, 3), DEFAULT_THEME.border)
        self.assertEqual(canvas.style_at(0, 16), DEFAULT_THEME.border_focused)
        self.assertIn("c.pdf", canvas.row_text(4)[48:])

    def test_modal_overlay(self) -> None:
        app = _app(managed=["report.pdf"])
        app.event("ENTER")

        text = "\n".join(app.frame(80, 30))

        self.assertIn("Import", text)
        self.assertIn("Esc close", text)

    def test_selected_row_scrolls_into_view(self) -> None:
        app = _app(managed=[f"{i:02d}.pdf" for i in range(30)])
        for _ in range(20):
            app.event("j")

        rows = app.frame(80, 30)

        self.assertIn("20.pdf", rows[14])
        self.assertEqual(app.managed.top, 10)

    def test_too_small_terminal_shows_message(self) -> None:
        app = _app()
        rows = app.frame(MIN_WIDTH - 1, MIN_HEIGHT)

        self.assertTrue(any("Terminal too small" in row for row in rows))

    def test_render_frame_and_write_frame(self) -> None:
        app = _app(managed=["a.pdf"])
        frame = render_frame(app, 60, 30, PLAIN_THEME)
        self.assertTrue(frame.startswith("\033[H"))
        self.assertIn("a.pdf", frame)

        with mock.patch("pdfinbox.render.os.write") as write_mock:
            write_frame(render_app(app, 60, 30, PLAIN_THEME), PLAIN_THEME, 7)
        fd, payload = write_mock.call_args.args
        self.assertEqual(fd, 7)
        self.assertIsInstance(payload, bytes)


if __name__ == "__main__":
    unittest.main()
