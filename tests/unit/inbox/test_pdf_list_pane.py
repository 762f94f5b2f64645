"""Tests for list-pane selection, viewport, and load behavior."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from pdfinbox.inbox.list_pane import PdfListPane, managed_list, unmanaged_list
from pdfinbox.inbox.loader import ScanError
from pdfinbox.inbox.records import FileRecord
from pdfinbox.inbox.types import EventState
from pdfinbox.inbox.viewport import ScrollDirection
from pdfinbox.input.key_config import KeyConfig


def _records(*names: str) -> list[FileRecord]:
    return [FileRecord(name) for name in names]


class PdfListPaneTests(unittest.TestCase):
    def setUp(self) -> None:
        self.pane = PdfListPane("Managed", KeyConfig())

    def test_apply_resets_selection_to_first_row(self) -> None:
        self.pane.apply(_records("a.pdf", "b.pdf"))
        self.pane.move_selection(ScrollDirection.DOWN)
        self.pane.apply(_records("c.pdf", "d.pdf", "e.pdf"))

        self.assertEqual(self.pane.selection, 0)
        self.assertEqual(self.pane.selected_record, FileRecord("c.pdf"))
        self.assertEqual(len(self.pane), 3)

    def test_empty_list_has_inactive_selection(self) -> None:
        self.pane.apply([])

        self.assertIsNone(self.pane.selection)
        self.assertIsNone(self.pane.selected_record)
        self.assertFalse(self.pane.move_selection(ScrollDirection.DOWN))
        self.assertFalse(self.pane.move_selection(ScrollDirection.UP))
        self.assertEqual(self.pane.event("j"), EventState.NOT_CONSUMED)
        view = self.pane.view(5, focused=True)
        self.assertEqual(view.labels, [])
        self.assertIsNone(view.highlighted)
        self.assertEqual(view.top, 0)

    def test_down_at_last_row_is_rejected(self) -> None:
        self.pane.apply(_records("a.pdf", "b.pdf"))
        self.assertEqual(self.pane.event("j"), EventState.CONSUMED)

        self.assertEqual(self.pane.event("j"), EventState.NOT_CONSUMED)
        self.assertEqual(self.pane.selection, 1)

    def test_up_at_first_row_is_not_consumed(self) -> None:
        self.pane.apply(_records("a.pdf", "b.pdf"))

        self.assertEqual(self.pane.event("k"), EventState.NOT_CONSUMED)
        self.assertEqual(self.pane.selection, 0)

    def test_arrow_keys_are_bound_by_default(self) -> None:
        self.pane.apply(_records("a.pdf", "b.pdf"))

        self.assertEqual(self.pane.event("DOWN"), EventState.CONSUMED)
        self.assertEqual(self.pane.event("UP"), EventState.CONSUMED)
        self.assertEqual(self.pane.event("x"), EventState.NOT_CONSUMED)

    def test_custom_bindings_replace_defaults(self) -> None:
        pane = PdfListPane("Managed", KeyConfig(scroll_down=("n",), scroll_up=("p",)))
        pane.apply(_records("a.pdf", "b.pdf"))

        self.assertEqual(pane.event("j"), EventState.NOT_CONSUMED)
        self.assertEqual(pane.event("n"), EventState.CONSUMED)
        self.assertEqual(pane.selection, 1)

    def test_five_record_walk_down_and_back_up(self) -> None:
        self.pane.apply(_records("A.pdf", "B.pdf", "C.pdf", "D.pdf", "E.pdf"))

        for _ in range(4):
            self.pane.event("DOWN")
            self.pane.view(3, focused=True)
        self.assertEqual(self.pane.selection, 4)
        self.assertEqual(self.pane.top, 2)

        for _ in range(4):
            self.pane.event("UP")
            self.pane.view(3, focused=True)
        self.assertEqual(self.pane.selection, 0)
        self.assertEqual(self.pane.top, 0)

    def test_view_exposes_labels_and_highlight(self) -> None:
        self.pane.apply(_records("a.pdf", "b.pdf", "c.pdf"))
        self.pane.move_selection(ScrollDirection.DOWN)

        view = self.pane.view(2, focused=False)

        self.assertEqual(view.title, "Managed (3)")
        self.assertEqual(view.labels, ["a.pdf", "b.pdf", "c.pdf"])
        self.assertEqual(view.highlighted, 1)
        self.assertEqual(view.max_top, 1)
        self.assertFalse(view.focused)

    def test_scroll_pans_without_moving_selection(self) -> None:
        self.pane.apply(_records(*(f"{i}.pdf" for i in range(10))))
        self.pane.view(3, focused=True)

        self.assertTrue(self.pane.scroll(ScrollDirection.DOWN))
        self.assertEqual(self.pane.top, 1)
        self.assertEqual(self.pane.selection, 0)

    def test_loading_title_and_failure_notice(self) -> None:
        self.pane.apply(_records("a.pdf"))
        self.pane.loading = True
        self.assertEqual(self.pane.display_title(), "Managed (loading)")

        self.pane.loading = False
        self.pane.report_failure("scan failed")
        view = self.pane.view(3, focused=True)
        self.assertEqual(view.notice, "scan failed")
        self.assertEqual(view.labels, ["a.pdf"])

        self.pane.apply(_records("b.pdf"))
        self.assertEqual(self.pane.notice, "")

    def test_load_reads_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "paper.pdf").write_bytes(b"%PDF-1.4")
            (root / "notes.txt").write_text("x", encoding="utf-8")

            records = self.pane.load(root)

        self.assertEqual(records, [FileRecord("paper.pdf")])
        self.assertEqual(self.pane.selection, 0)

    def test_load_failure_keeps_previous_records(self) -> None:
        self.pane.apply(_records("a.pdf"))
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(ScanError):
                self.pane.load(missing)

        self.assertEqual(self.pane.records, (FileRecord("a.pdf"),))

    def test_named_constructors(self) -> None:
        self.assertEqual(managed_list(KeyConfig()).title, "Managed")
        self.assertEqual(unmanaged_list(KeyConfig()).title, "Unmanaged")


if __name__ == "__main__":
    unittest.main()
