"""Leaf panes: search bar, detail view, and the import modal."""

from __future__ import annotations

import time
from dataclasses import dataclass

from ..input.key_config import KeyConfig
from .records import FileRecord
from .types import EventState


class SearchBar:
    """Single-line query editor.

    The ``enter`` binding submits the query; the router turns a submission
    into a reload of both lists, narrowed to names containing
    ``submitted_query``. Editing after a submission does not change it.
    """

    def __init__(self, key_config: KeyConfig | None = None) -> None:
        self.key_config = key_config if key_config is not None else KeyConfig()
        self.query = ""
        self.submitted_query = ""
        self._submitted = False

    def event(self, key: str) -> EventState:
        # Checked before text entry so a printable enter binding submits.
        if self.key_config.matches("enter", key):
            self.submitted_query = self.query
            self._submitted = True
            return EventState.CONSUMED
        if key == "BACKSPACE":
            self.query = self.query[:-1]
            return EventState.CONSUMED
        if key == "CTRL_U":
            self.query = ""
            return EventState.CONSUMED
        if len(key) == 1 and key.isprintable():
            self.query += key
            return EventState.CONSUMED
        return EventState.NOT_CONSUMED

    def take_submission(self) -> bool:
        """Return ``True`` once per Enter press."""
        submitted = self._submitted
        self._submitted = False
        return submitted


@dataclass(frozen=True)
class DetailView:
    title: str
    rows: list[str]
    focused: bool


class PdfDetail:
    """Read-only summary of the selected record plus key help."""

    def event(self, _key: str) -> EventState:
        return EventState.NOT_CONSUMED

    def view(
        self,
        record: FileRecord | None,
        source_title: str,
        help_rows: list[str],
        focused: bool,
    ) -> DetailView:
        rows: list[str] = []
        if record is None:
            rows.append("No file selected")
        else:
            rows.append(record.label)
            rows.append(f"List: {source_title}")
            rows.append(f"Size: {format_size(record.size)}")
            rows.append(f"Modified: {format_mtime(record.modified_ns)}")
        rows.append("")
        rows.extend(help_rows)
        return DetailView(title="Details", rows=rows, focused=focused)


class ImportModal:
    """Overlay addressed to one record; swallows every key while open."""

    def __init__(self) -> None:
        self._visible = False
        self._record: FileRecord | None = None

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def record(self) -> FileRecord | None:
        return self._record

    def open(self, record: FileRecord) -> None:
        if self._visible:
            return
        self._visible = True
        self._record = record

    def close(self) -> None:
        if not self._visible:
            return
        self._visible = False
        self._record = None

    def event(self, _key: str) -> EventState:
        return EventState.CONSUMED


def format_size(size: int | None) -> str:
    if size is None:
        return "-"
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            if unit == "B":
                return f"{int(value)} {unit}"
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"


def format_mtime(modified_ns: int | None) -> str:
    if modified_ns is None:
        return "-"
    return time.strftime("%Y-%m-%d %H:%M", time.localtime(modified_ns / 1_000_000_000))


__all__ = [
    "DetailView",
    "ImportModal",
    "PdfDetail",
    "SearchBar",
    "format_mtime",
    "format_size",
]
