"""Scrollable PDF list pane used for both the managed and unmanaged inbox.

The pane exclusively owns its record list, selection index, and viewport.
Nothing outside the pane writes those fields; callers go through ``apply``,
``move_selection``, ``scroll``, and ``view``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..input.key_config import KeyConfig
from ..input.key_registry import KeyComboBinding, KeyComboRegistry
from .loader import PdfFileLoader
from .records import FileRecord
from .types import EventState
from .viewport import ScrollDirection, VerticalScroll

MANAGED_TITLE = "Managed"
UNMANAGED_TITLE = "Unmanaged"


@dataclass(frozen=True)
class ListView:
    """Render model handed to the renderer for one frame."""

    title: str
    labels: list[str]
    highlighted: int | None
    top: int
    max_top: int
    focused: bool
    notice: str = ""
    loading: bool = False


class PdfListPane:
    """Ordered record list with a bounds-checked selection and viewport."""

    def __init__(
        self,
        title: str,
        key_config: KeyConfig,
        loader: PdfFileLoader | None = None,
    ) -> None:
        self.title = title
        self.key_config = key_config
        self.loader = loader if loader is not None else PdfFileLoader()
        self.notice = ""
        self.loading = False
        self._records: list[FileRecord] = []
        self._selection: int | None = None
        self._scroll = VerticalScroll()
        self._keys = KeyComboRegistry().register_bindings(
            KeyComboBinding(key_config.scroll_up, lambda: self.move_selection(ScrollDirection.UP)),
            KeyComboBinding(key_config.scroll_down, lambda: self.move_selection(ScrollDirection.DOWN)),
        )

    @property
    def records(self) -> tuple[FileRecord, ...]:
        return tuple(self._records)

    @property
    def selection(self) -> int | None:
        """Selected index, or ``None`` while the list is empty."""
        return self._selection

    @property
    def top(self) -> int:
        return self._scroll.top

    @property
    def max_top(self) -> int:
        return self._scroll.max_top

    def __len__(self) -> int:
        return len(self._records)

    @property
    def selected_record(self) -> FileRecord | None:
        if self._selection is None:
            return None
        return self._records[self._selection]

    def load(self, directory: Path) -> list[FileRecord]:
        """Scan ``directory`` and replace the list; raises ``ScanError`` on failure."""
        records = self.loader.load(directory)
        self.apply(records)
        return records

    def apply(self, records: list[FileRecord]) -> None:
        """Replace the whole list and reset the selection to the first row."""
        self._records = list(records)
        self._selection = 0 if self._records else None
        self.notice = ""

    def report_failure(self, message: str) -> None:
        """Keep the current records and remember why the last reload failed."""
        self.notice = message

    def move_selection(self, direction: ScrollDirection) -> bool:
        """Move the selection one row; return whether it changed.

        Moving up from the first row stays put. Moving down from the last row
        is rejected outright rather than clamped.
        """
        if self._selection is None:
            return False
        last = len(self._records) - 1
        candidate = max(0, self._selection + direction.value)
        if candidate > last:
            return False
        previous = self._selection
        self._selection = min(candidate, last)
        return self._selection != previous

    def scroll(self, direction: ScrollDirection) -> bool:
        """Pan the viewport one row without moving the selection."""
        return self._scroll.move_top(direction)

    def event(self, key: str) -> EventState:
        handled = self._keys.dispatch(key)
        if handled is None:
            return EventState.NOT_CONSUMED
        return EventState.from_bool(handled)

    def display_title(self) -> str:
        if self.loading:
            return f"{self.title} (loading)"
        return f"{self.title} ({len(self._records)})"

    def view(self, visible_height: int, focused: bool) -> ListView:
        """Re-derive the viewport for this frame and return the render model."""
        selection = self._selection if self._selection is not None else 0
        top = self._scroll.update(selection, len(self._records), max(0, visible_height))
        return ListView(
            title=self.display_title(),
            labels=[record.label for record in self._records],
            highlighted=self._selection,
            top=top,
            max_top=self._scroll.max_top,
            focused=focused,
            notice=self.notice,
            loading=self.loading,
        )


def managed_list(key_config: KeyConfig, loader: PdfFileLoader | None = None) -> PdfListPane:
    return PdfListPane(MANAGED_TITLE, key_config, loader)


def unmanaged_list(key_config: KeyConfig, loader: PdfFileLoader | None = None) -> PdfListPane:
    return PdfListPane(UNMANAGED_TITLE, key_config, loader)


__all__ = [
    "ListView",
    "MANAGED_TITLE",
    "PdfListPane",
    "UNMANAGED_TITLE",
    "managed_list",
    "unmanaged_list",
]
