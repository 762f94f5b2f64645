"""Focus routing for the inbox pane tree.

The router is the only writer of the current ``Focus``. Structural keys are
resolved through an explicit transition table before any leaf sees the key;
everything else goes to the focused pane and its result is returned as-is.
"""

from __future__ import annotations

import logging

from ..input.key_config import KeyConfig
from .list_pane import PdfListPane
from .panes import ImportModal, PdfDetail, SearchBar
from .types import EventState, Focus

logger = logging.getLogger(__name__)

FOCUS_CYCLE: tuple[Focus, ...] = (Focus.SEARCH, Focus.MANAGED_LIST, Focus.UNMANAGED_LIST)
LIST_FOCUSES: frozenset[Focus] = frozenset({Focus.MANAGED_LIST, Focus.UNMANAGED_LIST})
MODAL_RETURN_FOCUS = Focus.MANAGED_LIST


def next_in_cycle(current: Focus) -> Focus:
    """Tab target: the next pane of ``FOCUS_CYCLE``, wrapping to its start."""
    if current not in FOCUS_CYCLE:
        return FOCUS_CYCLE[0]
    index = FOCUS_CYCLE.index(current)
    return FOCUS_CYCLE[(index + 1) % len(FOCUS_CYCLE)]


def structural_transition(current: Focus, key: str, key_config: KeyConfig) -> Focus | None:
    """Return the focus a structural key moves to, or ``None`` if it is not one.

    Only meaningful while no modal is open.
    """
    if key == "TAB":
        return next_in_cycle(current)
    if key == "/":
        return Focus.SEARCH
    if current in LIST_FOCUSES and key_config.matches("focus_right", key):
        return Focus.DETAIL
    if current is Focus.DETAIL and key_config.matches("focus_left", key):
        return Focus.MANAGED_LIST
    return None


class InboxRouter:
    """Owns the focus value and dispatches keys across the inbox panes."""

    def __init__(
        self,
        *,
        key_config: KeyConfig,
        search: SearchBar,
        managed: PdfListPane,
        unmanaged: PdfListPane,
        detail: PdfDetail,
        modal: ImportModal,
        initial_focus: Focus = Focus.MANAGED_LIST,
    ) -> None:
        if initial_focus is Focus.MODAL:
            raise ValueError("cannot start with the modal focused")
        self.key_config = key_config
        self.search = search
        self.managed = managed
        self.unmanaged = unmanaged
        self.detail = detail
        self.modal = modal
        self._focus = initial_focus
        self._last_list_focus = initial_focus if initial_focus in LIST_FOCUSES else Focus.MANAGED_LIST

    @property
    def focus(self) -> Focus:
        return self._focus

    def focused_pane_is(self, focus: Focus) -> bool:
        return self._focus is focus

    def _set_focus(self, focus: Focus) -> None:
        if focus is not self._focus:
            logger.debug("focus %s -> %s", self._focus.value, focus.value)
        self._focus = focus
        if focus in LIST_FOCUSES:
            self._last_list_focus = focus

    def list_for(self, focus: Focus) -> PdfListPane | None:
        if focus is Focus.MANAGED_LIST:
            return self.managed
        if focus is Focus.UNMANAGED_LIST:
            return self.unmanaged
        return None

    @property
    def active_list(self) -> PdfListPane:
        """List the detail pane describes: the focused list, else the last one."""
        pane = self.list_for(self._focus)
        if pane is not None:
            return pane
        return self.list_for(self._last_list_focus) or self.managed

    def event(self, key: str) -> EventState:
        if self.modal.visible:
            if key == "ESC":
                self.modal.close()
                self._set_focus(MODAL_RETURN_FOCUS)
                return EventState.CONSUMED
            self.modal.event(key)
            return EventState.CONSUMED

        target = structural_transition(self._focus, key, self.key_config)
        if target is not None:
            self._set_focus(target)
            return EventState.CONSUMED

        pane = self.list_for(self._focus)
        if pane is not None and self.key_config.matches("enter", key):
            return self._open_modal(pane)

        return self._forward(key)

    def _open_modal(self, pane: PdfListPane) -> EventState:
        record = pane.selected_record
        if record is None:
            return EventState.NOT_CONSUMED
        self.modal.open(record)
        self._set_focus(Focus.MODAL)
        return EventState.CONSUMED

    def _forward(self, key: str) -> EventState:
        if self._focus is Focus.SEARCH:
            return self.search.event(key)
        if self._focus is Focus.DETAIL:
            return self.detail.event(key)
        pane = self.list_for(self._focus)
        if pane is not None:
            return pane.event(key)
        return EventState.NOT_CONSUMED

    def take_reload_request(self) -> bool:
        """True once after the search bar submitted a query."""
        return self.search.take_submission()


__all__ = [
    "FOCUS_CYCLE",
    "InboxRouter",
    "LIST_FOCUSES",
    "MODAL_RETURN_FOCUS",
    "next_in_cycle",
    "structural_transition",
]
