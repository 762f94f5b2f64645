"""Shared enums for pane focus and event propagation."""

from __future__ import annotations

from enum import Enum


class EventState(Enum):
    """Propagation signal returned by every pane ``event`` handler."""

    CONSUMED = "consumed"
    NOT_CONSUMED = "not_consumed"

    @classmethod
    def from_bool(cls, consumed: bool) -> EventState:
        return cls.CONSUMED if consumed else cls.NOT_CONSUMED

    def is_consumed(self) -> bool:
        return self is EventState.CONSUMED


class Focus(Enum):
    """Identifiers of the panes that can hold keyboard focus."""

    SEARCH = "search"
    MANAGED_LIST = "managed_list"
    UNMANAGED_LIST = "unmanaged_list"
    DETAIL = "detail"
    MODAL = "modal"


__all__ = ["EventState", "Focus"]
