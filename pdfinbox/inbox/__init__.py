"""Inbox pane tree: records, list panes, leaf panes, and the focus router."""

from .list_pane import ListView, PdfListPane, managed_list, unmanaged_list
from .loader import PdfFileLoader, ScanError
from .panes import DetailView, ImportModal, PdfDetail, SearchBar
from .records import INVALID_NAME_LABEL, FileRecord, filter_records
from .router import FOCUS_CYCLE, InboxRouter
from .types import EventState, Focus
from .viewport import ScrollDirection, VerticalScroll, calc_scroll_top

__all__ = [
    "DetailView",
    "EventState",
    "FOCUS_CYCLE",
    "FileRecord",
    "Focus",
    "INVALID_NAME_LABEL",
    "ImportModal",
    "InboxRouter",
    "ListView",
    "PdfDetail",
    "PdfFileLoader",
    "PdfListPane",
    "ScanError",
    "ScrollDirection",
    "SearchBar",
    "VerticalScroll",
    "calc_scroll_top",
    "filter_records",
    "managed_list",
    "unmanaged_list",
]
