"""Root application object.

``App`` owns the inbox pane tree, the per-pane scan schedulers, and the
``terminating`` flag polled by the main loop. Quit and exit bindings are
checked here before any pane sees the key.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .commands import help_rows
from .inbox.list_pane import PdfListPane, managed_list, unmanaged_list
from .inbox.loader import PdfFileLoader
from .inbox.panes import ImportModal, PdfDetail, SearchBar
from .inbox.records import filter_records
from .inbox.router import InboxRouter
from .inbox.types import EventState
from .input.key_config import KeyConfig, key_display_name
from .runtime.scan import DirectoryScanScheduler
from .ui_theme import UITheme, resolve_theme

logger = logging.getLogger(__name__)


class App:
    """Inbox session state shared by the loop, the renderer, and the CLI."""

    def __init__(
        self,
        managed_dir: Path,
        unmanaged_dir: Path,
        *,
        key_config: KeyConfig | None = None,
        loader: PdfFileLoader | None = None,
        theme: UITheme | None = None,
    ) -> None:
        self.key_config = key_config if key_config is not None else KeyConfig()
        self.theme = theme if theme is not None else resolve_theme(None)
        loader = loader if loader is not None else PdfFileLoader()
        self.managed = managed_list(self.key_config, loader)
        self.unmanaged = unmanaged_list(self.key_config, loader)
        self.router = InboxRouter(
            key_config=self.key_config,
            search=SearchBar(self.key_config),
            managed=self.managed,
            unmanaged=self.unmanaged,
            detail=PdfDetail(),
            modal=ImportModal(),
        )
        self.directories: dict[str, Path] = {
            self.managed.title: Path(managed_dir).expanduser(),
            self.unmanaged.title: Path(unmanaged_dir).expanduser(),
        }
        self._schedulers: list[tuple[PdfListPane, DirectoryScanScheduler]] = [
            (pane, DirectoryScanScheduler(pane.loader.load, name=pane.title.lower()))
            for pane in (self.managed, self.unmanaged)
        ]
        self.help_rows = help_rows(self.key_config)
        self.terminating = False
        self.dirty = True
        self.status_message = ""
        self._reload_query = ""

    @property
    def status_hint(self) -> str:
        quit_keys = "/".join(key_display_name(key) for key in self.key_config.quit)
        return f"Tab focus  / search  Enter open  {quit_keys} quit"

    def event(self, key: str) -> EventState:
        """Dispatch one key through the pane tree.

        Quit and exit keys set ``terminating`` and report NotConsumed so the
        loop can stop without any pane reacting to them.
        """
        if self.key_config.is_termination_key(key):
            logger.info("termination key %r pressed", key)
            self.terminating = True
            return EventState.NOT_CONSUMED

        state = self.router.event(key)
        if not state.is_consumed():
            logger.debug("no action associated to %r", key)
        else:
            self.dirty = True
        if self.router.take_reload_request():
            self.request_reload()
        return state

    def request_reload(self) -> None:
        """Schedule a background rescan of both directories.

        Results are narrowed by the query submitted at this point, not by
        whatever the search bar holds when they arrive.
        """
        self._reload_query = self.router.search.submitted_query
        for pane, scheduler in self._schedulers:
            directory = self.directories[pane.title]
            pane.loading = True
            request_id = scheduler.schedule(directory)
            logger.debug("scheduled %s scan #%d of %s", pane.title, request_id, directory)
        self.dirty = True

    def drain_scans(self) -> bool:
        """Apply finished scans on the caller's thread; return whether any landed."""
        changed = False
        for pane, scheduler in self._schedulers:
            for result in scheduler.drain_results():
                changed = True
                pane.loading = False
                if result.ok:
                    records = result.records or []
                    pane.apply(filter_records(records, self._reload_query))
                    logger.info("%s: %d PDF files", pane.title, len(pane))
                else:
                    pane.report_failure(f"scan failed: {result.error}")
        if changed:
            self.status_message = "  ".join(
                f"{pane.title}: {pane.notice}" for pane, _ in self._schedulers if pane.notice
            )
            self.dirty = True
        return changed

    def frame(self, width: int, height: int) -> list[str]:
        """Plain-text rows of the screen as it would be drawn now."""
        from .render import render_app

        canvas = render_app(self, width, height, self.theme)
        return [canvas.row_text(y) for y in range(canvas.height)]

    def close(self) -> None:
        """Abandon in-flight scans; late results are dropped."""
        for _, scheduler in self._schedulers:
            scheduler.cancel()


__all__ = ["App"]
