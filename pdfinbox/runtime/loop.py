"""Main interactive event loop for the terminal UI.

One cooperative thread: drain finished scans, redraw when something changed,
wait up to one tick for a key, dispatch it, and stop once the app asks to
terminate. Scans run on their own workers and are only applied here.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..app import App
from ..input import read_key as _read_key
from ..render import render_app, write_frame
from .config import DEFAULT_TICK_MS, coerce_tick_ms
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    tick_ms: int = DEFAULT_TICK_MS

    def __post_init__(self) -> None:
        object.__setattr__(self, "tick_ms", coerce_tick_ms(self.tick_ms))


def _draw(app: App, terminal: TerminalController, columns: int, rows: int) -> None:
    canvas = render_app(app, columns, rows, app.theme)
    write_frame(canvas, app.theme, terminal.stdout_fd)


def run_main_loop(
    app: App,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    *,
    draw: Callable[[App, TerminalController, int, int], None] = _draw,
    read_key: Callable[..., str] = _read_key,
) -> int:
    """Run the TUI until a quit or exit key; return the process exit status.

    The terminal guard is held for the whole loop, so raw mode is released on
    every way out, including exceptions raised by drawing or dispatch.
    """
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                logger.debug("terminal size %dx%d", *size)
                last_size = size
                app.dirty = True

            app.drain_scans()

            if app.dirty:
                draw(app, terminal, size[0], size[1])
                app.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.tick_ms)
            except KeyboardInterrupt:
                # SIGINT arriving outside raw mode is treated like the exit binding.
                key = app.key_config.exit[0] if app.key_config.exit else "CTRL_C"
            if key == "":
                continue

            app.event(key)
            if app.terminating:
                break

    app.close()
    return 0


__all__ = ["RuntimeLoopTiming", "run_main_loop"]
