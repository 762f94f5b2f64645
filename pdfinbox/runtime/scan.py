"""Background directory-scan worker for list panes."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue

from ..inbox.records import FileRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryScanRequest:
    """One directory-scan job."""

    request_id: int
    directory: Path


@dataclass(frozen=True)
class DirectoryScanResult:
    """Completed scan, either records or the error that stopped it."""

    request: DirectoryScanRequest
    records: list[FileRecord] | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DirectoryScanScheduler:
    """Single-threaded latest-request-wins scan scheduler for one pane.

    At most one scan runs at a time. Requests made while a scan is running
    collapse into one pending request, and results of any request that was
    superseded or cancelled before it finished are dropped on drain.
    """

    def __init__(self, load: Callable[[Path], list[FileRecord]], name: str = "scan") -> None:
        self._load = load
        self._name = name
        self._lock = threading.Lock()
        self._pending: DirectoryScanRequest | None = None
        self._running = False
        self._next_request_id = 1
        self._latest_request_id = 0
        self._results: Queue[DirectoryScanResult] = Queue()

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    return

            try:
                records = self._load(request.directory)
            except Exception as exc:
                logger.warning("%s scan of %s failed: %s", self._name, request.directory, exc)
                self._results.put(DirectoryScanResult(request=request, error=exc))
                continue
            self._results.put(DirectoryScanResult(request=request, records=records))

    def schedule(self, directory: Path) -> int:
        """Queue or replace pending scan work and return its request id."""
        with self._lock:
            request_id = self._next_request_id
            self._next_request_id += 1
            self._latest_request_id = request_id
            self._pending = DirectoryScanRequest(request_id=request_id, directory=Path(directory))
            if self._running:
                return request_id
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name=f"pdfinbox-{self._name}-scan",
            daemon=True,
        )
        worker.start()
        return request_id

    def cancel(self) -> None:
        """Abandon pending and in-flight work; late results will be discarded."""
        with self._lock:
            self._pending = None
            self._latest_request_id = self._next_request_id
            self._next_request_id += 1

    @property
    def busy(self) -> bool:
        """Whether the most recent request has not been drained yet."""
        with self._lock:
            return self._running or self._pending is not None

    def drain_results(self) -> list[DirectoryScanResult]:
        """Drain completed scans, keeping only the latest request's result."""
        out: list[DirectoryScanResult] = []
        while True:
            try:
                result = self._results.get_nowait()
            except Empty:
                break
            with self._lock:
                latest = self._latest_request_id
            if result.request.request_id != latest:
                logger.debug("discarding stale %s scan #%d", self._name, result.request.request_id)
                continue
            out.append(result)
        return out


__all__ = [
    "DirectoryScanRequest",
    "DirectoryScanResult",
    "DirectoryScanScheduler",
]
