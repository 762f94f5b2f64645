"""Directory scanning for PDF records."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .records import FileRecord, is_pdf_name

logger = logging.getLogger(__name__)


class ScanError(OSError):
    """Raised when the scanned directory itself cannot be opened."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"cannot scan {directory}: {reason}")
        self.directory = directory
        self.reason = reason


class PdfFileLoader:
    """List the PDF files directly inside one directory, in scan order."""

    def load(self, directory: Path) -> list[FileRecord]:
        """Return records for ``*.pdf`` entries of ``directory``.

        Sub-directories are skipped, never recursed into. An entry whose
        metadata cannot be read is dropped; only failing to open the directory
        itself raises :class:`ScanError`.
        """
        records: list[FileRecord] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if not is_pdf_name(entry.name):
                        continue
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            continue
                        stat = entry.stat(follow_symlinks=False)
                    except OSError as exc:
                        logger.debug("dropping %r: %s", entry.name, exc)
                        continue
                    records.append(
                        FileRecord(
                            file_name=entry.name,
                            size=int(stat.st_size),
                            modified_ns=int(stat.st_mtime_ns),
                        )
                    )
        except OSError as exc:
            raise ScanError(Path(directory), exc.strerror or str(exc)) from exc
        return records


__all__ = ["PdfFileLoader", "ScanError"]
