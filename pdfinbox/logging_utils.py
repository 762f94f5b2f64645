"""File-based logging setup.

The terminal is owned by the TUI, so log records go to a rotating file and
never to stderr while a session is running. Modules log through
``logging.getLogger(__name__)``; this module only wires the handler.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_PATH = Path(user_log_dir("pdfinbox", appauthor=False)) / "pdfinbox.log"


def configure_logging(log_path: Path | None = None, *, debug: bool = False) -> Path | None:
    """Attach a rotating file handler to the ``pdfinbox`` logger.

    Returns the log file in use, or ``None`` when it could not be opened; in
    that case records are discarded rather than written over the TUI.
    """
    logger = logging.getLogger("pdfinbox")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    path = log_path if log_path is not None else DEFAULT_LOG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError:
        logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    return path
