"""Logging for the dashboard: console plus a rotating file under settings.log_dir."""

import logging
import logging.handlers
from pathlib import Path

from guardian_dashboard.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILE = "dashboard.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(level: int | str | None = None, log_dir: str | None = None,
                  console: bool = True) -> logging.Logger:
    """Attach handlers to the `guardian_dashboard` logger.

    Called by Dashboard.start(). Handlers are installed on the first call
    only; later calls just adjust the level.
    """
    level = _resolve_level(level)
    root = logging.getLogger("guardian_dashboard")
    root.setLevel(level)
    if root.handlers:
        return root

    log_path = Path(log_dir or settings.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [
        logging.handlers.RotatingFileHandler(
            log_path / LOG_FILE, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8",
        ),
    ]
    if console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(fmt)
        handler.setLevel(level)
        root.addHandler(handler)

    root.debug("Logging to %s (level %s)", log_path / LOG_FILE, logging.getLevelName(level))
    return root
