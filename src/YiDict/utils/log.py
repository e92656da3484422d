"""YiDict logging utilities.

Log records go to stderr so that stdout carries only the rendered
translation. Lines look like ``mm-dd HH:MM:SS [WARN] message``.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final, Optional

LOGGER_NAME: Final = "YiDict"
LINE_FORMAT: Final = "%(asctime)s [%(levelabbr)s] %(message)s"
DATE_FORMAT: Final = "%m-%d %H:%M:%S"

# Four-letter level tags keep message columns aligned.
_LEVEL_TAGS: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "CRIT",
}


class _LevelTagFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib method name
        record.levelabbr = _LEVEL_TAGS.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger(LOGGER_NAME)


def resolve_level(name: Optional[str], default: int = logging.WARNING) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    value = logging.getLevelName((name or "").upper())
    return value if isinstance(value, int) else default


def _stderr_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _action_file_handler(log_dir: str, action: str, formatter: logging.Formatter) -> tuple[logging.Handler, Path]:
    target = Path(log_dir or "log") / action
    target.mkdir(parents=True, exist_ok=True)
    path = target / f"{action}_{datetime.now():%m%d%H%M%S}.log"
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler, path


def configure_logging(
    *,
    level: str = "WARNING",
    action: Optional[str] = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Optional[Path]:
    """(Re)configure the YiDict logger.

    Existing handlers are replaced, so calling this more than once is safe.
    The file handler, when enabled, always records DEBUG.

    Args:
        level: Level name for stderr output.
        action: CLI action name, used as log subdirectory and file prefix.
        log_to_file: Mirror records into ``<log_dir>/<action>/``.
        log_dir: Root directory for log files.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    formatter = _LevelTagFormatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)
    stderr_level = resolve_level(level)

    log.handlers.clear()
    log.propagate = False
    log.addHandler(_stderr_handler(stderr_level, formatter))

    log_path: Optional[Path] = None
    if log_to_file and action:
        file_handler, log_path = _action_file_handler(log_dir, action, formatter)
        log.addHandler(file_handler)
    log.setLevel(logging.DEBUG if log_path else stderr_level)
    return log_path
