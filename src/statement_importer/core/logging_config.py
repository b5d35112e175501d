"""Logging setup for the statement-importer command.

Progress, skipped-row warnings and the run summary all go through the
root logger. The console handler writes to stderr; a copy can be kept in
a log file (LOG_FILE) for watch mode, which usually runs unattended.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Route importer logs to stderr and, optionally, a UTF-8 log file.

    Calling this again replaces the previous handlers, so the level can be
    changed between runs in the same process.

    Args:
        level: Level name such as "DEBUG" or "warning"; unknown names mean INFO
        log_file: Path of a log file to append to (parent directories are created)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        # Payees and station names are Japanese
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
