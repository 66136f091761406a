# src/todo_companion/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "todo.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ProjectOnlyFilter(logging.Filter):
    """Console gets every todo_companion record; anything else (libraries, py.warnings) only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "todo_companion" or record.name.startswith("todo_companion."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Point the root logger at stderr (filtered) and at <log_dir>/todo.log.

    Existing root handlers are replaced, so calling it again reconfigures
    rather than duplicating output. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    console.addFilter(_ProjectOnlyFilter())
    root.addHandler(console)

    log_to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    log_to_file.setLevel(file_level)
    log_to_file.setFormatter(formatter)
    root.addHandler(log_to_file)

    logging.captureWarnings(True)
    return log_file
