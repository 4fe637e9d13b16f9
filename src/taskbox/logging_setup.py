# src/taskbox/logging_setup.py

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_PACKAGE = __name__.partition(".")[0]


class _ConsoleNoiseFilter(logging.Filter):
    """Console shows taskbox records; anything else (py.warnings included) only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == _PACKAGE or name.startswith(_PACKAGE + "."):
            return True
        return record.levelno >= logging.ERROR


def log_file_for(settings) -> Path:
    """<data_dir>/<app_name>.log, with the app name reduced to a safe file stem."""
    app_name = str(getattr(settings, "app_name", "") or _PACKAGE)
    stem = re.sub(r"[^A-Za-z0-9_.-]+", "_", app_name).strip("._") or _PACKAGE
    return Path(settings.data_dir) / f"{stem}.log"


def console_level_for(settings) -> int:
    level = logging.getLevelName(str(getattr(settings, "log_level", "INFO")).upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings) -> Path:
    """
    Route all records to the log file and taskbox records to stderr.

    The store logs every mutation at DEBUG, so the file keeps the full history
    while the console stays at settings.log_level. Returns the log file path.
    """
    log_file = log_file_for(settings)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level_for(settings))
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
