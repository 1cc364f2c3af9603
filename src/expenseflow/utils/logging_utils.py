"""Logging setup shared by the UI entry point."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """Configure the ``expenseflow`` logger and return it.

    - level: DEBUG | INFO | WARNING | ERROR
    - log_file: if set, add a FileHandler
    - format_string: optional; default includes timestamp, level, name, message

    Safe to call on every Streamlit rerun: handlers are only added once.
    """
    log = logging.getLogger("expenseflow")
    log.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")

    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler) for h in log.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        log.addHandler(handler)
    if log_file and not any(getattr(h, "baseFilename", "") == os.path.abspath(log_file) for h in log.handlers):
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            log.addHandler(fh)
        except OSError:
            log.warning("Could not open log file %s", log_file)

    return log
