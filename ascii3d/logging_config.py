#
# PROJECT: ascii3d
# MODULE: ascii3d/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Logging setup for entry points.

Library modules only create module loggers; call setup_logging() once from
a script. Curses front ends should pass console=False and a log_file so
log records never land on the drawn screen.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Log rotation defaults
MAX_BYTES = 1 * 1024 * 1024
BACKUP_COUNT = 2


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None,
                  fmt: str = DEFAULT_FORMAT, debug: bool = False,
                  console: bool = True) -> None:
    """Configure the root logger with a stderr handler and/or a rotating file."""
    if debug:
        level = logging.DEBUG

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=MAX_BYTES,
                                            backupCount=BACKUP_COUNT))
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(level=level, format=fmt, handlers=handlers, force=True)
