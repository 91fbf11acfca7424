from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import structlog


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> TextIO:
    """Configure structlog for treepeek.

    The UI owns the terminal while a session runs, so pass *log_file* to keep
    debug output away from the screen.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        log_file: Optional file receiving the log lines instead of stderr.

    Returns:
        The stream log lines are written to.
    """
    stream: TextIO = log_file.open("a", encoding="utf-8") if log_file is not None else sys.stderr
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=log_file is None),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
    return stream
