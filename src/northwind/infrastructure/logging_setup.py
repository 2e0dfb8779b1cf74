"""Root logger configuration for the command-line entry point."""

from __future__ import annotations

import logging
import sys

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = logging.WARNING, log_format: str = DEFAULT_LOG_FORMAT) -> None:
    """Send log records at ``level`` and above to stderr.

    Existing root handlers are replaced so repeated calls (one per CLI
    invocation in tests) do not stack handlers.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format))
    root_logger.addHandler(handler)

    # SQLAlchemy's echo logging is driven by its own flag, keep it quiet otherwise.
    if level > logging.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
