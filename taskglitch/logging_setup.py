"""
Logging configuration.

Modules log through ``logging.getLogger(__name__)``; this only decides where
the records go. Call setup_logging() once, before the first log call.
"""

import logging
import sys


class _ThirdPartyFilter(logging.Filter):
    """Keep taskglitch logs; only let other libraries through at WARNING+"""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskglitch"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str = "INFO") -> None:
    """
    Configure a stderr handler at the given level.

    Args:
        level: Level name such as "DEBUG" or "INFO"; unknown names fall back to INFO
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    handler.addFilter(_ThirdPartyFilter())
    root.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
