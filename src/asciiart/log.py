"""Logging setup for the command line entry points.

Usage:
    from asciiart.log import setup_logging

    setup_logging()             # warnings and errors to stderr
    setup_logging(debug=True)   # include per-run pipeline details

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, once, by whichever entry point runs.
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING, fmt: str = DEFAULT_FORMAT, *, debug: bool = False) -> None:
    """Configure the root logger to write to stderr."""
    if debug:
        level = logging.DEBUG

    logging.basicConfig(level=level, format=fmt, handlers=[logging.StreamHandler(sys.stderr)], force=True)

    # Pillow logs plugin probing at DEBUG
    logging.getLogger("PIL").setLevel(max(level, logging.INFO))
