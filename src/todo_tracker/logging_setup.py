"""Console logging for the ``todo`` CLI."""

from __future__ import annotations

import logging
import sys

_PACKAGE_LOGGER = "todo_tracker"


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Send ``todo_tracker.*`` records at ``level`` and above to stderr.

    Safe to call more than once: the previous handler is replaced. The root
    logger is left alone.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ),
    )
    logger.addHandler(handler)
