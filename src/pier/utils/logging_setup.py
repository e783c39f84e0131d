"""Diagnostic logging routed through Rich on stderr.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached once, by the CLI, through :func:`configure_logging`.  Rendered
text is never sent through logging — it goes to stdout untouched.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pier"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a :class:`RichHandler` to the ``pier`` logger.

    Calling this again only updates the level; no duplicate handlers are
    added.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    logger.debug("logging configured at %s", logging.getLevelName(logger.level))
    return logger
