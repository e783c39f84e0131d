"""Shared pytest fixtures and configuration for the pier test suite.

Guidelines
----------
* No real terminal interaction — prompts and TTY checks are mocked.
* Core tests must be pure — no side effects.
* Tests must not depend on the developer's environment variables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

_ENV_VARS: tuple[str, ...] = (
    "NO_COLOR",
    "CLICOLOR_FORCE",
    "COLORTERM",
    "WT_SESSION",
    "TERM",
    "PIER_COLOR_PROFILE",
    "PIER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove color-related variables inherited from the outer shell."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_pier_logger() -> Iterator[None]:
    """Drop handlers attached by ``configure_logging`` between tests."""
    yield
    logger = logging.getLogger("pier")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
