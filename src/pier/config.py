"""Runtime settings read from the process environment.

Variables
---------
``PIER_COLOR_PROFILE``
    ``auto`` (default), ``truecolor``, ``ansi256``, ``ansi`` or ``ascii``.
``PIER_LOG_LEVEL``
    A standard :mod:`logging` level name.  Defaults to ``WARNING``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from pier.core.models import ColorProfile
from pier.exceptions import ConfigurationError

COLOR_PROFILE_VAR = "PIER_COLOR_PROFILE"
LOG_LEVEL_VAR = "PIER_LOG_LEVEL"

AUTO = "auto"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    color_profile: ColorProfile | None = None
    """Forced profile, or ``None`` to detect from the terminal."""

    log_level: str = DEFAULT_LOG_LEVEL


def parse_color_profile(value: str) -> ColorProfile | None:
    """Map a profile name to :class:`ColorProfile`; ``auto`` maps to ``None``."""
    normalized = value.strip().lower()
    if normalized in ("", AUTO):
        return None
    try:
        return ColorProfile(normalized)
    except ValueError as exc:
        choices = ", ".join([AUTO, *(profile.value for profile in ColorProfile)])
        raise ConfigurationError(
            f"Unknown color profile {value!r}.",
            hint=f"Choose one of: {choices}.",
        ) from exc


def parse_log_level(value: str) -> str:
    normalized = value.strip().upper() or DEFAULT_LOG_LEVEL
    if normalized not in _LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {value!r}.",
            hint=f"Choose one of: {', '.join(_LOG_LEVELS)}.",
        )
    return normalized


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (default :data:`os.environ`).

    Raises
    ------
    ConfigurationError
        If a variable holds an unrecognised value.
    """
    env = os.environ if environ is None else environ
    return Settings(
        color_profile=parse_color_profile(env.get(COLOR_PROFILE_VAR, AUTO)),
        log_level=parse_log_level(env.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL)),
    )
