"""Infrastructure: terminal color-profile detection.

This module inspects the process environment and the output stream to
decide which :class:`~pier.core.models.ColorProfile` the terminal can
display.

Rules
-----
* Detection reads environment variables and ``isatty()`` only — no
  terminal queries, no escape-sequence probing.
* No ``print()`` — callers handle user-facing output.

Precedence (first match wins)
-----------------------------
1. ``NO_COLOR`` set and non-empty       → ASCII
2. stream is not a TTY, no ``CLICOLOR_FORCE`` → ASCII
3. ``COLORTERM`` truecolor/24bit, or ``WT_SESSION`` set → TRUECOLOR
4. ``TERM=dumb``                        → ASCII
5. ``TERM`` contains ``256color``       → ANSI256
6. anything else                        → ANSI
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from pier.core.models import ColorProfile

logger = logging.getLogger(__name__)

_TRUECOLOR_VALUES: frozenset[str] = frozenset({"truecolor", "24bit"})


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TerminalStatus:
    """Result of a color-profile detection probe.

    Attributes
    ----------
    profile : ColorProfile
        Richest profile the terminal is believed to support.
    is_tty : bool
        Whether the probed stream is attached to a terminal.
    term : str | None
        Value of ``TERM``, or ``None`` when unset.
    reason : str
        Human-readable explanation of the decision (shown by ``doctor``).
    """

    profile: ColorProfile
    is_tty: bool
    term: str | None
    reason: str


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed stream.
        return False


def _forced(environ: Mapping[str, str]) -> bool:
    value = environ.get("CLICOLOR_FORCE", "")
    return value not in ("", "0")


def detect_color_profile(
    environ: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> TerminalStatus:
    """Probe *environ* and *stream* for color support.

    Defaults to :data:`os.environ` and :data:`sys.stdout`.  Always
    returns a :class:`TerminalStatus`; the caller decides what to do
    with a colorless result.
    """
    env = os.environ if environ is None else environ
    out = sys.stdout if stream is None else stream
    is_tty = _stream_is_tty(out)
    term = env.get("TERM")

    def _status(profile: ColorProfile, reason: str) -> TerminalStatus:
        logger.debug("detected color profile %s (%s)", profile.value, reason)
        return TerminalStatus(profile=profile, is_tty=is_tty, term=term, reason=reason)

    if env.get("NO_COLOR"):
        return _status(ColorProfile.ASCII, "NO_COLOR is set")
    if not is_tty and not _forced(env):
        return _status(ColorProfile.ASCII, "output is not a terminal")
    if env.get("COLORTERM", "").lower() in _TRUECOLOR_VALUES:
        return _status(ColorProfile.TRUECOLOR, f"COLORTERM={env['COLORTERM']}")
    if env.get("WT_SESSION"):
        return _status(ColorProfile.TRUECOLOR, "Windows Terminal session")
    if term == "dumb":
        return _status(ColorProfile.ASCII, "TERM=dumb")
    if term and "256color" in term:
        return _status(ColorProfile.ANSI256, f"TERM={term}")
    return _status(ColorProfile.ANSI, f"TERM={term}" if term else "TERM is unset")
