"""Domain models for pier.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.  Validation lives in
:mod:`pier.core.color_parser`, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


# ---------------------------------------------------------------------------
# Color specifications (tagged variant)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NamedColor:
    """A named terminal color such as ``red`` or ``bright_blue``."""

    name: str


@dataclass(frozen=True, slots=True)
class HexColor:
    """A 24-bit color written as ``#rrggbb``."""

    value: str
    """Hex string including the leading ``#``."""


@dataclass(frozen=True, slots=True)
class RgbColor:
    """A 24-bit color given as separate red, green and blue components."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True, slots=True)
class AnsiColor:
    """An entry of the 256-color ANSI palette."""

    index: int


ColorSpec = Union[NamedColor, HexColor, RgbColor, AnsiColor]
"""Every accepted shape of a color description."""


# ---------------------------------------------------------------------------
# Color profiles
# ---------------------------------------------------------------------------

class ColorProfile(Enum):
    """Color encoding capability of an output terminal.

    Ordered from richest to poorest.  Colors are downgraded to the
    nearest representable value when rendered for a poorer profile.
    """

    TRUECOLOR = "truecolor"
    ANSI256 = "ansi256"
    ANSI = "ansi"
    ASCII = "ascii"


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Style:
    """An immutable bundle of terminal rendering attributes.

    Instances should be built through :func:`pier.core.renderer.create_style`,
    which validates every color before a ``Style`` exists.
    """

    foreground: ColorSpec

    background: ColorSpec | None = None

    bold: bool = False
    italic: bool = False
    underline: bool = False
