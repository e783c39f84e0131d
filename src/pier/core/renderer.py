"""Style construction and rendering.

:func:`create_style` validates a color description and returns an
immutable :class:`~pier.core.models.Style`.  :func:`render` wraps text
in a single SGR control sequence and a trailing reset.

Guarantees
----------
* Pure — no I/O, no ``print()``, no shared mutable state.
* The input text appears verbatim between the control codes.
* Rendering empty text still yields the control-code wrapper, except
  for :attr:`ColorProfile.ASCII`, which emits no control codes at all.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.color import Color, ColorSystem

from pier.core.color_parser import parse_color_spec, to_rich_color
from pier.core.models import ColorProfile, ColorSpec, Style

logger = logging.getLogger(__name__)

CSI: str = "\x1b["
"""Control Sequence Introducer."""

RESET: str = f"{CSI}0m"
"""SGR reset — restores default attributes."""

_BOLD: str = "1"
_ITALIC: str = "3"
_UNDERLINE: str = "4"

_PROFILE_SYSTEMS: dict[ColorProfile, ColorSystem] = {
    ColorProfile.TRUECOLOR: ColorSystem.TRUECOLOR,
    ColorProfile.ANSI256: ColorSystem.EIGHT_BIT,
    ColorProfile.ANSI: ColorSystem.STANDARD,
}


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def create_style(
    foreground_color: ColorSpec | str | int | Sequence[int],
    *,
    background: ColorSpec | str | int | Sequence[int] | None = None,
    bold: bool = False,
    italic: bool = False,
    underline: bool = False,
) -> Style:
    """Build a validated, immutable :class:`Style`.

    Raises
    ------
    InvalidColorSpecError
        If either color cannot be parsed.
    """
    foreground = parse_color_spec(foreground_color)
    parsed_background = parse_color_spec(background) if background is not None else None
    style = Style(
        foreground=foreground,
        background=parsed_background,
        bold=bool(bold),
        italic=bool(italic),
        underline=bool(underline),
    )
    logger.debug("created style %r", style)
    return style


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _color_codes(color: Color, profile: ColorProfile, *, foreground: bool) -> tuple[str, ...]:
    downgraded = color.downgrade(_PROFILE_SYSTEMS[profile])
    return downgraded.get_ansi_codes(foreground=foreground)


def sgr_parameters(
    style: Style,
    profile: ColorProfile = ColorProfile.TRUECOLOR,
) -> tuple[str, ...]:
    """Return the SGR parameters :func:`render` emits for *style*.

    Order: text attributes, then foreground, then background.  Empty
    for :attr:`ColorProfile.ASCII`.
    """
    if profile is ColorProfile.ASCII:
        return ()

    params: list[str] = []
    if style.bold:
        params.append(_BOLD)
    if style.italic:
        params.append(_ITALIC)
    if style.underline:
        params.append(_UNDERLINE)
    params.extend(
        _color_codes(to_rich_color(style.foreground), profile, foreground=True)
    )
    if style.background is not None:
        params.extend(
            _color_codes(to_rich_color(style.background), profile, foreground=False)
        )
    return tuple(params)


def render(
    style: Style,
    text: str,
    profile: ColorProfile = ColorProfile.TRUECOLOR,
) -> str:
    """Wrap *text* in the control sequence for *style*.

    Already rendered input is wrapped again; the inner sequences are
    left untouched.

    Example
    -------
    >>> render(create_style("#FF0000"), "Hello")
    '\\x1b[38;2;255;0;0mHello\\x1b[0m'
    """
    params = sgr_parameters(style, profile)
    if not params:
        return text
    return f"{CSI}{';'.join(params)}m{text}{RESET}"
