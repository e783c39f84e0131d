"""pier — styled text for the terminal.

Build an immutable :class:`~pier.core.models.Style` from a color
description, then render text with it::

    from pier import create_style, render

    style = create_style("#FF0000")
    print(render(style, "Hello"))
"""

from pier.core.models import (
    AnsiColor,
    ColorProfile,
    ColorSpec,
    HexColor,
    NamedColor,
    RgbColor,
    Style,
)
from pier.core.renderer import create_style, render
from pier.exceptions import InvalidColorSpecError, PierError
from pier.version import __version__

__all__: list[str] = [
    "AnsiColor",
    "ColorProfile",
    "ColorSpec",
    "HexColor",
    "InvalidColorSpecError",
    "NamedColor",
    "PierError",
    "RgbColor",
    "Style",
    "__version__",
    "create_style",
    "render",
]
