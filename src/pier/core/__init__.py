"""Core layer — pure style construction and rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem, network, or terminal I/O.
* No imports from ``cli`` or ``infra``.
* rich is used only for its color model, never for output.
* All functions must be fully typed and deterministic.
"""

from pier.core.color_parser import parse_color_spec
from pier.core.models import (
    AnsiColor,
    ColorProfile,
    ColorSpec,
    HexColor,
    NamedColor,
    RgbColor,
    Style,
)
from pier.core.renderer import create_style, render, sgr_parameters

__all__: list[str] = [
    "AnsiColor",
    "ColorProfile",
    "ColorSpec",
    "HexColor",
    "NamedColor",
    "RgbColor",
    "Style",
    "create_style",
    "parse_color_spec",
    "render",
    "sgr_parameters",
]
