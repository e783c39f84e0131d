"""Color specification parsing and validation.

Every :data:`~pier.core.models.ColorSpec` variant has exactly one
parse function.  :func:`parse_color_spec` is the single entry point
used by :func:`~pier.core.renderer.create_style`; it routes already
tagged values through a type table and raw user input by its syntax.

rich's color model backs name lookup and ANSI code generation.  Its
``ColorParseError`` is caught here and re-raised as
:class:`~pier.exceptions.InvalidColorSpecError`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

from rich.color import ANSI_COLOR_NAMES, Color, ColorParseError

from pier.core.models import AnsiColor, ColorSpec, HexColor, NamedColor, RgbColor
from pier.exceptions import COLOR_FORMS_HINT, InvalidColorSpecError

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_TEXT_RE = re.compile(r"^rgb\(\s*([^)]*)\)$", re.IGNORECASE)

_COMPONENT_MAX: int = 255


def _invalid(message: str) -> InvalidColorSpecError:
    return InvalidColorSpecError(message, hint=COLOR_FORMS_HINT)


def _check_component(label: str, value: object) -> int:
    """Return *value* as a 0-255 int or raise ``InvalidColorSpecError``."""
    # bool is an int subclass; True is not a color component.
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid(f"{label} must be an integer, got {value!r}.")
    if not 0 <= value <= _COMPONENT_MAX:
        raise _invalid(f"{label} must be between 0 and 255, got {value}.")
    return value


# ---------------------------------------------------------------------------
# Per-variant parsers
# ---------------------------------------------------------------------------

def parse_named(name: str) -> NamedColor:
    """Parse a named color.

    Names are case-insensitive and surrounding whitespace is ignored.
    Only names present in rich's ANSI color table are accepted.
    """
    normalized = name.strip().lower()
    if normalized not in ANSI_COLOR_NAMES:
        raise _invalid(f"Unknown color name {name!r}.")
    return NamedColor(name=normalized)


def parse_hex(value: str) -> HexColor:
    """Parse ``#RRGGBB`` or the short ``#RGB`` form.

    The result is always the six-digit, lower-case form so that equal
    colors compare equal.
    """
    text = value.strip()
    if not _HEX_RE.match(text):
        raise _invalid(f"{value!r} is not a hex color of the form #RRGGBB or #RGB.")
    digits = text[1:].lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return HexColor(value=f"#{digits}")


def parse_rgb(red: object, green: object, blue: object) -> RgbColor:
    """Validate three components and build an :class:`RgbColor`."""
    return RgbColor(
        red=_check_component("red", red),
        green=_check_component("green", green),
        blue=_check_component("blue", blue),
    )


def parse_rgb_text(value: str) -> RgbColor:
    """Parse the textual ``rgb(r, g, b)`` form."""
    match = _RGB_TEXT_RE.match(value.strip())
    if match is None:
        raise _invalid(f"{value!r} is not of the form rgb(r, g, b).")
    parts = [part.strip() for part in match.group(1).split(",")]
    if len(parts) != 3 or not all(part.isdecimal() for part in parts):
        raise _invalid(f"Expected three integer components in {value!r}.")
    red, green, blue = (int(part) for part in parts)
    return parse_rgb(red, green, blue)


def parse_ansi(index: object) -> AnsiColor:
    """Parse an ANSI 256-color palette index (``int`` or digit string)."""
    if isinstance(index, str):
        text = index.strip()
        if not text.isdecimal():
            raise _invalid(f"{index!r} is not an ANSI color index.")
        index = int(text)
    return AnsiColor(index=_check_component("ANSI index", index))


# ---------------------------------------------------------------------------
# Variant dispatch
# ---------------------------------------------------------------------------

def _revalidate_named(spec: NamedColor) -> ColorSpec:
    return parse_named(spec.name)


def _revalidate_hex(spec: HexColor) -> ColorSpec:
    return parse_hex(spec.value)


def _revalidate_rgb(spec: RgbColor) -> ColorSpec:
    return parse_rgb(spec.red, spec.green, spec.blue)


def _revalidate_ansi(spec: AnsiColor) -> ColorSpec:
    return parse_ansi(spec.index)


_VARIANT_PARSERS: dict[type, Callable[..., ColorSpec]] = {
    NamedColor: _revalidate_named,
    HexColor: _revalidate_hex,
    RgbColor: _revalidate_rgb,
    AnsiColor: _revalidate_ansi,
}


def _parse_text(value: str) -> ColorSpec:
    text = value.strip()
    if not text:
        raise _invalid("Color value is empty.")
    if text.startswith("#"):
        return parse_hex(text)
    if text.isdecimal():
        return parse_ansi(text)
    if text.lower().startswith("rgb("):
        return parse_rgb_text(text)
    return parse_named(text)


def parse_color_spec(value: ColorSpec | str | int | Sequence[int]) -> ColorSpec:
    """Parse any accepted color description into a validated variant.

    Accepted inputs
    ---------------
    * a :data:`ColorSpec` variant — re-validated by its own parser;
    * a string — ``#hex``, ``rgb(r, g, b)``, a palette index, or a name;
    * an ``int`` palette index;
    * an ``(r, g, b)`` sequence of integers.

    Raises
    ------
    InvalidColorSpecError
        If *value* is not a recognised color.
    """
    parser = _VARIANT_PARSERS.get(type(value))
    if parser is not None:
        return parser(value)
    if isinstance(value, str):
        return _parse_text(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return parse_ansi(value)
    if isinstance(value, (tuple, list)):
        if len(value) != 3:
            raise _invalid(f"An RGB triple needs exactly three components, got {len(value)}.")
        return parse_rgb(*value)
    raise _invalid(f"Unsupported color value of type {type(value).__name__}.")


# ---------------------------------------------------------------------------
# Bridge to rich's color model
# ---------------------------------------------------------------------------

def to_rich_color(spec: ColorSpec) -> Color:
    """Convert a variant into a :class:`rich.color.Color`.

    The variant is validated first, so a hand-built ``RgbColor(300, 0, 0)``
    raises instead of producing a malformed control sequence.
    """
    spec = parse_color_spec(spec)
    if isinstance(spec, RgbColor):
        return Color.from_rgb(spec.red, spec.green, spec.blue)
    if isinstance(spec, AnsiColor):
        return Color.from_ansi(spec.index)
    source = spec.name if isinstance(spec, NamedColor) else spec.value
    try:
        return Color.parse(source)
    except ColorParseError as exc:
        logger.debug("rich rejected color %r: %s", source, exc)
        raise _invalid(f"{source!r} is not a valid color.") from exc
