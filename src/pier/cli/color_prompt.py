"""Interactive foreground-color picker for the CLI layer.

This module is responsible for:

* Rendering a Rich table previewing the text in each palette color.
* Prompting the user to pick a color via questionary arrow keys.
* Returning the chosen color name as a string.

All display-related logic lives here — no parsing, no rendering of the
final output.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.table import Table
from rich.text import Text

from pier.cli.console import console
from pier.exceptions import ColorSelectionError, EnvironmentError

PALETTE: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)
"""The 16 standard terminal colors offered by the picker."""

_PREVIEW_WIDTH: int = 40


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pass the color explicitly with --fg.",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def _preview_sample(text: str) -> str:
    """Collapse *text* to one line, truncated for the preview column."""
    sample = " ".join(text.split()) or "Sample"
    if len(sample) > _PREVIEW_WIDTH:
        return sample[: _PREVIEW_WIDTH - 1] + "…"
    return sample


def _build_choice_label(index: int, name: str) -> str:
    """Label shown in the selector, e.g. ``"  2.  red"``."""
    return f"  {index + 1:>2}.  {name}"


def _display_palette_table(text: str, palette: Sequence[str]) -> None:
    """Print a Rich table showing *text* in every palette color."""
    sample = _preview_sample(text)

    table = Table(
        title="Foreground Colors",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Name", justify="left", min_width=14)
    table.add_column("Preview", justify="left")

    for i, name in enumerate(palette, start=1):
        table.add_row(str(i), name, Text(sample, style=name))

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_color_selection(
    text: str,
    palette: Sequence[str] = PALETTE,
) -> str:
    """Preview *text* in each color and ask the user to pick one.

    Returns
    -------
    str
        The chosen color name, suitable for
        :func:`~pier.core.renderer.create_style`.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during selection.
    ColorSelectionError
        If the user cancels the prompt (Esc / None return).
    """
    questionary = _import_questionary()

    _display_palette_table(text, palette)

    choices = [
        questionary.Choice(title=_build_choice_label(i, name), value=name)
        for i, name in enumerate(palette)
    ]

    selected: str | None = questionary.select(
        "Select a foreground color:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise ColorSelectionError(
            "No color selected.",
            hint="Use arrow keys to pick a color, then press Enter.",
        )

    return selected
