"""Custom exception hierarchy for pier.

All exceptions that cross layer boundaries must inherit from
:class:`PierError`.  Raw third-party exceptions (e.g. rich's
``ColorParseError``) must NEVER propagate beyond the module that calls
the library — they are caught and re-raised as a typed subclass
defined here.

Hierarchy
---------
PierError
├── InvalidColorSpecError
├── ColorSelectionError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class PierError(Exception):
    """Base exception for all pier errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Styles ----------------------------------------------------------------

class InvalidColorSpecError(PierError):
    """Raised when a color value cannot be parsed as a known color format."""


class ColorSelectionError(PierError):
    """Raised when the CLI cannot determine which color to render with."""


# --- Settings / environment ------------------------------------------------

class ConfigurationError(PierError):
    """Raised when an environment setting holds an unusable value."""


class EnvironmentError(PierError):
    """Raised when an optional runtime dependency is not available."""


COLOR_FORMS_HINT: str = (
    "Use a color name (red, bright_blue), a hex value (#FF0000 or #F00), "
    "rgb(255, 0, 0), an ANSI index 0-255, or an (r, g, b) triple."
)
"""Hint attached to every :class:`InvalidColorSpecError`."""
