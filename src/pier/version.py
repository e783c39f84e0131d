"""Single source of truth for the pier package version."""

from __future__ import annotations

__version__: str = "0.1.0"
