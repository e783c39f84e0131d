"""Process exit codes returned by ``pier``.

:func:`pier.cli.app.cli` is the only place these are handed to
``sys.exit``; :func:`pier.cli.app.main` and ``run_doctor`` return them.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Styled text was written to stdout, help was shown, or ``doctor`` passed."""

GENERAL_ERROR: int = 1
"""A PierError was reported (bad color, bad setting, no color picked),
or a required ``doctor`` check failed."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C, typically while the color picker is open (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the ``cli()`` boundary."""
