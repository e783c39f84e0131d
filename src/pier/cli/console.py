"""CLI output helpers.

Two sinks exist:

* ``console`` — a Rich console on **stderr** for messages, tables,
  prompts and errors;
* :func:`emit` — writes rendered text to **stdout** untouched, so the
  control codes reach the terminal (or a pipe) exactly as produced.
"""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console


def get_rich_console() -> Console:
	"""Create a Rich console instance targeting stderr."""
	return Console(stderr=True, highlight=False)


console = get_rich_console()


def emit(text: str, stream: TextIO | None = None) -> None:
	"""Write *text* followed by a line terminator to *stream* (stdout)."""
	out = sys.stdout if stream is None else stream
	out.write(text + "\n")
	out.flush()
