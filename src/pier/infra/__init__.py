"""Infrastructure layer — integration with the surrounding process.

This layer inspects the environment and the terminal.  It never
writes user-facing output.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from pier.infra.terminal import TerminalStatus, detect_color_profile

__all__: list[str] = [
    "TerminalStatus",
    "detect_color_profile",
]
