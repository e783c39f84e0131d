"""Allow ``python -m pier`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m pier`` behaves identically to the ``pier`` console script.
"""

from __future__ import annotations

from pier.cli.app import cli

if __name__ == "__main__":
    cli()
