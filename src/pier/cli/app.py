"""CLI application entry point and command routing for pier.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pier.exceptions.PierError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No styling logic lives here — all work is delegated to the core,
  infra and config layers.
* Rendered text goes to stdout via :func:`~pier.cli.console.emit`;
  everything else goes to stderr via the Rich console.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pier.cli import exit_codes
from pier.cli.console import console, emit
from pier.config import AUTO, Settings, load_settings, parse_color_profile
from pier.core.models import ColorProfile
from pier.exceptions import ColorSelectionError, PierError
from pier.utils.logging_setup import configure_logging
from pier.version import __version__

logger = logging.getLogger(__name__)

_PROFILE_CHOICES: tuple[str, ...] = (AUTO, *(profile.value for profile in ColorProfile))


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands are not used; the CLI supports:
    * ``pier <text> --fg COLOR`` — print styled text
    * ``pier doctor``            — environment diagnostics
    * ``pier --version``
    """
    parser = argparse.ArgumentParser(
        prog="pier",
        description="Print text styled with terminal colors.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Text to print, or 'doctor' to run diagnostics.",
    )
    parser.add_argument(
        "--fg",
        metavar="COLOR",
        default=None,
        help="Foreground color: name, #RRGGBB, #RGB, rgb(r,g,b) or 0-255. "
        "Prompts interactively when omitted.",
    )
    parser.add_argument("--bg", metavar="COLOR", default=None, help="Background color.")
    parser.add_argument("--bold", action="store_true", help="Render in bold.")
    parser.add_argument("--italic", action="store_true", help="Render in italics.")
    parser.add_argument("--underline", action="store_true", help="Underline the text.")
    parser.add_argument(
        "--profile",
        choices=_PROFILE_CHOICES,
        default=AUTO,
        help="Color profile to encode for (default: %(default)s).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _resolve_profile(requested: str, settings: Settings) -> ColorProfile:
    """Pick the profile: explicit flag, then settings, then detection."""
    from pier.infra.terminal import detect_color_profile

    explicit = parse_color_profile(requested)
    if explicit is not None:
        return explicit
    if settings.color_profile is not None:
        return settings.color_profile
    return detect_color_profile().profile


def _choose_foreground(text: str) -> str:
    """Ask for a color when none was given, if a human is there to answer."""
    if not sys.stdin.isatty():
        raise ColorSelectionError(
            "No foreground color given.",
            hint="Pass one with --fg, e.g. --fg '#FF0000'.",
        )

    from pier.cli.color_prompt import prompt_color_selection

    return prompt_color_selection(text)


def _handle_render(text: str, args: argparse.Namespace, settings: Settings) -> int:
    """Build the style, render *text* and write it to stdout.

    Flow:
    1. Determine the foreground (flag or interactive picker).
    2. Validate colors into a Style.
    3. Resolve the color profile.
    4. Render and emit.
    """
    from pier.core.renderer import create_style, render

    foreground = args.fg if args.fg is not None else _choose_foreground(text)
    style = create_style(
        foreground,
        background=args.bg,
        bold=args.bold,
        italic=args.italic,
        underline=args.underline,
    )
    profile = _resolve_profile(args.profile, settings)
    logger.debug("rendering with profile %s", profile.value)

    emit(render(style, text, profile))
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from pier.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the pier CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    target: str = args.target

    if target == "doctor":
        return _handle_doctor()

    return _handle_render(target, args, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PierError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
