"""``pier doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can display styled text.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  It purely collects and displays
diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from rich.table import Table

from pier.cli import exit_codes
from pier.cli.console import console
from pier.core.models import ColorProfile, Style
from pier.core.renderer import create_style, render
from pier.infra.terminal import detect_color_profile
from pier.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _package_version_check(
    distribution: str,
    *,
    required: bool,
) -> tuple[str, str, str]:
    """Return (label, value, status) for an installed distribution."""
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        status = "[red]FAIL[/red]" if required else "[yellow]WARN[/yellow]"
        return distribution, "NOT INSTALLED", status
    return distribution, version, "[green]OK[/green]"


def _terminal_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the color-profile row."""
    status_obj = detect_color_profile(stream=sys.stderr)
    value = f"{status_obj.profile.value} ({status_obj.reason})"
    if status_obj.profile is ColorProfile.ASCII:
        return "Colors", value, "[yellow]WARN[/yellow]"
    return "Colors", value, "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _pier_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the pier version row."""
    return "pier", __version__, "[green]OK[/green]"


def _sample_line(profile: ColorProfile) -> str:
    """A line of sample text rendered for *profile*, one swatch per color."""
    swatches: list[Style] = [
        create_style("#FF0000"),
        create_style("#00FF00"),
        create_style("#0000FF"),
        create_style("bright_yellow", bold=True),
    ]
    return " ".join(render(style, "■■■", profile) for style in swatches)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _pier_version_check(),
        _python_version_check(),
        _package_version_check("rich", required=True),
        _package_version_check("questionary", required=False),
        _terminal_check(),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    table = Table(
        title="pier doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)

    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    profile = detect_color_profile(stream=sys.stderr).profile
    if profile is not ColorProfile.ASCII:
        console.file.write(f"Sample: {_sample_line(profile)}\n\n")

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
