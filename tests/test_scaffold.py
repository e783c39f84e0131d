"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

import pier
from pier import __version__
from pier.cli import exit_codes
from pier.cli.app import main
from pier.exceptions import (
    ColorSelectionError,
    ConfigurationError,
    EnvironmentError,
    InvalidColorSpecError,
    PierError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


class TestPublicApi:
    def test_top_level_exports(self) -> None:
        style = pier.create_style("#FF0000")
        assert pier.render(style, "Hello") == "\x1b[38;2;255;0;0mHello\x1b[0m"

    def test_all_names_resolve(self) -> None:
        for name in pier.__all__:
            assert hasattr(pier, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidColorSpecError,
            ColorSelectionError,
            ConfigurationError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[PierError]
    ) -> None:
        assert issubclass(exc_class, PierError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(PierError, Exception)

    def test_hint_is_stored(self) -> None:
        err = PierError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = PierError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: pier" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("pier.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object) -> None:
        code = main(["doctor"])
        assert code == exit_codes.SUCCESS

    def test_text_routes_to_render(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from pier.cli import app as app_module

        seen: list[str] = []

        def _fake_render(text: str, args: object, settings: object) -> int:
            seen.append(text)
            return exit_codes.SUCCESS

        monkeypatch.setattr(app_module, "_handle_render", _fake_render)
        code = main(["Hello", "--fg", "red"])
        assert code == exit_codes.SUCCESS
        assert seen == ["Hello"]
