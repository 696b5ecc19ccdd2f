from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from upgradepath.__main__ import _print_startup_error, main


@pytest.mark.unit
class TestMain:
    """Tests for the ``python -m upgradepath`` entry point."""

    @pytest.mark.parametrize(
        "exit_code",
        [0, 1, 130],
        ids=["success", "error", "interrupted"],
    )
    def test_returns_cli_exit_code(self, exit_code: int) -> None:
        cli_module = MagicMock()
        cli_module.main = MagicMock(return_value=exit_code)

        with patch.dict("sys.modules", {"upgradepath.cli": cli_module}):
            result = main()

        assert result == exit_code
        cli_module.main.assert_called_once_with()

    def test_import_error_returns_one(self, capsys: pytest.CaptureFixture) -> None:
        import_error = ImportError("No module named 'rich'")
        real_import = __import__

        def failing_import(name, *args, **kwargs):
            if name == "upgradepath.cli":
                raise import_error
            return real_import(name, *args, **kwargs)

        with patch("builtins.__import__", side_effect=failing_import):
            result = main()

        assert result == 1
        assert "ImportError: No module named 'rich'" in capsys.readouterr().err


@pytest.mark.unit
class TestPrintStartupError:
    """Tests for _print_startup_error."""

    def test_reports_version(self, capsys: pytest.CaptureFixture) -> None:
        version_module = MagicMock(__version__="9.9.9")

        with patch.dict(sys.modules, {"upgradepath.__version__": version_module}):
            _print_startup_error(ImportError("missing click"))

        captured = capsys.readouterr()
        assert captured.err == (
            "upgradepath version: 9.9.9\n\nImportError: missing click\n"
        )
        assert captured.out == ""

    def test_unknown_version(self, capsys: pytest.CaptureFixture) -> None:
        real_import = __import__

        def failing_import(name, *args, **kwargs):
            if name == "upgradepath.__version__":
                raise ImportError("Cannot import version")
            return real_import(name, *args, **kwargs)

        with patch("builtins.__import__", side_effect=failing_import):
            _print_startup_error(ImportError("missing click"))

        captured = capsys.readouterr()
        assert "upgradepath version: <unknown>" in captured.err
        assert "ImportError: missing click" in captured.err
