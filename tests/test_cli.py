"""Tests for the command-line entry point."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from create_stack_app import __version__
from create_stack_app.cli import build_parser, main
from create_stack_app.errors import InvalidProjectNameError

pytestmark = pytest.mark.unit


@pytest.fixture
def installer_cls():
    with patch("create_stack_app.cli.ProjectInstaller") as cls:
        cls.return_value.run = AsyncMock(return_value=None)
        yield cls


@pytest.fixture
def prompter_cls():
    with patch("create_stack_app.cli.Prompter") as cls:
        yield cls


class TestParser:
    def test_optional_project_name(self):
        assert build_parser().parse_args([]).project_name is None
        assert build_parser().parse_args(["my-app"]).project_name == "my-app"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    def test_runs_installer_with_argument(self, installer_cls, prompter_cls):
        main(["my-app"])

        installer_cls.return_value.run.assert_awaited_once_with("my-app")
        prompter_cls.return_value.text.assert_not_called()

    def test_prompts_for_missing_name(self, installer_cls, prompter_cls):
        prompter_cls.return_value.text.return_value = "prompted-app"

        main([])

        prompter_cls.return_value.text.assert_called_once_with("What is your project named?")
        installer_cls.return_value.run.assert_awaited_once_with("prompted-app")

    def test_error_exits_with_status_one(self, installer_cls, prompter_cls, capsys):
        installer_cls.return_value.run.side_effect = InvalidProjectNameError("My App!", ["bad"])

        with pytest.raises(SystemExit) as exc_info:
            main(["My App!"])

        assert exc_info.value.code == 1
        assert "Invalid project name" in capsys.readouterr().out

    def test_interrupt_exits_with_status_one(self, installer_cls, prompter_cls, capsys):
        prompter_cls.return_value.text.side_effect = KeyboardInterrupt

        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "Operation cancelled." in capsys.readouterr().out
        installer_cls.return_value.run.assert_not_called()
