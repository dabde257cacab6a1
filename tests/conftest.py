"""Shared pytest fixtures for the create-stack-app test suite.

Provides reusable fixtures for:
- Scripted prompt answers (no terminal interaction)
- Installer settings pointed at a temporary directory
- Common project configurations
- A fake command runner recording every external command
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from create_stack_app.config import InstallerSettings, ProjectConfig
from create_stack_app.prompts import Question


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Stand-in for ``Prompter`` that answers from fixed data.

    Stack questions are answered from *answers* (falling back to each
    question's default); confirmations are popped from *confirmations* in
    order.  Every question shown is recorded in ``asked``.
    """

    def __init__(
        self,
        answers: dict[str, Any] | None = None,
        confirmations: Sequence[bool] = (),
        text: str = "",
    ) -> None:
        self.answers = dict(answers or {})
        self.confirmations = list(confirmations)
        self.text_answer = text
        self.asked: list[str] = []
        self.confirm_messages: list[str] = []

    def ask(self, questions: Sequence[Question]) -> dict[str, Any]:
        collected: dict[str, Any] = {}
        for question in questions:
            if not question.is_visible(collected):
                continue
            self.asked.append(question.name)
            collected[question.name] = self.answers.get(question.name, question.default)
        return collected

    def confirm(self, message: str, default: bool = False) -> bool:
        self.confirm_messages.append(message)
        if not self.confirmations:
            raise AssertionError(f"Unexpected confirmation: {message}")
        return self.confirmations.pop(0)

    def text(self, message: str, default: str | None = None) -> str:
        return self.text_answer or (default or "")


@pytest.fixture
def scripted_prompter():
    """Factory for ``ScriptedPrompter`` instances.

    Usage::

        def test_flow(scripted_prompter):
            prompter = scripted_prompter({"backend": "none"}, confirmations=[True])
    """
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Settings & runner
# ---------------------------------------------------------------------------


@pytest.fixture
def settings(tmp_path: Path) -> InstallerSettings:
    """Installer settings writing below ``tmp_path`` with all steps enabled."""
    return InstallerSettings(output_dir=tmp_path)


@pytest.fixture
def ok_runner() -> AsyncMock:
    """Command runner whose every command succeeds."""
    return AsyncMock(return_value=(0, "", ""))


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def default_config() -> ProjectConfig:
    """All defaults: shadcn, Firebase, TypeScript, auth and testing."""
    return ProjectConfig(project_name="my-app")


@pytest.fixture
def minimal_config() -> ProjectConfig:
    """Frontend-only Tailwind project without tests or Docker."""
    return ProjectConfig(
        project_name="demo",
        ui="tailwind",
        backend="none",
        typescript=True,
        testing=False,
        docker=False,
    )


@pytest.fixture
def mongo_config() -> ProjectConfig:
    """MongoDB backend with auth and TypeScript."""
    return ProjectConfig(
        project_name="mongo-app",
        backend="mongodb",
        auth=True,
        typescript=True,
    )


@pytest.fixture
def js_postgres_config() -> ProjectConfig:
    """JavaScript project on PostgreSQL with Docker, MUI and every extra."""
    return ProjectConfig(
        project_name="pg-app",
        ui="mui",
        backend="postgres",
        typescript=False,
        auth=True,
        animations=True,
        three_d=True,
        testing=True,
        docker=True,
    )
