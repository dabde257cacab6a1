"""Unit tests for question specs and the Rich prompter (create_stack_app.prompts)."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from rich.console import Console

from create_stack_app.prompts import (
    BACKEND_CHOICES,
    FRONTEND_CHOICES,
    UI_CHOICES,
    Prompter,
    Question,
    stack_questions,
)


@pytest.fixture
def prompter() -> Prompter:
    return Prompter(Console(record=True, width=100))


# ---------------------------------------------------------------------------
# Question specs
# ---------------------------------------------------------------------------


class TestStackQuestions:
    @pytest.mark.unit
    def test_order(self):
        names = [q.name for q in stack_questions()]
        assert names == [
            "frontend",
            "ui",
            "backend",
            "typescript",
            "auth",
            "animations",
            "threeD",
            "testing",
            "docker",
        ]

    @pytest.mark.unit
    def test_defaults(self):
        defaults = {q.name: q.default for q in stack_questions()}
        assert defaults == {
            "frontend": "nextjs",
            "ui": "shadcn",
            "backend": "firebase",
            "typescript": True,
            "auth": True,
            "animations": False,
            "threeD": False,
            "testing": True,
            "docker": False,
        }

    @pytest.mark.unit
    def test_auth_hidden_without_backend(self):
        auth = next(q for q in stack_questions() if q.name == "auth")
        assert auth.is_visible({"backend": "mongodb"})
        assert not auth.is_visible({"backend": "none"})

    @pytest.mark.unit
    def test_choice_values(self):
        assert [c.value for c in FRONTEND_CHOICES] == ["nextjs", "react"]
        assert [c.value for c in UI_CHOICES] == ["shadcn", "tailwind", "mui"]
        assert [c.value for c in BACKEND_CHOICES] == ["firebase", "mongodb", "postgres", "none"]


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------


class TestPrompter:
    @pytest.mark.unit
    def test_confirm_uses_rich_confirm(self, prompter: Prompter):
        with patch("create_stack_app.prompts.Confirm.ask", return_value=False) as ask:
            assert prompter.confirm("Overwrite?", default=True) is False
        ask.assert_called_once()
        assert ask.call_args.kwargs["default"] is True

    @pytest.mark.unit
    def test_select_restricts_to_choice_values(self, prompter: Prompter):
        question = Question("ui", "Choose a UI library", kind="select", choices=UI_CHOICES, default="shadcn")
        with patch("create_stack_app.prompts.Prompt.ask", return_value="mui") as ask:
            answers = prompter.ask([question])
        assert answers == {"ui": "mui"}
        assert ask.call_args.kwargs["choices"] == ["shadcn", "tailwind", "mui"]
        assert ask.call_args.kwargs["default"] == "shadcn"

    @pytest.mark.unit
    def test_select_lists_labels(self, prompter: Prompter):
        question = Question("ui", "Choose a UI library", kind="select", choices=UI_CHOICES)
        with patch("create_stack_app.prompts.Prompt.ask", return_value="tailwind"):
            prompter.ask([question])
        output = prompter.console.export_text()
        assert "ShadCN UI (Recommended)" in output
        assert "Material UI" in output

    @pytest.mark.unit
    def test_input_reasks_until_non_empty(self, prompter: Prompter):
        with patch("create_stack_app.prompts.Prompt.ask", side_effect=["", "   ", " my-app "]) as ask:
            assert prompter.text("Project name?") == "my-app"
        assert ask.call_count == 3

    @pytest.mark.unit
    def test_hidden_questions_are_skipped(self, prompter: Prompter):
        questions = [
            Question("backend", "Backend", kind="select", choices=BACKEND_CHOICES, default="firebase"),
            Question("auth", "Auth?", kind="confirm", when=lambda a: a.get("backend") != "none"),
        ]
        with patch("create_stack_app.prompts.Prompt.ask", return_value="none"), patch(
            "create_stack_app.prompts.Confirm.ask"
        ) as confirm:
            answers = prompter.ask(questions)
        assert answers == {"backend": "none"}
        confirm.assert_not_called()

    @pytest.mark.unit
    def test_full_stack_questions(self, prompter: Prompter):
        selects = iter(["nextjs", "tailwind", "postgres"])
        with patch(
            "create_stack_app.prompts.Prompt.ask", side_effect=lambda *a, **k: next(selects)
        ), patch("create_stack_app.prompts.Confirm.ask", return_value=True) as confirm:
            answers = prompter.ask(stack_questions())
        assert answers["backend"] == "postgres"
        assert answers["auth"] is True
        assert confirm.call_count == 6
