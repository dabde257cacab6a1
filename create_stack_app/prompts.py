"""Interactive questions.

Questions are plain data (``Question``); the ``Prompter`` asks them on the
terminal with ``rich.prompt``.  Keeping the two apart lets the installer be
driven by scripted answers in tests.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

from rich.console import Console
from rich.prompt import Confirm, Prompt

from create_stack_app.config import Backend, Frontend, UILibrary

QuestionKind = Literal["input", "select", "confirm"]


@dataclass(frozen=True)
class Choice:
    label: str
    value: str


@dataclass(frozen=True)
class Question:
    """A single question.

    ``when`` receives the answers collected so far and decides whether the
    question is shown at all.  Hidden questions produce no answer.
    """

    name: str
    message: str
    kind: QuestionKind = "input"
    choices: Sequence[Choice] = field(default_factory=tuple)
    default: Any = None
    when: Callable[[dict[str, Any]], bool] | None = None

    def is_visible(self, answers: dict[str, Any]) -> bool:
        return self.when is None or self.when(answers)


# ---------------------------------------------------------------------------
# Stack options
# ---------------------------------------------------------------------------

FRONTEND_CHOICES: tuple[Choice, ...] = (
    Choice("Next.js 14 (Recommended)", Frontend.NEXTJS.value),
    Choice("React.js with Vite", Frontend.REACT.value),
)

UI_CHOICES: tuple[Choice, ...] = (
    Choice("ShadCN UI (Recommended)", UILibrary.SHADCN.value),
    Choice("Tailwind CSS", UILibrary.TAILWIND.value),
    Choice("Material UI", UILibrary.MUI.value),
)

BACKEND_CHOICES: tuple[Choice, ...] = (
    Choice("Firebase (Recommended)", Backend.FIREBASE.value),
    Choice("MongoDB with Mongoose", Backend.MONGODB.value),
    Choice("PostgreSQL with Sequelize", Backend.POSTGRES.value),
    Choice("None (Frontend only)", Backend.NONE.value),
)


def stack_questions() -> list[Question]:
    """The questions that build a ``ProjectConfig``, in asking order."""
    return [
        Question(
            "frontend",
            "Choose a frontend framework",
            kind="select",
            choices=FRONTEND_CHOICES,
            default=Frontend.NEXTJS.value,
        ),
        Question(
            "ui",
            "Choose a UI library",
            kind="select",
            choices=UI_CHOICES,
            default=UILibrary.SHADCN.value,
        ),
        Question(
            "backend",
            "Choose a backend",
            kind="select",
            choices=BACKEND_CHOICES,
            default=Backend.FIREBASE.value,
        ),
        Question("typescript", "Do you want to use TypeScript?", kind="confirm", default=True),
        Question(
            "auth",
            "Do you want authentication pre-configured?",
            kind="confirm",
            default=True,
            when=lambda answers: answers.get("backend") != Backend.NONE.value,
        ),
        Question(
            "animations",
            "Do you want to add animation libraries (Framer Motion & GSAP)?",
            kind="confirm",
            default=False,
        ),
        Question("threeD", "Do you want to add 3D support (Three.js)?", kind="confirm", default=False),
        Question(
            "testing",
            "Do you want to include testing setup (Jest & Testing Library)?",
            kind="confirm",
            default=True,
        ),
        Question("docker", "Do you want Docker configuration?", kind="confirm", default=False),
    ]


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------


class Prompter:
    """Asks ``Question`` lists on the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, questions: Sequence[Question]) -> dict[str, Any]:
        """Ask every visible question in order and return the answers."""
        answers: dict[str, Any] = {}
        for question in questions:
            if not question.is_visible(answers):
                continue
            answers[question.name] = self._ask_one(question)
        return answers

    def confirm(self, message: str, default: bool = False) -> bool:
        return self.ask([Question("confirm", message, kind="confirm", default=default)])["confirm"]

    def text(self, message: str, default: str | None = None) -> str:
        return self.ask([Question("text", message, kind="input", default=default)])["text"]

    # -- Per-kind handlers -------------------------------------------------

    def _ask_one(self, question: Question) -> Any:
        if question.kind == "confirm":
            return Confirm.ask(
                question.message,
                default=bool(question.default),
                console=self.console,
            )
        if question.kind == "select":
            return self._ask_select(question)
        return self._ask_input(question)

    def _ask_select(self, question: Question) -> str:
        self.console.print(f"[bold]{question.message}[/bold]")
        for choice in question.choices:
            self.console.print(f"  [cyan]{choice.value}[/cyan]  {choice.label}")
        kwargs: dict[str, Any] = {}
        if question.default is not None:
            kwargs["default"] = question.default
        return Prompt.ask(
            "Selection",
            choices=[c.value for c in question.choices],
            console=self.console,
            **kwargs,
        )

    def _ask_input(self, question: Question) -> str:
        while True:
            if question.default is not None:
                value = Prompt.ask(question.message, default=question.default, console=self.console)
            else:
                value = Prompt.ask(question.message, console=self.console)
            value = value.strip()
            if value:
                return value
            self.console.print("[red]A value is required.[/red]")
