"""Exception types raised by create-stack-app."""

from __future__ import annotations

from pathlib import Path


class CreateStackAppError(Exception):
    """Base class for every error the tool raises on purpose."""


class InvalidProjectNameError(CreateStackAppError):
    """Raised when the requested project name fails validation."""

    def __init__(self, name: str, problems: list[str]) -> None:
        self.name = name
        self.problems = list(problems)
        details = "; ".join(self.problems) or "unknown problem"
        super().__init__(f"Invalid project name {name!r}: {details}")


class GenerationError(CreateStackAppError):
    """Raised when writing the project tree fails part-way through.

    The partially written directory is left in place for inspection.
    """

    def __init__(self, project_path: Path, cause: BaseException) -> None:
        self.project_path = project_path
        self.cause = cause
        super().__init__(f"Failed to generate project at {project_path}: {cause}")


class CommandError(CreateStackAppError):
    """Raised when an external command exits non-zero or times out."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        cmd_str = " ".join(self.command)
        message = f"Command failed (exit {returncode}): {cmd_str}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)
