"""End-to-end project creation flow.

``ProjectInstaller`` validates the name, collects the stack choices, asks for
confirmation, generates the project and then runs the best-effort steps
(dependency installation, git initialisation).  Nothing on disk is touched
before the user confirms the configuration.

Flow::

    NOT_STARTED -> NAME_VALIDATED -> CONFIG_COLLECTED -> CONFIRMED
        -> DIRECTORY_PREPARED -> TEMPLATE_GENERATED
        -> DEPENDENCIES_INSTALLED -> GIT_INITIALIZED -> DONE

Declining the overwrite or the final confirmation ends in ``CANCELLED``.
"""

from __future__ import annotations

import asyncio
import traceback
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from create_stack_app.config import Backend, InstallerSettings, ProjectConfig
from create_stack_app.errors import CommandError, GenerationError, InvalidProjectNameError
from create_stack_app.package_manager import PackageManager, detect_package_manager
from create_stack_app.prompts import Prompter, stack_questions
from create_stack_app.scaffolder import ProjectGenerator
from create_stack_app.utils import (
    console,
    format_flag,
    path_exists,
    print_banner,
    print_error,
    print_hint,
    print_success,
    print_summary_table,
    print_warning,
    remove_path,
    run_command,
)
from create_stack_app.validation import sanitize_project_name, validate_project_name

Runner = Callable[..., Awaitable[tuple[int, str, str]]]

ENV_HINTS: dict[Backend, str] = {
    Backend.FIREBASE: "Firebase configuration",
    Backend.MONGODB: "MongoDB connection string",
    Backend.POSTGRES: "PostgreSQL connection string",
}


# Failures of the best-effort steps.  An interrupt (Ctrl-C cancels the main
# task under asyncio.run) only abandons the step that was running.
STEP_FAILURES = (CommandError, OSError, asyncio.CancelledError, KeyboardInterrupt)


class InstallState(str, Enum):
    NOT_STARTED = "not_started"
    NAME_VALIDATED = "name_validated"
    CONFIG_COLLECTED = "config_collected"
    CONFIRMED = "confirmed"
    DIRECTORY_PREPARED = "directory_prepared"
    TEMPLATE_GENERATED = "template_generated"
    DEPENDENCIES_INSTALLED = "dependencies_installed"
    GIT_INITIALIZED = "git_initialized"
    DONE = "done"
    CANCELLED = "cancelled"


@dataclass
class InstallResult:
    """Outcome of one installer run."""

    state: InstallState
    project_path: Path
    config: ProjectConfig | None = None
    package_manager: PackageManager | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def cancelled(self) -> bool:
        return self.state is InstallState.CANCELLED


class ProjectInstaller:
    """Drives one project creation from name to next-steps summary.

    Attributes:
        settings: Runtime settings (output directory, step toggles, timeouts).
        prompter: Asks questions; replaced by a scripted fake in tests.
        runner: Coroutine running external commands, ``run_command`` by default.
        state: The last state reached.
    """

    def __init__(
        self,
        settings: InstallerSettings | None = None,
        prompter: Prompter | None = None,
        runner: Runner | None = None,
        package_manager: PackageManager | None = None,
    ) -> None:
        self.settings = settings or InstallerSettings.from_env()
        self.prompter = prompter or Prompter(console)
        self.runner = runner or run_command
        self.package_manager = package_manager or detect_package_manager()
        self.state = InstallState.NOT_STARTED
        self.warnings: list[str] = []

    # ------------------------------------------------------------------
    # Main flow
    # ------------------------------------------------------------------

    async def run(self, project_name: str) -> InstallResult:
        """Create the project called *project_name*.

        Raises:
            InvalidProjectNameError: The name breaks npm naming rules.
                Raised before any prompt or filesystem change.
            GenerationError: Writing the project tree failed.
        """
        print_banner("Create Stack App", "Generate modern full-stack web applications with ease!")

        self._validate_name(project_name)
        project_path = self.settings.project_path(project_name)

        overwrite = False
        if path_exists(project_path):
            overwrite = self.prompter.confirm(
                f'Directory "{project_name}" already exists. Do you want to overwrite it?',
                default=False,
            )
            if not overwrite:
                return self._cancel(project_path)

        answers = self.prompter.ask(stack_questions())
        config = ProjectConfig.from_answers(project_name, answers)
        self.state = InstallState.CONFIG_COLLECTED

        self._print_configuration(config)
        if not self.prompter.confirm("Proceed with this configuration?", default=True):
            return self._cancel(project_path, config)
        self.state = InstallState.CONFIRMED

        if overwrite:
            await asyncio.to_thread(remove_path, project_path)
        self.state = InstallState.DIRECTORY_PREPARED

        await self._generate(config, project_path)
        self.state = InstallState.TEMPLATE_GENERATED

        if self.settings.install_dependencies:
            await self._install_dependencies(project_path)
        self.state = InstallState.DEPENDENCIES_INSTALLED

        if self.settings.init_git:
            await self._init_git(project_path)
        self.state = InstallState.GIT_INITIALIZED

        self._print_next_steps(config)
        self.state = InstallState.DONE
        return InstallResult(
            state=self.state,
            project_path=project_path,
            config=config,
            package_manager=self.package_manager,
            warnings=list(self.warnings),
        )

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _validate_name(self, project_name: str) -> None:
        validation = validate_project_name(project_name)
        if not validation.valid:
            print_error("Invalid project name:")
            for problem in validation.problems:
                print_hint(f"• {problem}")
            suggestion = sanitize_project_name(project_name)
            if suggestion and validate_project_name(suggestion).valid:
                print_hint(f'Try "{suggestion}" instead.')
            raise InvalidProjectNameError(project_name, validation.problems)
        self.state = InstallState.NAME_VALIDATED

    async def _generate(self, config: ProjectConfig, project_path: Path) -> None:
        generator = ProjectGenerator(config)
        try:
            with console.status("Creating project structure..."):
                await generator.generate(self.settings.output_dir)
        except Exception as exc:
            print_error("Failed to generate stack")
            print_error(f"Error details: {exc}")
            console.print(traceback.format_exc(), style="dim", markup=False)
            raise GenerationError(project_path, exc) from exc
        print_success("Project structure created!")

    async def _install_dependencies(self, project_path: Path) -> None:
        pm = self.package_manager
        try:
            with console.status(f"Installing dependencies with {pm.value}..."):
                await self._run_checked(
                    pm.install_command, project_path, self.settings.install_timeout
                )
        except STEP_FAILURES as exc:
            self._recover(exc)
            self._warn(
                "Dependencies installation failed. You can install them manually.",
                exc,
            )
            print_hint(f"Run: cd {project_path.name} && {' '.join(pm.install_command)}")
            return
        print_success("Dependencies installed!")

    async def _init_git(self, project_path: Path) -> None:
        commands = [
            ["git", "init"],
            ["git", "add", "."],
            ["git", "commit", "-m", self.settings.commit_message],
        ]
        try:
            with console.status("Initializing git repository..."):
                for cmd in commands:
                    await self._run_checked(cmd, project_path, self.settings.git_timeout)
        except STEP_FAILURES as exc:
            self._recover(exc)
            self._warn("Git initialization failed. You can initialize it manually.", exc)
            return
        print_success("Git repository initialized!")

    async def _run_checked(self, cmd: list[str], cwd: Path, timeout: int) -> str:
        returncode, stdout, stderr = await self.runner(cmd, cwd=cwd, timeout=timeout)
        if returncode != 0:
            raise CommandError(cmd, returncode, stderr)
        return stdout

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _cancel(self, project_path: Path, config: ProjectConfig | None = None) -> InstallResult:
        print_warning("Operation cancelled.")
        self.state = InstallState.CANCELLED
        return InstallResult(state=self.state, project_path=project_path, config=config)

    def _recover(self, exc: BaseException) -> None:
        """Withdraw the cancellation request behind an interrupted step."""
        if isinstance(exc, asyncio.CancelledError):
            task = asyncio.current_task()
            if task is not None:
                task.uncancel()

    def _warn(self, message: str, exc: BaseException) -> None:
        self.warnings.append(f"{message} ({exc})" if str(exc) else message)
        print_warning(message)

    def _print_configuration(self, config: ProjectConfig) -> None:
        rows: dict[str, Any] = {
            "Project Name": f"[cyan]{config.project_name}[/cyan]",
            "Frontend": f"[cyan]{config.frontend.value}[/cyan]",
            "UI Framework": f"[cyan]{config.ui.value}[/cyan]",
            "Backend": f"[cyan]{config.backend.value}[/cyan]",
            "TypeScript": format_flag(config.typescript),
            "Authentication": format_flag(config.auth),
            "Animations": format_flag(config.animations),
            "3D Support": format_flag(config.three_d),
            "Testing": format_flag(config.testing),
            "Docker": format_flag(config.docker),
        }
        print_summary_table(rows, title="Configuration Summary")

    def _print_next_steps(self, config: ProjectConfig) -> None:
        pm = self.package_manager
        console.print("\n[bold green]Your project is ready![/bold green]")

        console.print("\n[blue]Next steps:[/blue]")
        print_hint(f"cd {config.project_name}")
        if config.has_backend:
            print_hint("cp .env.example .env")
            print_hint("# Configure your environment variables")
        print_hint(pm.run_command("dev"))

        console.print("\n[blue]Available scripts:[/blue]")
        scripts = [
            ("dev", "Start development server"),
            ("build", "Build for production"),
            ("lint", "Run ESLint"),
        ]
        if config.testing:
            scripts.append(("test", "Run tests"))
        if config.has_backend:
            scripts.append(("seed-db", "Seed database with sample data"))
        width = max(len(pm.run_command(name)) for name, _ in scripts)
        for name, description in scripts:
            print_hint(f"{pm.run_command(name):<{width}}  - {description}")

        if config.has_backend:
            console.print("\n[blue]Environment setup:[/blue]")
            console.print("   [yellow]Don't forget to configure your environment variables in .env[/yellow]")
            print_hint(f"• {ENV_HINTS[config.backend]}")
            if config.auth:
                print_hint("• JWT secret for authentication")

        console.print("\n[blue]Documentation:[/blue]")
        print_hint("Check README.md for detailed setup instructions")

        console.print("\n[bold green]Happy coding![/bold green]")
