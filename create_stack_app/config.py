"""create-stack-app configuration.

Two typed models live here:

* ``ProjectConfig`` -- the immutable set of stack choices for one generated
  project.  Every generation stage is a pure reader of it.
* ``InstallerSettings`` -- runtime knobs for the tool itself (where to write,
  which best-effort steps to run, timeouts), loadable from environment
  variables.

Both are Pydantic v2 models so they are validated at construction time.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from create_stack_app.validation import validate_project_name


class Frontend(str, Enum):
    NEXTJS = "nextjs"
    REACT = "react"


class UILibrary(str, Enum):
    SHADCN = "shadcn"
    TAILWIND = "tailwind"
    MUI = "mui"


class Backend(str, Enum):
    FIREBASE = "firebase"
    MONGODB = "mongodb"
    POSTGRES = "postgres"
    NONE = "none"


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """The stack choices that drive every generated file.

    ``project_name`` must pass the npm naming rules of
    :func:`~create_stack_app.validation.validate_project_name`, so it is
    always a single safe directory name.  ``auth`` is forced to ``False``
    when there is no backend, whatever the caller passed in.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1, description="Project (and package) name")
    frontend: Frontend = Field(default=Frontend.NEXTJS)
    ui: UILibrary = Field(default=UILibrary.SHADCN)
    backend: Backend = Field(default=Backend.FIREBASE)
    typescript: bool = Field(default=True)
    auth: bool = Field(default=True, description="Pre-configure authentication")
    animations: bool = Field(default=False, description="Framer Motion and GSAP")
    three_d: bool = Field(default=False, description="Three.js and react-three")
    testing: bool = Field(default=True, description="Jest and Testing Library")
    docker: bool = Field(default=False)

    @field_validator("project_name")
    @classmethod
    def _valid_project_name(cls, value: str) -> str:
        validation = validate_project_name(value)
        if not validation.valid:
            raise ValueError("; ".join(validation.problems))
        return value

    @model_validator(mode="before")
    @classmethod
    def _no_auth_without_backend(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("backend") == Backend.NONE:
            data = {**data, "auth": False}
        return data

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def has_backend(self) -> bool:
        return self.backend is not Backend.NONE

    @property
    def source_ext(self) -> str:
        """Extension for React component files (``tsx`` or ``jsx``)."""
        return "tsx" if self.typescript else "jsx"

    @property
    def script_ext(self) -> str:
        """Extension for plain modules (``ts`` or ``js``)."""
        return "ts" if self.typescript else "js"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_answers(cls, project_name: str, answers: dict[str, Any]) -> "ProjectConfig":
        """Build a config from the installer's prompt answers.

        The answer keys follow the question names (``threeD`` rather than
        ``three_d``).  A missing ``auth`` answer -- the question is hidden
        when no backend is selected -- counts as ``False``.
        """
        return cls(
            project_name=project_name,
            frontend=answers.get("frontend", Frontend.NEXTJS),
            ui=answers.get("ui", UILibrary.SHADCN),
            backend=answers.get("backend", Backend.FIREBASE),
            typescript=answers.get("typescript", True),
            auth=answers.get("auth", False),
            animations=answers.get("animations", False),
            three_d=answers.get("threeD", False),
            testing=answers.get("testing", True),
            docker=answers.get("docker", False),
        )


# ---------------------------------------------------------------------------
# Installer settings
# ---------------------------------------------------------------------------

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class InstallerSettings(BaseModel):
    """Runtime settings for the installer flow.

    Instances are normally created once by the CLI entry point via
    :meth:`from_env` and handed to ``ProjectInstaller``.
    """

    output_dir: Path = Field(default_factory=Path.cwd)
    install_dependencies: bool = Field(default=True)
    init_git: bool = Field(default=True)
    install_timeout: int = Field(
        default=600, ge=10, description="Package manager install timeout in seconds"
    )
    git_timeout: int = Field(default=60, ge=5, description="Per git command timeout in seconds")
    commit_message: str = Field(default="Initial commit from create-stack-app")

    def project_path(self, project_name: str) -> Path:
        """Directory a project called *project_name* is generated into."""
        return self.output_dir / project_name

    @classmethod
    def from_env(cls) -> "InstallerSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            CSA_OUTPUT_DIR, CSA_SKIP_INSTALL, CSA_SKIP_GIT,
            CSA_INSTALL_TIMEOUT, CSA_GIT_TIMEOUT, CSA_COMMIT_MESSAGE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CSA_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CSA_OUTPUT_DIR"])
        if os.environ.get("CSA_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["CSA_INSTALL_TIMEOUT"])
        if os.environ.get("CSA_GIT_TIMEOUT"):
            kwargs["git_timeout"] = int(os.environ["CSA_GIT_TIMEOUT"])
        if os.environ.get("CSA_COMMIT_MESSAGE"):
            kwargs["commit_message"] = os.environ["CSA_COMMIT_MESSAGE"]

        return cls(
            install_dependencies=not _env_flag("CSA_SKIP_INSTALL"),
            init_git=not _env_flag("CSA_SKIP_GIT"),
            **kwargs,
        )
