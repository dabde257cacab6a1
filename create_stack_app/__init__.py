"""create-stack-app -- interactive scaffolding for full-stack Next.js projects.

Asks a handful of questions (UI library, backend, TypeScript, auth, ...),
renders a complete project tree from Jinja2 templates, then installs
dependencies and initialises a git repository.

Quick usage::

    from create_stack_app import ProjectConfig, ProjectGenerator

    config = ProjectConfig(project_name="my-app", backend="mongodb")
    project_path = await ProjectGenerator(config).generate("/tmp/output")
"""

__version__ = "1.0.0"

from create_stack_app.config import InstallerSettings, ProjectConfig
from create_stack_app.scaffolder import ProjectGenerator

__all__ = [
    "InstallerSettings",
    "ProjectConfig",
    "ProjectGenerator",
    "__version__",
]
