"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and produces the complete Next.js project tree.
Generation happens in two phases: :meth:`ProjectGenerator.build_tree` runs
every stage against an in-memory ``FileTree`` without touching the disk, and
:meth:`ProjectGenerator.generate` writes that tree below the output
directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from create_stack_app.config import ProjectConfig

from .backend_gen import BackendGenerator
from .config_files import ConfigFilesGenerator
from .docker_gen import DockerGenerator
from .docs_gen import DocsGenerator
from .extras_gen import ExtrasGenerator
from .manifest import ManifestGenerator
from .source_gen import SourceGenerator
from .templates import TemplateRenderer
from .tree import FileTree

# ---------------------------------------------------------------------------
# Directory skeleton
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/app",
    "src/app/about",
    "src/app/contact",
    "src/components",
    "src/components/ui",
    "src/lib",
    "src/hooks",
    "src/utils",
    "src/styles",
    "public",
    "public/images",
    ".github",
    ".github/workflows",
    ".vscode",
)

BACKEND_DIRECTORIES: tuple[str, ...] = (
    "src/backend",
    "src/backend/config",
    "src/backend/models",
    "src/backend/utils",
    "src/backend/lib",
    "scripts",
    "src/app/api/users",
    "src/app/api/users/[id]",
)

TEST_DIRECTORIES: tuple[str, ...] = (
    "__tests__",
    "__tests__/components",
    "__tests__/utils",
    "__tests__/pages",
)


def directory_skeleton(config: ProjectConfig) -> list[str]:
    """Directories created for *config*, in creation order."""
    dirs = list(BASE_DIRECTORIES)
    if config.has_backend:
        dirs.extend(BACKEND_DIRECTORIES)
    if config.testing:
        dirs.extend(TEST_DIRECTORIES)
    return dirs


class Stage(Protocol):
    def generate(self, config: ProjectConfig, tree: FileTree) -> None: ...


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates:
    - ``package.json`` with scripts and dependencies for the chosen stack
    - Next.js, TypeScript, Tailwind, ESLint, Prettier and Jest configuration
    - Dockerfile and Docker Compose file (optional)
    - App Router layout and pages, shadcn components and styles
    - Database connection module, API routes and seed script (optional)
    - README, ``.env.example``, CI/CD workflow and editor settings
    """

    def __init__(self, config: ProjectConfig, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.stages: list[Stage] = [
            ManifestGenerator(),
            ConfigFilesGenerator(self.renderer),
            DockerGenerator(self.renderer),
            SourceGenerator(self.renderer),
            BackendGenerator(self.renderer),
            DocsGenerator(self.renderer),
            ExtrasGenerator(self.renderer),
        ]

    # -- Public API --------------------------------------------------------

    def build_tree(self) -> FileTree:
        """Run every stage and return the resulting in-memory tree.

        Pure: the same configuration always yields an identical tree.
        """
        tree = FileTree()
        for directory in directory_skeleton(self.config):
            tree.add_dir(directory)
        for stage in self.stages:
            stage.generate(self.config, tree)
        return tree

    async def generate(self, output_dir: str | Path) -> Path:
        """Generate the project below *output_dir*.

        Args:
            output_dir: Parent directory.  A subdirectory named after the
                project is created inside it.

        Returns:
            Path to the generated project root.
        """
        project_root = Path(output_dir) / self.config.project_name
        tree = self.build_tree()
        await tree.write(project_root)
        return project_root
