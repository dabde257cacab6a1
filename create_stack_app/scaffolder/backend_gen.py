"""Backend files: database connection module, models, API routes, seed script.

Only used when a backend is selected.  Exactly one connection module is
written, chosen by the backend.
"""

from __future__ import annotations

from create_stack_app.config import Backend, ProjectConfig

from .templates import TemplateRenderer
from .tree import FileTree

SEED_SCRIPT_PATH = "scripts/seed-db.js"


class BackendGenerator:
    """Adds backend sources for Firebase, MongoDB or PostgreSQL."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, config: ProjectConfig, tree: FileTree) -> None:
        if not config.has_backend:
            return

        ext = config.script_ext
        backend = config.backend.value
        tree.add_file(f"src/backend/config/{backend}.{ext}", self.connection_module(config))

        if config.backend is Backend.MONGODB:
            tree.add_file(f"src/backend/models/User.{ext}", self.user_model(config))

        self._add_api_routes(config, tree)
        tree.add_file(
            SEED_SCRIPT_PATH, self.renderer.render(f"backend/seed_{backend}.js.j2")
        )

    def connection_module(self, config: ProjectConfig) -> str:
        if config.backend is Backend.MONGODB:
            return self.renderer.render(f"backend/mongodb.{config.script_ext}.j2")
        return self.renderer.render(f"backend/{config.backend.value}.j2")

    def user_model(self, config: ProjectConfig) -> str:
        candidate_type = ": string" if config.typescript else ""
        return self.renderer.render("backend/user_model.j2", {"candidate_type": candidate_type})

    def _add_api_routes(self, config: ProjectConfig, tree: FileTree) -> None:
        ext = config.script_ext
        if config.typescript:
            context = {
                "request_type": ": Request",
                "params_type": ": { params: { id: string } }",
            }
        else:
            context = {"request_type": "", "params_type": ""}

        tree.add_file(
            f"src/app/api/users/route.{ext}",
            self.renderer.render("backend/users_route.j2", context),
        )
        tree.add_file(
            f"src/app/api/users/[id]/route.{ext}",
            self.renderer.render("backend/user_route.j2", context),
        )
