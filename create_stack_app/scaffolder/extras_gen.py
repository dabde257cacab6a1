"""Supporting project files.

``.env.example`` is stitched together from per-section templates.  The CI
workflow, lint-staged and VS Code files are structured documents dumped as
YAML or JSON.
"""

from __future__ import annotations

from typing import Any

from create_stack_app.config import ProjectConfig

from .templates import TemplateRenderer
from .tree import FileTree

NODE_VERSION = "18"

LINT_STAGED: dict[str, list[str]] = {
    "*.{js,jsx,ts,tsx}": ["eslint --fix", "prettier --write"],
    "*.{json,css,md}": ["prettier --write"],
}

VSCODE_SETTINGS: dict[str, Any] = {
    "editor.formatOnSave": True,
    "editor.defaultFormatter": "esbenp.prettier-vscode",
    "editor.codeActionsOnSave": {"source.fixAll.eslint": "explicit"},
    "typescript.preferences.importModuleSpecifier": "non-relative",
    "emmet.includeLanguages": {
        "javascript": "javascriptreact",
        "typescript": "typescriptreact",
    },
}

VSCODE_EXTENSIONS: dict[str, Any] = {
    "recommendations": [
        "esbenp.prettier-vscode",
        "dbaeumer.vscode-eslint",
        "bradlc.vscode-tailwindcss",
        "ms-vscode.vscode-typescript-next",
        "formulahendry.auto-rename-tag",
        "christian-kohler.path-intellisense",
    ]
}


def _setup_steps() -> list[dict[str, Any]]:
    return [
        {"uses": "actions/checkout@v4"},
        {
            "name": "Setup Node.js",
            "uses": "actions/setup-node@v4",
            "with": {"node-version": NODE_VERSION, "cache": "npm"},
        },
        {"name": "Install dependencies", "run": "npm ci"},
    ]


def _build_step() -> dict[str, Any]:
    return {
        "name": "Build application",
        "run": "npm run build",
        "env": {"NODE_ENV": "production"},
    }


def build_workflow(config: ProjectConfig) -> dict[str, Any]:
    """The GitHub Actions CI/CD workflow as plain data."""
    test_steps = _setup_steps()
    test_steps.append({"name": "Run linting", "run": "npm run lint"})
    if config.typescript:
        test_steps.append({"name": "Run type checking", "run": "npm run type-check"})
    if config.testing:
        test_steps.append({"name": "Run tests", "run": "npm run test"})
    test_steps.append(_build_step())

    deploy_steps = [
        *_setup_steps(),
        _build_step(),
        {
            "name": "Deploy to Vercel",
            "uses": "amondnet/vercel-action@v25",
            "with": {
                "vercel-token": "${{ secrets.VERCEL_TOKEN }}",
                "vercel-org-id": "${{ secrets.VERCEL_ORG_ID }}",
                "vercel-project-id": "${{ secrets.VERCEL_PROJECT_ID }}",
                "vercel-args": "--prod",
            },
        },
    ]

    return {
        "name": "CI/CD Pipeline",
        "on": {
            "push": {"branches": ["main", "develop"]},
            "pull_request": {"branches": ["main"]},
        },
        "jobs": {
            "test": {"runs-on": "ubuntu-latest", "steps": test_steps},
            "deploy": {
                "needs": "test",
                "runs-on": "ubuntu-latest",
                "if": "github.ref == 'refs/heads/main'",
                "steps": deploy_steps,
            },
        },
    }


class ExtrasGenerator:
    """Adds environment template, CI workflow and editor settings."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, config: ProjectConfig, tree: FileTree) -> None:
        tree.add_file(".env.example", self.env_example(config))
        tree.add_yaml(".github/workflows/ci-cd.yml", build_workflow(config))
        tree.add_json(".lintstagedrc.json", LINT_STAGED)
        tree.add_json(".vscode/settings.json", VSCODE_SETTINGS)
        tree.add_json(".vscode/extensions.json", VSCODE_EXTENSIONS)

    def env_example(self, config: ProjectConfig) -> str:
        """Sections in order: application, backend, auth, logging and rate limits."""
        context = {"project_name": config.project_name}
        sections = ["env/app.j2"]
        if config.has_backend:
            sections.append(f"env/{config.backend.value}.j2")
        if config.auth:
            sections.append("env/auth.j2")
        sections.append("env/tail.j2")
        return "\n".join(self.renderer.render(name, context) for name in sections)
