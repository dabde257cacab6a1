"""Tooling configuration files at the project root.

Covers Next.js, TypeScript, Tailwind/PostCSS, ESLint, Prettier, Jest and
``.gitignore``.  Docker files are produced separately by
:class:`~create_stack_app.scaffolder.docker_gen.DockerGenerator`.
"""

from __future__ import annotations

from typing import Any

from create_stack_app.config import ProjectConfig, UILibrary

from .templates import TemplateRenderer
from .tree import FileTree

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "es5",
        "lib": ["dom", "dom.iterable", "esnext"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "forceConsistentCasingInFileNames": True,
        "noEmit": True,
        "esModuleInterop": True,
        "module": "esnext",
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "jsx": "preserve",
        "incremental": True,
        "plugins": [{"name": "next"}],
        "paths": {"@/*": ["./src/*"]},
        "baseUrl": ".",
    },
    "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
    "exclude": ["node_modules"],
}

_ESLINT_EXTENDS_BASE = ["'next/core-web-vitals'"]
_ESLINT_EXTENDS_TS = ["'plugin:@typescript-eslint/recommended'"]
_ESLINT_RULES_BASE = [
    "'react/react-in-jsx-scope': 'off'",
    "'react/prop-types': 'off'",
]
_ESLINT_RULES_TS = [
    "'@typescript-eslint/explicit-module-boundary-types': 'off'",
    "'@typescript-eslint/no-unused-vars': ['error', { argsIgnorePattern: '^_' }]",
]
_ESLINT_PARSER_TS = [
    "parser: '@typescript-eslint/parser'",
    "plugins: ['@typescript-eslint']",
]


def _indented(items: list[str], depth: int) -> str:
    pad = "  " * depth
    return "\n".join(f"{pad}{item}," for item in items)


class ConfigFilesGenerator:
    """Adds the root configuration files to the project tree."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, config: ProjectConfig, tree: FileTree) -> None:
        tree.add_file("next.config.js", self.next_config(config))

        if config.typescript:
            tree.add_json("tsconfig.json", TSCONFIG)

        if config.ui in (UILibrary.TAILWIND, UILibrary.SHADCN):
            tree.add_file("tailwind.config.js", self.tailwind_config(config))
            tree.add_file(
                "postcss.config.js", self.renderer.render("config/postcss.config.js.j2")
            )

        tree.add_file(".eslintrc.js", self.eslint_config(config))
        tree.add_file(".prettierrc.js", self.renderer.render("config/prettierrc.js.j2"))

        if config.testing:
            tree.add_file("jest.config.js", self.renderer.render("config/jest.config.js.j2"))
            tree.add_file("jest.setup.js", self.renderer.render("config/jest.setup.js.j2"))

        tree.add_file(".gitignore", self.renderer.render("config/gitignore.j2"))

    # -- Individual files --------------------------------------------------

    def next_config(self, config: ProjectConfig) -> str:
        # The Docker image runs the standalone server bundle.
        output_option = "\n  output: 'standalone'," if config.docker else ""
        return self.renderer.render(
            "config/next.config.js.j2", {"output_option": output_option}
        )

    def tailwind_config(self, config: ProjectConfig) -> str:
        plugins = 'require("tailwindcss-animate")' if config.ui is UILibrary.SHADCN else ""
        return self.renderer.render("config/tailwind.config.js.j2", {"plugins": plugins})

    def eslint_config(self, config: ProjectConfig) -> str:
        extends = list(_ESLINT_EXTENDS_BASE)
        rules = list(_ESLINT_RULES_BASE)
        parser_lines: list[str] = []
        if config.typescript:
            extends += _ESLINT_EXTENDS_TS
            rules += _ESLINT_RULES_TS
            parser_lines = _ESLINT_PARSER_TS
        extends.append("'prettier'")
        rules.append("'prettier/prettier': 'error'")

        parser_options = _indented(parser_lines, 1) + "\n" if parser_lines else ""
        return self.renderer.render(
            "config/eslintrc.js.j2",
            {
                "extends": _indented(extends, 2),
                "parser_options": parser_options,
                "rules": _indented(rules, 2),
            },
        )
