"""``package.json`` generation.

The manifest is assembled from explicit tables of entries.  Each entry names
the condition under which it is included, so no section is ever built and
then pruned.  Insertion order follows the tables, which keeps the output
stable for a given configuration.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

from create_stack_app.config import Backend, ProjectConfig, UILibrary

from .tree import FileTree

Condition = Callable[[ProjectConfig], bool]


class Entry(NamedTuple):
    name: str
    value: str
    when: Condition


def _always(_: ProjectConfig) -> bool:
    return True


def _typescript(c: ProjectConfig) -> bool:
    return c.typescript


def _testing(c: ProjectConfig) -> bool:
    return c.testing


def _ui(*libraries: UILibrary) -> Condition:
    return lambda c: c.ui in libraries


def _backend(backend: Backend) -> Condition:
    return lambda c: c.backend is backend


def _both(first: Condition, second: Condition) -> Condition:
    return lambda c: first(c) and second(c)


def _select(entries: Iterable[Entry], config: ProjectConfig) -> dict[str, str]:
    return {e.name: e.value for e in entries if e.when(config)}


# ---------------------------------------------------------------------------
# Entry tables
# ---------------------------------------------------------------------------

SEED_SCRIPT = "node scripts/seed-db.js"

SCRIPTS: tuple[Entry, ...] = (
    Entry("dev", "next dev", _always),
    Entry("build", "next build", _always),
    Entry("start", "next start", _always),
    Entry("lint", "next lint", _always),
    Entry("type-check", "tsc --noEmit", _typescript),
    Entry("test", "jest", _testing),
    Entry("test:watch", "jest --watch", _testing),
    Entry("test:coverage", "jest --coverage", _testing),
    Entry("prepare", "husky install", _always),
    Entry("seed-db", SEED_SCRIPT, lambda c: c.has_backend),
)

DEPENDENCIES: tuple[Entry, ...] = (
    Entry("next", "14.2.4", _always),
    Entry("react", "18.2.0", _always),
    Entry("react-dom", "18.2.0", _always),
    Entry("zod", "3.22.4", _always),
    Entry("class-variance-authority", "0.7.0", _always),
    Entry("clsx", "2.1.0", _always),
    Entry("tailwind-merge", "2.2.1", _always),
    Entry("lucide-react", "0.344.0", _always),
    # UI
    Entry("@radix-ui/react-icons", "1.3.0", _ui(UILibrary.SHADCN)),
    Entry("@radix-ui/react-slot", "1.0.2", _ui(UILibrary.SHADCN)),
    Entry("@radix-ui/react-label", "2.0.2", _ui(UILibrary.SHADCN)),
    Entry("@radix-ui/react-dialog", "1.0.5", _ui(UILibrary.SHADCN)),
    Entry("@radix-ui/react-dropdown-menu", "2.0.6", _ui(UILibrary.SHADCN)),
    Entry("@radix-ui/react-avatar", "1.0.4", _ui(UILibrary.SHADCN)),
    Entry("tailwindcss-animate", "1.0.7", _ui(UILibrary.SHADCN)),
    Entry("next-themes", "0.2.1", _ui(UILibrary.SHADCN)),
    Entry("tailwindcss", "3.4.1", _ui(UILibrary.SHADCN, UILibrary.TAILWIND)),
    Entry("postcss", "8.4.35", _ui(UILibrary.SHADCN, UILibrary.TAILWIND)),
    Entry("autoprefixer", "10.4.18", _ui(UILibrary.SHADCN, UILibrary.TAILWIND)),
    Entry("@mui/material", "5.15.12", _ui(UILibrary.MUI)),
    Entry("@mui/icons-material", "5.15.12", _ui(UILibrary.MUI)),
    Entry("@emotion/react", "11.11.4", _ui(UILibrary.MUI)),
    Entry("@emotion/styled", "11.11.0", _ui(UILibrary.MUI)),
    # Backend
    Entry("firebase", "10.8.1", _backend(Backend.FIREBASE)),
    Entry("firebase-admin", "12.0.0", _backend(Backend.FIREBASE)),
    Entry("mongoose", "8.2.1", _backend(Backend.MONGODB)),
    Entry("mongodb", "6.3.0", _backend(Backend.MONGODB)),
    Entry("pg", "8.11.3", _backend(Backend.POSTGRES)),
    Entry("sequelize", "6.37.1", _backend(Backend.POSTGRES)),
    Entry("dotenv", "16.4.5", lambda c: c.has_backend),
    # Optional features
    Entry("next-auth", "4.24.6", lambda c: c.auth),
    Entry("jsonwebtoken", "9.0.2", lambda c: c.auth),
    Entry("bcryptjs", "2.4.3", lambda c: c.auth),
    Entry("framer-motion", "11.0.8", lambda c: c.animations),
    Entry("gsap", "3.12.5", lambda c: c.animations),
    Entry("three", "0.162.0", lambda c: c.three_d),
    Entry("@react-three/fiber", "8.15.19", lambda c: c.three_d),
    Entry("@react-three/drei", "9.102.6", lambda c: c.three_d),
)

DEV_DEPENDENCIES: tuple[Entry, ...] = (
    Entry("eslint", "8.57.0", _always),
    Entry("eslint-config-next", "14.2.4", _always),
    Entry("eslint-config-prettier", "9.1.0", _always),
    Entry("eslint-plugin-prettier", "5.1.3", _always),
    Entry("prettier", "3.2.5", _always),
    Entry("husky", "9.0.11", _always),
    Entry("lint-staged", "15.2.2", _always),
    # TypeScript toolchain
    Entry("typescript", "5.4.2", _typescript),
    Entry("@types/react", "18.2.64", _typescript),
    Entry("@types/node", "20.11.25", _typescript),
    Entry("@types/react-dom", "18.2.21", _typescript),
    Entry("@typescript-eslint/parser", "7.1.1", _typescript),
    Entry("@typescript-eslint/eslint-plugin", "7.1.1", _typescript),
    Entry("@types/pg", "8.11.0", _both(_typescript, _backend(Backend.POSTGRES))),
    Entry("@types/jsonwebtoken", "9.0.5", _both(_typescript, lambda c: c.auth)),
    Entry("@types/bcryptjs", "2.4.6", _both(_typescript, lambda c: c.auth)),
    Entry("@types/gsap", "3.0.0", _both(_typescript, lambda c: c.animations)),
    Entry("@types/three", "0.162.0", _both(_typescript, lambda c: c.three_d)),
    # Testing
    Entry("jest", "29.7.0", _testing),
    Entry("@testing-library/react", "14.2.1", _testing),
    Entry("@testing-library/jest-dom", "6.4.2", _testing),
    Entry("@testing-library/user-event", "14.5.2", _testing),
    Entry("jest-environment-jsdom", "29.7.0", _testing),
    Entry("@types/jest", "29.5.12", _both(_typescript, _testing)),
    Entry("ts-jest", "29.1.2", _both(_typescript, _testing)),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_package_json(config: ProjectConfig) -> dict[str, Any]:
    """Return the ``package.json`` document for *config*."""
    return {
        "name": config.project_name,
        "version": "0.1.0",
        "private": True,
        "scripts": _select(SCRIPTS, config),
        "dependencies": _select(DEPENDENCIES, config),
        "devDependencies": _select(DEV_DEPENDENCIES, config),
    }


class ManifestGenerator:
    """Adds ``package.json`` to the project tree."""

    def generate(self, config: ProjectConfig, tree: FileTree) -> None:
        tree.add_json("package.json", build_package_json(config))
