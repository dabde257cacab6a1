"""Tests for the project scaffolding orchestrator.

Covers:
- Directory skeleton per option set
- File selection for the default and the minimal stacks
- Every JS/TS import resolving to a generated file
- Determinism of the in-memory tree
- Writing the tree to disk
"""

from __future__ import annotations

import json
import posixpath
import re
from pathlib import Path
from unittest.mock import patch

import pytest

from create_stack_app.config import ProjectConfig
from create_stack_app.scaffolder import FileTree, ProjectGenerator, directory_skeleton
from create_stack_app.scaffolder.generator import (
    BACKEND_DIRECTORIES,
    BASE_DIRECTORIES,
    TEST_DIRECTORIES,
)

pytestmark = pytest.mark.unit

_IMPORT_RE = re.compile(r"""from ['"](@/[^'"]+|\.{1,2}/[^'"]+)['"]""")


def _local_imports_resolve(tree: FileTree) -> list[str]:
    """Return the unresolved ``@/`` and relative imports in *tree*."""
    files = set(tree.files())
    missing = []
    for path in tree.files():
        if not path.endswith((".ts", ".tsx", ".js", ".jsx")):
            continue
        for target in _IMPORT_RE.findall(tree.content(path)):
            if target.startswith("@/"):
                base = "src/" + target[2:]
            else:
                base = posixpath.normpath(posixpath.join(posixpath.dirname(path), target))
            candidates = {base} | {f"{base}.{ext}" for ext in ("ts", "tsx", "js", "jsx", "css")}
            if not candidates & files:
                missing.append(f"{path} -> {target}")
    return missing


class TestDirectorySkeleton:
    def test_frontend_only(self, minimal_config):
        assert directory_skeleton(minimal_config) == list(BASE_DIRECTORIES)

    def test_backend_and_tests(self, default_config):
        dirs = directory_skeleton(default_config)
        assert dirs == [*BASE_DIRECTORIES, *BACKEND_DIRECTORIES, *TEST_DIRECTORIES]

    def test_directories_precede_files(self, default_config):
        tree = ProjectGenerator(default_config).build_tree()
        paths = tree.paths()
        first_file = paths.index(tree.files()[0])
        assert set(tree.directories()) == set(paths[:first_file])


class TestDefaultStack:
    """shadcn, Firebase, TypeScript, auth and testing."""

    @pytest.fixture
    def tree(self, default_config) -> FileTree:
        return ProjectGenerator(default_config).build_tree()

    def test_expected_files(self, tree):
        for path in (
            "package.json",
            "next.config.js",
            "tsconfig.json",
            "tailwind.config.js",
            "jest.config.js",
            "src/app/layout.tsx",
            "src/app/page.tsx",
            "src/components/ui/button.tsx",
            "src/lib/utils.ts",
            "src/backend/config/firebase.ts",
            "src/app/api/users/route.ts",
            "scripts/seed-db.js",
            "README.md",
            ".env.example",
            ".github/workflows/ci-cd.yml",
        ):
            assert path in tree, path
        assert "Dockerfile" not in tree
        assert "docker-compose.yml" not in tree

    def test_manifest(self, tree):
        manifest = json.loads(tree.content("package.json"))
        assert manifest["name"] == "my-app"
        assert "firebase" in manifest["dependencies"]
        assert "next-auth" in manifest["dependencies"]
        assert "jest" in manifest["devDependencies"]

    def test_imports_resolve(self, tree):
        assert _local_imports_resolve(tree) == []


class TestMinimalStack:
    """Frontend-only Tailwind project in TypeScript."""

    @pytest.fixture
    def tree(self, minimal_config) -> FileTree:
        return ProjectGenerator(minimal_config).build_tree()

    def test_no_backend_files(self, tree):
        assert not any(p.startswith("src/backend") for p in tree)
        assert not any(p.startswith("src/app/api") for p in tree)
        assert "scripts/seed-db.js" not in tree
        assert "jest.config.js" not in tree
        assert not any(p.startswith("__tests__") for p in tree)

    def test_env_has_no_database_section(self, tree):
        env = tree.content(".env.example")
        assert "MONGODB_URI" not in env
        assert "FIREBASE" not in env

    def test_imports_resolve(self, tree):
        assert _local_imports_resolve(tree) == []


class TestJavaScriptStack:
    def test_imports_resolve(self, js_postgres_config):
        tree = ProjectGenerator(js_postgres_config).build_tree()
        assert _local_imports_resolve(tree) == []
        assert "Dockerfile" in tree
        assert not any(p.endswith((".ts", ".tsx")) for p in tree.files())


class TestDeterminism:
    @pytest.mark.parametrize("backend", ["firebase", "mongodb", "postgres", "none"])
    def test_identical_trees(self, backend):
        config = ProjectConfig(project_name="same", backend=backend, docker=True)
        first = ProjectGenerator(config).build_tree()
        second = ProjectGenerator(config).build_tree()
        assert first.paths() == second.paths()
        for path in first.files():
            assert first.content(path) == second.content(path)


@pytest.mark.asyncio
class TestGenerate:
    async def test_writes_project(self, mongo_config, tmp_path: Path):
        gen = ProjectGenerator(mongo_config)
        project = await gen.generate(tmp_path)

        assert project == tmp_path / "mongo-app"
        assert (project / "src" / "hooks").is_dir()
        assert (project / "src" / "app" / "api" / "users" / "[id]" / "route.ts").is_file()
        manifest = json.loads((project / "package.json").read_text(encoding="utf-8"))
        assert "mongoose" in manifest["dependencies"]

    async def test_disk_matches_tree(self, minimal_config, tmp_path: Path):
        gen = ProjectGenerator(minimal_config)
        tree = gen.build_tree()
        project = await gen.generate(tmp_path)

        for path in tree.files():
            assert (project / path).read_text(encoding="utf-8") == tree.content(path)
        for path in tree.directories():
            assert (project / path).is_dir()

    async def test_write_error_propagates(self, minimal_config, tmp_path: Path):
        gen = ProjectGenerator(minimal_config)
        with patch("create_stack_app.scaffolder.tree.write_text", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                await gen.generate(tmp_path)
