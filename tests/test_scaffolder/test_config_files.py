"""Tests for root configuration files (Next.js, TS, Tailwind, ESLint, Jest)."""

from __future__ import annotations

import json

import pytest

from create_stack_app.config import ProjectConfig
from create_stack_app.scaffolder.config_files import TSCONFIG, ConfigFilesGenerator
from create_stack_app.scaffolder.templates import TemplateRenderer
from create_stack_app.scaffolder.tree import FileTree

pytestmark = pytest.mark.unit


@pytest.fixture
def gen() -> ConfigFilesGenerator:
    return ConfigFilesGenerator(TemplateRenderer())


def _tree(gen: ConfigFilesGenerator, **overrides) -> FileTree:
    tree = FileTree()
    gen.generate(ProjectConfig(project_name="demo", **overrides), tree)
    return tree


class TestFileSelection:
    def test_defaults(self, gen):
        files = _tree(gen).files()
        assert files == [
            "next.config.js",
            "tsconfig.json",
            "tailwind.config.js",
            "postcss.config.js",
            ".eslintrc.js",
            ".prettierrc.js",
            "jest.config.js",
            "jest.setup.js",
            ".gitignore",
        ]

    def test_javascript_mui_without_tests(self, gen):
        files = _tree(gen, typescript=False, ui="mui", testing=False).files()
        assert "tsconfig.json" not in files
        assert "tailwind.config.js" not in files
        assert "postcss.config.js" not in files
        assert "jest.config.js" not in files
        assert ".gitignore" in files


class TestNextConfig:
    def test_standalone_only_with_docker(self, gen):
        assert "output: 'standalone'" in _tree(gen, docker=True).content("next.config.js")
        assert "standalone" not in _tree(gen, docker=False).content("next.config.js")

    def test_no_deprecated_options(self, gen):
        text = _tree(gen).content("next.config.js")
        assert "appDir" not in text
        assert "reactStrictMode: true," in text


class TestTsconfig:
    def test_structured_json(self, gen):
        data = json.loads(_tree(gen).content("tsconfig.json"))
        assert data == TSCONFIG
        assert data["compilerOptions"]["paths"] == {"@/*": ["./src/*"]}


class TestTailwind:
    def test_animate_plugin_only_for_shadcn(self, gen):
        shadcn = _tree(gen, ui="shadcn").content("tailwind.config.js")
        tailwind = _tree(gen, ui="tailwind").content("tailwind.config.js")
        assert 'plugins: [require("tailwindcss-animate")]' in shadcn
        assert "plugins: []" in tailwind


class TestEslint:
    def test_typescript_lines(self, gen):
        text = _tree(gen, typescript=True).content(".eslintrc.js")
        assert "parser: '@typescript-eslint/parser'," in text
        assert "plugins: ['@typescript-eslint']," in text
        assert "'plugin:@typescript-eslint/recommended'," in text
        assert "'@typescript-eslint/no-unused-vars'" in text

    def test_javascript_has_no_typescript_lines(self, gen):
        text = _tree(gen, typescript=False).content(".eslintrc.js")
        assert "typescript" not in text
        assert "\n\n" not in text

    def test_prettier_last(self, gen):
        text = _tree(gen).content(".eslintrc.js")
        extends_block = text.split("],")[0]
        assert extends_block.rstrip().endswith("'prettier',")
        assert text.index("'prettier/prettier': 'error'") > text.index("'react/prop-types': 'off'")


class TestJest:
    def test_module_name_mapper(self, gen):
        text = _tree(gen).content("jest.config.js")
        assert "moduleNameMapper" in text
        assert "moduleNameMapping" not in text
        assert _tree(gen).content("jest.setup.js").strip() == "import '@testing-library/jest-dom';"
