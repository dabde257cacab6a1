"""create-stack-app scaffolder -- turns a ``ProjectConfig`` into a project tree.

Quick usage::

    from create_stack_app.config import ProjectConfig
    from create_stack_app.scaffolder import ProjectGenerator

    config = ProjectConfig(project_name="my-app", backend="mongodb")
    generator = ProjectGenerator(config)
    project_path = await generator.generate("/tmp/output")
"""

from create_stack_app.scaffolder.generator import ProjectGenerator, directory_skeleton
from create_stack_app.scaffolder.templates import TemplateRenderer
from create_stack_app.scaffolder.tree import FileTree

__all__ = [
    "FileTree",
    "ProjectGenerator",
    "TemplateRenderer",
    "directory_skeleton",
]
