"""Application source files under ``src/``.

Pages come in two variants: one built from the shadcn primitives and one
using plain Tailwind-styled elements.  Each page template is shared by the
TypeScript and JavaScript flavours; type annotations are passed in as
interpolated fragments that are empty for JavaScript.
"""

from __future__ import annotations

from typing import Any

from create_stack_app.config import ProjectConfig, UILibrary

from .templates import TemplateRenderer
from .tree import FileTree

SHADCN_COMPONENTS: tuple[str, ...] = ("button", "card", "input", "label", "textarea")

_STYLING_LABELS: dict[UILibrary, str] = {
    UILibrary.SHADCN: "Tailwind CSS",
    UILibrary.TAILWIND: "Tailwind CSS",
    UILibrary.MUI: "Material UI",
}

_PROVIDER_IMPORT = 'import { ThemeProvider } from "@/components/theme-provider"\n'

_THEMED_BODY = """\
        <ThemeProvider
          attribute="class"
          defaultTheme="system"
          enableSystem
          disableTransitionOnChange
        >
          {children}
        </ThemeProvider>"""

_PLAIN_BODY = "        {children}"


class SourceGenerator:
    """Adds layout, pages, components, helpers and styles."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, config: ProjectConfig, tree: FileTree) -> None:
        ext = config.source_ext
        shadcn = config.ui is UILibrary.SHADCN

        tree.add_file(f"src/app/layout.{ext}", self.layout(config))
        for route, template in (
            ("src/app", "home_page"),
            ("src/app/about", "about_page"),
            ("src/app/contact", "contact_page"),
        ):
            tree.add_file(f"{route}/page.{ext}", self.page(template, config))

        if shadcn:
            tree.add_file(
                f"src/components/theme-provider.{ext}",
                self.renderer.render(f"source/theme-provider.{ext}.j2"),
            )
            for component in SHADCN_COMPONENTS:
                tree.add_file(
                    f"src/components/ui/{component}.{ext}",
                    self.renderer.render(f"source/ui/{component}.{ext}.j2"),
                )

        tree.add_file(
            f"src/lib/utils.{config.script_ext}",
            self.renderer.render(f"source/utils.{config.script_ext}.j2"),
        )
        styles = "source/globals.shadcn.css.j2" if shadcn else "source/globals.css.j2"
        tree.add_file("src/app/globals.css", self.renderer.render(styles))

    # -- Individual files --------------------------------------------------

    def layout(self, config: ProjectConfig) -> str:
        shadcn = config.ui is UILibrary.SHADCN
        return self.renderer.render(
            f"source/layout.{config.source_ext}.j2",
            {
                "project_name": config.project_name,
                "provider_import": _PROVIDER_IMPORT if shadcn else "",
                "body": _THEMED_BODY if shadcn else _PLAIN_BODY,
            },
        )

    def page(self, name: str, config: ProjectConfig) -> str:
        variant = "shadcn" if config.ui is UILibrary.SHADCN else "plain"
        return self.renderer.render(f"source/{name}.{variant}.j2", self._page_context(config))

    @staticmethod
    def _page_context(config: ProjectConfig) -> dict[str, Any]:
        language = "TypeScript" if config.typescript else "JavaScript"
        styling = _STYLING_LABELS[config.ui]
        if config.typescript:
            submit_type = ": React.FormEvent<HTMLFormElement>"
            change_type = ": React.ChangeEvent<HTMLInputElement | HTMLTextAreaElement>"
        else:
            submit_type = change_type = ""
        return {
            "project_name": config.project_name,
            "tagline": f"A modern web application built with Next.js, {language}, and {styling}.",
            "stack_summary": f"Next.js 14, {language}, {styling}, and more.",
            "submit_event_type": submit_type,
            "change_event_type": change_type,
        }
