"""Command-line entry point for ``create-stack-app``."""

from __future__ import annotations

import argparse
import asyncio
import sys

from rich.markup import escape

from create_stack_app import __version__
from create_stack_app.config import InstallerSettings
from create_stack_app.installer import ProjectInstaller
from create_stack_app.prompts import Prompter
from create_stack_app.utils import console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-stack-app",
        description="CLI tool to generate full-stack web application templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-stack-app my-app\n"
            "  CSA_SKIP_INSTALL=1 create-stack-app my-app\n"
            "  python -m create_stack_app\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        metavar="project-name",
        help="Name of the project (prompted for when omitted)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.  Exits with status 1 on any failure."""
    args = build_parser().parse_args(argv)

    try:
        prompter = Prompter(console)
        project_name = args.project_name
        if not project_name:
            project_name = prompter.text("What is your project named?")

        installer = ProjectInstaller(InstallerSettings.from_env(), prompter)
        asyncio.run(installer.run(project_name))
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled.[/yellow]")
        sys.exit(1)
    except Exception as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
