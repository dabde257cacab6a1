"""README generation.

The README template is a fixed skeleton; every section that depends on the
configuration is built here as a list of lines.  Optional lines are simply
not added, so the output never contains placeholder blank lines.
"""

from __future__ import annotations

from create_stack_app.config import Backend, Frontend, ProjectConfig, UILibrary

from .templates import TemplateRenderer
from .tree import FileTree

FENCE = "```"

FRONTEND_LABELS: dict[Frontend, str] = {
    Frontend.NEXTJS: "Next.js 14 with App Router",
    Frontend.REACT: "React.js with Vite",
}

UI_LABELS: dict[UILibrary, str] = {
    UILibrary.SHADCN: "ShadCN UI with Tailwind CSS",
    UILibrary.TAILWIND: "Tailwind CSS",
    UILibrary.MUI: "Material UI",
}

BACKEND_LABELS: dict[Backend, str] = {
    Backend.FIREBASE: "Firebase",
    Backend.MONGODB: "MongoDB with Mongoose",
    Backend.POSTGRES: "PostgreSQL with Sequelize",
    Backend.NONE: "None (Frontend only)",
}


def _flag(enabled: bool, detail: str = "") -> str:
    if not enabled:
        return "❌ No"
    return f"✅ Yes ({detail})" if detail else "✅ Yes"


def _code_block(language: str, *lines: str, indent: str = "") -> list[str]:
    return [f"{indent}{FENCE}{language}", *(f"{indent}{line}" for line in lines), f"{indent}{FENCE}"]


class DocsGenerator:
    """Builds ``README.md`` from per-section builders."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, config: ProjectConfig, tree: FileTree) -> None:
        tree.add_file("README.md", self.readme(config))

    def readme(self, config: ProjectConfig) -> str:
        sections = {
            "features": self.features(config),
            "getting_started": self.getting_started(config),
            "project_tree": self.project_tree(config),
            "scripts": self.scripts(config),
            "environment": self.environment(config),
            "customization": self.customization(config),
            "testing": self.testing(config),
            "docker": self.docker(config),
            "security": self.security(config),
            "technologies": self.technologies(config),
            "resources": self.resources(config),
        }
        context = {name: "\n".join(lines) for name, lines in sections.items()}
        context["project_name"] = config.project_name
        return self.renderer.render("docs/README.md.j2", context)

    # -- Sections ----------------------------------------------------------

    def features(self, config: ProjectConfig) -> list[str]:
        return [
            f"- **Frontend:** {FRONTEND_LABELS[config.frontend]}",
            f"- **UI Framework:** {UI_LABELS[config.ui]}",
            f"- **Backend:** {BACKEND_LABELS[config.backend]}",
            f"- **TypeScript:** {_flag(config.typescript)}",
            f"- **Authentication:** {_flag(config.auth)}",
            f"- **Animations:** {_flag(config.animations, 'Framer Motion & GSAP')}",
            f"- **3D Support:** {_flag(config.three_d, 'Three.js')}",
            f"- **Testing:** {_flag(config.testing, 'Jest & Testing Library')}",
            f"- **Docker:** {_flag(config.docker)}",
        ]

    def getting_started(self, config: ProjectConfig) -> list[str]:
        steps: list[tuple[str, list[str]]] = [
            ("Clone and navigate to the project:", _code_block("bash", f"cd {config.project_name}", indent="   ")),
            (
                "Install dependencies:",
                _code_block(
                    "bash", "npm install", "# or", "yarn install", "# or", "pnpm install", indent="   "
                ),
            ),
            (
                "Set up environment variables:",
                [
                    *_code_block("bash", "cp .env.example .env", indent="   "),
                    "",
                    "   Edit the `.env` file with your configuration values.",
                ],
            ),
        ]
        if config.has_backend:
            steps.append(
                ("Seed the database (optional):", _code_block("bash", "npm run seed-db", indent="   "))
            )
        steps.append(("Start the development server:", _code_block("bash", "npm run dev", indent="   ")))
        steps.append(
            (
                "Open your browser:",
                ["   Navigate to [http://localhost:3000](http://localhost:3000)"],
            )
        )

        lines: list[str] = []
        for number, (title, body) in enumerate(steps, start=1):
            if lines:
                lines.append("")
            lines.append(f"{number}. **{title}**")
            lines.extend(body)
        return lines

    def project_tree(self, config: ProjectConfig) -> list[str]:
        ext = config.source_ext
        lines = [
            f"{config.project_name}/",
            "├── src/",
            "│   ├── app/                 # Next.js app directory",
            "│   │   ├── about/           # About page",
            "│   │   ├── contact/         # Contact page",
        ]
        if config.has_backend:
            lines.append("│   │   ├── api/             # API routes")
        lines += [
            "│   │   ├── globals.css      # Global styles",
            f"│   │   ├── layout.{ext}       # Root layout",
            f"│   │   └── page.{ext}         # Home page",
            "│   ├── components/          # React components",
            "│   │   └── ui/              # UI components",
            "│   ├── lib/                 # Utility libraries",
            "│   ├── hooks/               # Custom React hooks",
        ]
        if config.has_backend:
            lines += [
                "│   ├── utils/               # Utility functions",
                "│   └── backend/             # Backend code",
                "│       ├── config/          # Database configuration",
                "│       ├── models/          # Data models",
                "│       └── utils/           # Backend utilities",
            ]
        else:
            lines.append("│   └── utils/               # Utility functions")
        lines.append("├── public/                  # Static assets")
        if config.testing:
            lines.append("├── __tests__/               # Test files")
        if config.has_backend:
            lines.append("├── scripts/                 # Database scripts")
        if config.docker:
            lines += [
                "├── Dockerfile               # Docker configuration",
                "├── docker-compose.yml       # Docker Compose",
            ]
        lines += [
            "├── .env.example             # Environment variables template",
            "├── package.json             # Dependencies and scripts",
            "└── README.md                # This file",
        ]
        return lines

    def scripts(self, config: ProjectConfig) -> list[str]:
        lines = [
            "- `npm run dev` - Start development server",
            "- `npm run build` - Build for production",
            "- `npm run start` - Start production server",
            "- `npm run lint` - Run ESLint",
        ]
        if config.typescript:
            lines.append("- `npm run type-check` - Run TypeScript type checking")
        if config.testing:
            lines += [
                "- `npm run test` - Run tests",
                "- `npm run test:watch` - Run tests in watch mode",
                "- `npm run test:coverage` - Run tests with coverage",
            ]
        if config.has_backend:
            lines.append("- `npm run seed-db` - Seed database with sample data")
        return lines

    def environment(self, config: ProjectConfig) -> list[str]:
        if not config.has_backend:
            return ["This project doesn't require environment variables for basic functionality."]

        env_lines = self.renderer.render("env/app.j2").splitlines()
        backend_template = f"env/{config.backend.value}.j2"
        env_lines += [""] + self.renderer.render(
            backend_template, {"project_name": config.project_name}
        ).splitlines()
        if config.auth:
            env_lines += [""] + self.renderer.render("env/auth.j2").splitlines()
        return [
            "Create a `.env` file in the root directory with the following variables:",
            "",
            *_code_block("env", *env_lines),
        ]

    def customization(self, config: ProjectConfig) -> list[str]:
        styling = {
            UILibrary.SHADCN: "- Components use ShadCN UI with Tailwind CSS",
            UILibrary.TAILWIND: "- Styling is done with Tailwind CSS",
            UILibrary.MUI: "- Styling uses Material UI components",
        }[config.ui]
        lines = ["### Styling", styling, "- Global styles are in `src/app/globals.css`"]
        if config.ui is not UILibrary.MUI:
            lines.append("- Tailwind configuration is in `tailwind.config.js`")
        lines += [
            "",
            "### Components",
            "- UI components are in `src/components/ui/`",
            "- Custom components go in `src/components/`",
            "- Follow the established patterns for consistency",
        ]
        if config.has_backend:
            database = {
                Backend.FIREBASE: f"- Firebase configuration is in `src/backend/config/firebase.{config.script_ext}`",
                Backend.MONGODB: "- MongoDB models are in `src/backend/models/`",
                Backend.POSTGRES: "- PostgreSQL models are in `src/backend/models/`",
            }[config.backend]
            lines += [
                "",
                "### Database",
                database,
                "- Database utilities are in `src/backend/utils/`",
                "- API routes are in `src/app/api/`",
            ]
        return lines

    def testing(self, config: ProjectConfig) -> list[str]:
        if not config.testing:
            return ["Testing is not configured. You can add Jest and React Testing Library if needed."]
        return [
            "This project includes a testing setup:",
            "",
            "- **Jest** for unit testing",
            "- **React Testing Library** for component testing",
            "- **Testing utilities** in `__tests__/`",
            "",
            "Run tests with:",
            *_code_block("bash", "npm run test"),
            "",
            "For watch mode:",
            *_code_block("bash", "npm run test:watch"),
            "",
            "For coverage:",
            *_code_block("bash", "npm run test:coverage"),
        ]

    def docker(self, config: ProjectConfig) -> list[str]:
        if not config.docker:
            return [
                "Docker configuration is not included. You can add Dockerfile and "
                "docker-compose.yml if needed."
            ]
        return [
            "Build and run with Docker:",
            *_code_block("bash", "docker-compose up -d"),
            "",
            "Stop containers:",
            *_code_block("bash", "docker-compose down"),
        ]

    def security(self, config: ProjectConfig) -> list[str]:
        lines = ["- Input validation with Zod", "- CORS configuration", "- Security headers"]
        if config.auth:
            lines += ["- JWT authentication", "- Password hashing with bcrypt"]
        lines.append("- Environment variable protection")
        return lines

    def technologies(self, config: ProjectConfig) -> list[str]:
        lines = [
            "- [Next.js](https://nextjs.org/) - React framework",
            "- [React](https://react.dev/) - UI library",
        ]
        lines.append(
            {
                UILibrary.SHADCN: "- [ShadCN UI](https://ui.shadcn.com/) - UI components",
                UILibrary.TAILWIND: "- [Tailwind CSS](https://tailwindcss.com/docs) - Utility-first CSS",
                UILibrary.MUI: "- [Material UI](https://mui.com/) - React components",
            }[config.ui]
        )
        if config.typescript:
            lines.append("- [TypeScript](https://www.typescriptlang.org/) - Type safety")
        if config.has_backend:
            lines.append(
                {
                    Backend.FIREBASE: "- [Firebase](https://firebase.google.com/) - Backend platform",
                    Backend.MONGODB: "- [MongoDB](https://www.mongodb.com/) - Database",
                    Backend.POSTGRES: "- [PostgreSQL](https://www.postgresql.org/) - Database",
                }[config.backend]
            )
        if config.animations:
            lines.append("- [Framer Motion](https://www.framer.com/motion/) - Animations")
        if config.three_d:
            lines.append("- [Three.js](https://threejs.org/) - 3D graphics")
        return lines

    def resources(self, config: ProjectConfig) -> list[str]:
        lines = [
            "- [Next.js Documentation](https://nextjs.org/docs)",
            "- [React Documentation](https://react.dev/learn)",
        ]
        if config.ui is not UILibrary.MUI:
            lines.append("- [Tailwind CSS Documentation](https://tailwindcss.com/docs)")
        return lines
