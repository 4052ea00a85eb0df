"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and generates an Express + Mongoose REST API
skeleton: manifest, env file, entry point, user model/controller/routes and,
when authentication is requested, a JWT middleware.

Rendering is pure (``render`` / ``render_template_set``); only
``ProjectGenerator.generate`` touches the filesystem.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from rest_api_generator.config import ProjectConfig
from rest_api_generator.errors import ScaffoldError

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Fixed project layout
# ---------------------------------------------------------------------------

# Created in this order under the project root.
PROJECT_DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/models",
    "src/controllers",
    "src/routes",
    "src/middleware",
    "src/utils",
)

# The single resource every generated project exposes.
RESOURCE = "user"
RESOURCE_PLURAL = "users"

BASE_DEPENDENCIES: dict[str, str] = {
    "express": "^4.17.1",
    "cors": "^2.8.5",
    "dotenv": "^16.0.0",
    "helmet": "^5.0.2",
    "morgan": "^1.10.0",
    "mongoose": "^6.2.4",
    "joi": "^17.6.0",
}

AUTH_DEPENDENCIES: dict[str, str] = {
    "jsonwebtoken": "^8.5.1",
    "bcryptjs": "^2.4.3",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^2.0.15",
    "jest": "^27.5.1",
}

AUTH_MIDDLEWARE_NAME = "authMiddleware"


class TemplateKind(str, Enum):
    """One member per generated file.

    ``template`` is the Jinja2 template path and ``output`` the path relative
    to the project root.  Declaration order is the write order.
    """

    MANIFEST = "manifest"
    ENVIRONMENT = "environment"
    ENTRY_POINT = "entry_point"
    USER_MODEL = "user_model"
    USER_CONTROLLER = "user_controller"
    USER_ROUTES = "user_routes"
    AUTH_MIDDLEWARE = "auth_middleware"

    @property
    def template(self) -> str:
        return _TEMPLATE_FILES[self][0]

    @property
    def output(self) -> str:
        return _TEMPLATE_FILES[self][1]

    @property
    def requires_auth(self) -> bool:
        return self is TemplateKind.AUTH_MIDDLEWARE


_TEMPLATE_FILES: dict[TemplateKind, tuple[str, str]] = {
    TemplateKind.MANIFEST: ("package.json.j2", "package.json"),
    TemplateKind.ENVIRONMENT: ("env.j2", ".env"),
    TemplateKind.ENTRY_POINT: ("src/index.js.j2", "src/index.js"),
    TemplateKind.USER_MODEL: ("src/models/user.js.j2", "src/models/user.js"),
    TemplateKind.USER_CONTROLLER: (
        "src/controllers/userController.js.j2",
        "src/controllers/userController.js",
    ),
    TemplateKind.USER_ROUTES: ("src/routes/users.js.j2", "src/routes/users.js"),
    TemplateKind.AUTH_MIDDLEWARE: ("src/middleware/auth.js.j2", "src/middleware/auth.js"),
}


# ---------------------------------------------------------------------------
# Pure rendering
# ---------------------------------------------------------------------------

def applicable_kinds(config: ProjectConfig) -> list[TemplateKind]:
    """Return the template kinds generated for *config*, in write order."""
    return [
        kind for kind in TemplateKind
        if config.include_auth or not kind.requires_auth
    ]


def render(
    kind: TemplateKind,
    config: ProjectConfig,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render one file's content for *config*.

    The result depends on nothing but *kind* and *config*.
    """
    return (renderer or TemplateRenderer()).render(kind.template, build_context(config))


def render_template_set(
    config: ProjectConfig,
    renderer: TemplateRenderer | None = None,
) -> dict[str, str]:
    """Render every applicable file.

    Returns:
        Mapping of POSIX path relative to the project root to file content,
        ordered as the files are written.
    """
    renderer = renderer or TemplateRenderer()
    context = build_context(config)
    return {
        kind.output: renderer.render(kind.template, context)
        for kind in applicable_kinds(config)
    }


# -- Context building --------------------------------------------------------

def build_context(config: ProjectConfig) -> dict[str, Any]:
    """Build the Jinja2 template context from the project config."""
    return {
        **config.template_context(),
        "resource": RESOURCE,
        "resource_plural": RESOURCE_PLURAL,
        "dependencies": _manifest_dependencies(config),
        "dev_dependencies": dict(DEV_DEPENDENCIES),
        "auth_guard": _auth_guard(config),
    }


def _manifest_dependencies(config: ProjectConfig) -> dict[str, str]:
    """Runtime dependencies for ``package.json``; auth packages go last."""
    dependencies = dict(BASE_DEPENDENCIES)
    if config.include_auth:
        dependencies.update(AUTH_DEPENDENCIES)
    return dependencies


def _auth_guard(config: ProjectConfig) -> list[str]:
    """Route handlers that run before a protected controller action."""
    return [AUTH_MIDDLEWARE_NAME] if config.include_auth else []


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes a rendered project to disk.

    The project root must not exist yet.  Directories and files are created
    one at a time in a fixed order; on the first failure a ``ScaffoldError``
    is raised and whatever was already created stays on disk.

    Attributes:
        config: The project configuration.
        renderer: Template renderer used for every file.
        written_files: Paths of the files written so far, in write order.
    """

    def __init__(
        self,
        config: ProjectConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.written_files: list[Path] = []

    # -- Public API --------------------------------------------------------

    def generate(self, output_dir: str | Path = ".") -> Path:
        """Generate the project structure.

        Args:
            output_dir: Parent directory.  A subdirectory named after the
                project is created inside it.

        Returns:
            Path to the generated project root.

        Raises:
            ScaffoldError: If any directory or file cannot be created.
        """
        # Everything is rendered before the first mkdir.
        files = render_template_set(self.config, self.renderer)

        project_root = Path(output_dir) / self.config.name
        self._mkdir(project_root)
        for directory in PROJECT_DIRECTORIES:
            self._mkdir(project_root / directory)

        for relative_path, content in files.items():
            self._write(project_root / relative_path, content)

        return project_root

    # -- Filesystem helpers ------------------------------------------------

    def _mkdir(self, path: Path) -> None:
        try:
            path.mkdir()
        except OSError as exc:
            raise ScaffoldError(path, _describe(exc)) from exc

    def _write(self, path: Path, content: str) -> None:
        try:
            # newline="" writes "\n" untranslated
            with path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as exc:
            raise ScaffoldError(path, _describe(exc)) from exc
        self.written_files.append(path)


def _describe(exc: OSError) -> str:
    """Human-readable detail for a filesystem error."""
    return exc.strerror or str(exc)
