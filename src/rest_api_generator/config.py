"""Generator configuration.

A single immutable Pydantic v2 model resolved from the command-line flags and
passed explicitly into every rendering step.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Version string written into every generated ``package.json``.
PROJECT_VERSION = "1.0.0"


class DatabaseKind(str, Enum):
    """Database backends recognised on the command line."""

    MONGODB = "mongodb"
    POSTGRES = "postgres"


# Only these backends have templates.
SUPPORTED_DATABASES: frozenset[DatabaseKind] = frozenset({DatabaseKind.MONGODB})


class ProjectConfig(BaseModel):
    """Everything that determines the generated project.

    The name is used verbatim as the directory name, the npm package name and
    the MongoDB database name.  It is not sanitised, but names that cannot
    be a directory under the output directory are rejected.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name (directory, package and database name)")
    include_auth: bool = Field(default=False, description="Generate JWT authentication code")
    database: DatabaseKind = Field(default=DatabaseKind.MONGODB)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        if "\0" in value:
            raise ValueError("project name must not contain NUL characters")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("project name must be valid UTF-8") from None
        # The project must land inside the output directory.
        path = PurePath(value)
        if path.is_absolute() or path.anchor or ".." in path.parts:
            raise ValueError("project name must not point outside the output directory")
        return value

    @field_validator("database")
    @classmethod
    def _database_supported(cls, value: DatabaseKind) -> DatabaseKind:
        if value not in SUPPORTED_DATABASES:
            supported = ", ".join(sorted(d.value for d in SUPPORTED_DATABASES))
            raise ValueError(
                f"database '{value.value}' is not supported yet (supported: {supported})"
            )
        return value

    def template_context(self) -> dict[str, Any]:
        """Return the base Jinja2 context shared by every template."""
        return {
            "project_name": self.name,
            "include_auth": self.include_auth,
            "database": self.database.value,
            "version": PROJECT_VERSION,
        }
