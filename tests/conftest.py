"""Shared pytest fixtures for the generator test suite.

Provides reusable fixtures for:
- Project configurations with and without authentication
- A template renderer over the packaged templates
- A scratch working directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rest_api_generator.config import ProjectConfig
from rest_api_generator.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def basic_config() -> ProjectConfig:
    """A project without authentication."""
    return ProjectConfig(name="blog")


@pytest.fixture
def auth_config() -> ProjectConfig:
    """A project with authentication."""
    return ProjectConfig(name="blog", include_auth=True)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty directory that is also the current working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work
