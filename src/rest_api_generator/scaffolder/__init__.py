"""Project scaffolder -- renders and writes the REST API skeleton.

Quick usage::

    from rest_api_generator.config import ProjectConfig
    from rest_api_generator.scaffolder import ProjectGenerator

    config = ProjectConfig(name="blog", include_auth=True)
    project_path = ProjectGenerator(config).generate("/tmp/output")
"""

from rest_api_generator.scaffolder.generator import (
    ProjectGenerator,
    TemplateKind,
    render,
    render_template_set,
)
from rest_api_generator.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "TemplateKind",
    "TemplateRenderer",
    "render",
    "render_template_set",
]
