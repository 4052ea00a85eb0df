"""Unit tests for ProjectConfig (rest_api_generator.config).

Tests cover:
- Defaults and required fields
- Name validation
- Database validation
- Immutability
- Template context
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rest_api_generator.config import (
    PROJECT_VERSION,
    SUPPORTED_DATABASES,
    DatabaseKind,
    ProjectConfig,
)


class TestDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = ProjectConfig(name="blog")
        assert config.name == "blog"
        assert config.include_auth is False
        assert config.database is DatabaseKind.MONGODB

    @pytest.mark.unit
    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            ProjectConfig()

    @pytest.mark.unit
    def test_database_from_string(self):
        config = ProjectConfig(name="blog", database="mongodb")
        assert config.database is DatabaseKind.MONGODB

    @pytest.mark.unit
    def test_only_mongodb_supported(self):
        assert SUPPORTED_DATABASES == frozenset({DatabaseKind.MONGODB})


class TestNameValidation:
    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="must not be empty"):
            ProjectConfig(name=name)

    @pytest.mark.unit
    def test_name_not_sanitised(self):
        config = ProjectConfig(name="My Project!")
        assert config.name == "My Project!"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["/tmp/blog", "..", "../blog", "nested/../../blog"])
    def test_name_outside_output_directory_rejected(self, name):
        with pytest.raises(ValidationError, match="outside the output directory"):
            ProjectConfig(name=name)

    @pytest.mark.unit
    def test_nul_in_name_rejected(self):
        with pytest.raises(ValidationError, match="NUL"):
            ProjectConfig(name="blog\0x")

    @pytest.mark.unit
    def test_undecodable_name_rejected(self):
        # How a non-UTF-8 argv byte reaches Python on POSIX.
        with pytest.raises(ValidationError, match="valid UTF-8"):
            ProjectConfig(name="blog\udcff")

    @pytest.mark.unit
    def test_non_ascii_name_allowed(self):
        assert ProjectConfig(name="café").name == "café"


class TestDatabaseValidation:
    @pytest.mark.unit
    def test_postgres_rejected(self):
        with pytest.raises(ValidationError, match="not supported yet"):
            ProjectConfig(name="blog", database="postgres")

    @pytest.mark.unit
    def test_unknown_database_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(name="blog", database="sqlite")


class TestImmutability:
    @pytest.mark.unit
    def test_assignment_rejected(self):
        config = ProjectConfig(name="blog")
        with pytest.raises(ValidationError):
            config.name = "other"
        assert config.name == "blog"

    @pytest.mark.unit
    def test_equal_configs_compare_equal(self):
        assert ProjectConfig(name="blog", include_auth=True) == ProjectConfig(
            name="blog", include_auth=True
        )


class TestTemplateContext:
    @pytest.mark.unit
    def test_context_keys(self):
        ctx = ProjectConfig(name="blog", include_auth=True).template_context()
        assert ctx == {
            "project_name": "blog",
            "include_auth": True,
            "database": "mongodb",
            "version": PROJECT_VERSION,
        }

    @pytest.mark.unit
    def test_version_is_fixed(self):
        assert PROJECT_VERSION == "1.0.0"
