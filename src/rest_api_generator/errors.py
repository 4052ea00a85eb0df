"""Exceptions raised by the generator.

Only the CLI entry point catches these; everything below it propagates.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for all generator failures."""


class ConfigurationError(GeneratorError):
    """Raised when the command-line options cannot produce a valid config.

    Always raised before anything touches the filesystem.
    """


class ScaffoldError(GeneratorError):
    """Raised when creating a directory or writing a file fails.

    Entries created before the failure are left in place.
    """

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")
