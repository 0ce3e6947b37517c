"""Exceptions raised while scaffolding a project.

Every error derives from ``ScaffoldError`` so the CLI can report any failure
from a single handler.  Nothing here performs cleanup: a failed run leaves the
partially generated directory in place for manual inspection.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class DirectoryExistsError(ScaffoldError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory already exists: {path}")


class DirectoryCreationError(ScaffoldError):
    """Raised when the target project directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not create directory {path}: {reason}")


class PackageManagerError(ScaffoldError):
    """Raised when the package-manager initializer fails or is not installed."""

    def __init__(self, command: str, message: str, exit_code: int | None = None) -> None:
        self.command = command
        self.exit_code = exit_code
        super().__init__(f"`{command}` failed: {message}")


class FileWriteError(ScaffoldError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write {path}: {reason}")


class ManifestError(ScaffoldError):
    """Raised when package.json is missing, unparsable, or cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Manifest {path}: {reason}")


class UnknownProfileError(ScaffoldError):
    """Raised when a profile name is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown profile '{name}' (available: {', '.join(available)})"
        )
