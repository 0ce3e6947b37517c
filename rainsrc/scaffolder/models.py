"""Pydantic v2 models for a scaffold run."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PackageManager(str, Enum):
    """Package managers the scaffolder knows how to initialise a project with."""
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class ScaffoldRequest(BaseModel):
    """The three answers that drive a scaffold run.

    Produced once from user input and immutable for the rest of the run.
    Both names must be a single path component so the project stays inside
    the working directory and the entry file inside ``src/``.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    project_name: str = Field(..., min_length=1, description="Directory name of the new project")
    package_manager: PackageManager = Field(..., description="Package manager used to initialise")
    main_file_name: str = Field(
        ..., min_length=1, description="Base name of the entry file inside src/"
    )

    @field_validator("project_name", "main_file_name")
    @classmethod
    def _single_path_component(cls, value: str) -> str:
        if value in (".", "..") or any(sep in value for sep in ("/", "\\")):
            raise ValueError("must be a plain name, not a path")
        return value
