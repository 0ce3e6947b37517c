"""rainsrc configuration.

Typed configuration for a scaffold run.  Settings use Pydantic v2 models so
they are validated at construction time and can be built from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

from rainsrc.scaffolder.models import PackageManager
from rainsrc.scaffolder.profiles import DEFAULT_PROFILE


class PromptDefaults(BaseModel):
    """Answers pre-filled in the interactive prompts."""

    project_name: str = Field(default="rainsrc", min_length=1)
    main_file_name: str = Field(default="main", min_length=1)
    package_manager: PackageManager = Field(default=PackageManager.NPM)


class Config(BaseModel):
    """Global rainsrc configuration.

    Created once by the CLI entry point.  Only the CLI consults the
    environment; the scaffolder receives explicit values.
    """

    profile: str = Field(default=DEFAULT_PROFILE)
    defaults: PromptDefaults = Field(default_factory=PromptDefaults)
    init_timeout: int | None = Field(
        default=None,
        ge=1,
        description="Seconds to wait for the package-manager initializer (None waits forever)",
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RAINSRC_PROFILE, RAINSRC_PROJECT_NAME, RAINSRC_MAIN_FILE,
            RAINSRC_PACKAGE_MANAGER, RAINSRC_INIT_TIMEOUT.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        default_kwargs: dict[str, Any] = {}
        if os.environ.get("RAINSRC_PROJECT_NAME"):
            default_kwargs["project_name"] = os.environ["RAINSRC_PROJECT_NAME"]
        if os.environ.get("RAINSRC_MAIN_FILE"):
            default_kwargs["main_file_name"] = os.environ["RAINSRC_MAIN_FILE"]
        if os.environ.get("RAINSRC_PACKAGE_MANAGER"):
            default_kwargs["package_manager"] = os.environ["RAINSRC_PACKAGE_MANAGER"]

        return cls(
            profile=os.environ.get("RAINSRC_PROFILE", DEFAULT_PROFILE),
            defaults=PromptDefaults(**default_kwargs),
            init_timeout=os.environ.get("RAINSRC_INIT_TIMEOUT") or None,
        )
