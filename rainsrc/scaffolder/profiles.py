"""Scaffold profiles.

A profile fixes everything about a generated project that the user is not
asked for: compiler settings, package.json scripts and dependencies, extra
source files and how the manifest is formatted.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .errors import UnknownProfileError


class Profile(BaseModel):
    """A named combination of templates, scripts and dependency sets."""

    name: str = Field(..., description="Registry key, e.g. 'dotenv'")
    description: str = Field(default="")
    compiler_target: str = Field(..., description="tsconfig compilerOptions.target")
    compiler_module: str = Field(..., description="tsconfig compilerOptions.module")
    scripts: dict[str, str] = Field(
        default_factory=dict,
        description="Script name -> Jinja2 command template (may use main_file_name)",
    )
    dependencies: dict[str, str] | None = Field(default=None)
    dev_dependencies: dict[str, str] | None = Field(default=None)
    extra_templates: dict[str, str] = Field(
        default_factory=dict,
        description="Template name -> output path relative to the project root",
    )
    pretty_manifest: bool = Field(
        default=False, description="Pretty-print package.json instead of compact JSON"
    )
    module_type: str = Field(default="module")
    main_entry: str = Field(default="dist/index.js")


# ---------------------------------------------------------------------------
# Built-in profiles
# ---------------------------------------------------------------------------

DOTENV = Profile(
    name="dotenv",
    description="ES2017 project with a validated .env loader (src/env.ts)",
    compiler_target="ES2017",
    compiler_module="ESNext",
    scripts={
        "dev": "yarn build && yarn start",
        "start": "node ./dist/{{ main_file_name }}.js",
        "build": "tsc",
    },
    dependencies={
        "dotenv": "^16.3.1",
        "envalid": "^8.0.0",
    },
    dev_dependencies={
        "typescript": "^5.3.3",
        "prettier": "^3.2.3",
        "@types/node": "^20.11.5",
    },
    extra_templates={"env.ts.j2": "src/env.ts"},
)

BASIC = Profile(
    name="basic",
    description="ES2017 project without runtime dependencies",
    compiler_target="ES2017",
    compiler_module="ESNext",
    scripts={
        "dev": "tsc && node ./dist/{{ main_file_name }}.js",
        "start": "node ./dist/{{ main_file_name }}.js",
        "build": "tsc",
    },
)

LEGACY = Profile(
    name="legacy",
    description="ES5 project run through ts-node, pretty-printed package.json",
    compiler_target="es5",
    compiler_module="es6",
    scripts={
        "dev": "ts-node ./src/{{ main_file_name }}.ts",
        "start": "ts-node ./src/{{ main_file_name }}.ts",
        "format": "prettier --write .",
    },
    pretty_manifest=True,
)

PROFILES: dict[str, Profile] = {p.name: p for p in (DOTENV, BASIC, LEGACY)}

DEFAULT_PROFILE = DOTENV.name


def get_profile(name: str) -> Profile:
    """Look up a built-in profile by name.

    Raises:
        UnknownProfileError: If *name* is not registered.
    """
    try:
        return PROFILES[name]
    except KeyError:
        raise UnknownProfileError(name, sorted(PROFILES)) from None
