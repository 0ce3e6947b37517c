"""rainsrc scaffolder -- generates TypeScript project directories.

Creates the project directory, initialises it with npm, yarn or pnpm, writes
the boilerplate files and patches package.json according to a profile.

Quick usage::

    from rainsrc.scaffolder import PackageManager, ProjectGenerator, ScaffoldRequest

    request = ScaffoldRequest(
        project_name="my-project",
        package_manager=PackageManager.PNPM,
        main_file_name="main",
    )
    result = await ProjectGenerator(request).generate()
"""

from rainsrc.scaffolder.errors import (
    DirectoryCreationError,
    DirectoryExistsError,
    FileWriteError,
    ManifestError,
    PackageManagerError,
    ScaffoldError,
    UnknownProfileError,
)
from rainsrc.scaffolder.generator import ProjectGenerator, ScaffoldResult
from rainsrc.scaffolder.manifest import ManifestUpdater
from rainsrc.scaffolder.models import PackageManager, ScaffoldRequest
from rainsrc.scaffolder.package_manager import InitResult, initialize_project
from rainsrc.scaffolder.profiles import PROFILES, Profile, get_profile
from rainsrc.scaffolder.templates import TemplateRenderer

__all__ = [
    # Orchestration
    "ProjectGenerator",
    "ScaffoldResult",
    "ScaffoldRequest",
    "PackageManager",
    # Package manager
    "InitResult",
    "initialize_project",
    # Manifest
    "ManifestUpdater",
    # Profiles
    "PROFILES",
    "Profile",
    "get_profile",
    # Templates
    "TemplateRenderer",
    # Errors
    "ScaffoldError",
    "DirectoryExistsError",
    "DirectoryCreationError",
    "PackageManagerError",
    "FileWriteError",
    "ManifestError",
    "UnknownProfileError",
]
