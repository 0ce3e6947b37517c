"""Main scaffolding orchestrator.

Takes a ``ScaffoldRequest`` and a ``Profile`` and generates a TypeScript
project directory: create the directory, run the package manager's init
command inside it, write the boilerplate files concurrently, then patch the
generated package.json.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rainsrc.utils import print_step, print_success, write_text

from .errors import DirectoryCreationError, DirectoryExistsError, FileWriteError
from .manifest import MANIFEST_FILENAME, ManifestUpdater
from .models import ScaffoldRequest
from .package_manager import initialize_project
from .profiles import DOTENV, Profile
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class ScaffoldResult:
    """Structured result of a scaffold run."""

    success: bool
    project_root: Path
    files_written: list[Path] = field(default_factory=list)
    manifest: dict[str, Any] | None = None
    reason: str = ""


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ScaffoldRequest``, generates under ``<cwd>/<project_name>/``:
    - ``.gitignore``, ``tsconfig.json`` and an empty ``.env``
    - ``src/<main_file_name>.ts`` plus any extra files of the profile
    - ``package.json`` from the package manager, patched with the profile's
      type, main entry, scripts and dependencies

    Nothing is rolled back on failure.
    """

    def __init__(
        self,
        request: ScaffoldRequest,
        profile: Profile | None = None,
        cwd: str | Path | None = None,
        init_timeout: int | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.request = request
        self.profile = profile or DOTENV
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.init_timeout = init_timeout
        self.renderer = renderer or TemplateRenderer()
        self.manifest_updater = ManifestUpdater(self.profile, self.renderer)

    @property
    def project_root(self) -> Path:
        return self.cwd / self.request.project_name

    # -- Public API --------------------------------------------------------

    async def generate(self) -> ScaffoldResult:
        """Generate the project.

        Returns:
            A ``ScaffoldResult``.  ``success`` is ``False`` only when the
            package manager is unrecognised, in which case nothing but the
            empty project directory exists.

        Raises:
            ScaffoldError: Any failure to create the directory, run the
                initializer, write a file or update the manifest.
        """
        root = self.project_root

        # 1. Project directory, must not already exist
        print_step(f"Creating project directory {root}")
        await self._create_project_dir(root)

        # 2. Package manager init (creates package.json)
        package_manager = getattr(
            self.request.package_manager, "value", self.request.package_manager
        )
        print_step(f"Initializing project with {package_manager}")
        init = await initialize_project(
            root, self.request.package_manager, timeout=self.init_timeout
        )
        if not init.success:
            return ScaffoldResult(success=False, project_root=root, reason=init.reason)

        # 3. Boilerplate files, written concurrently
        print_step("Creating files & folders")
        files = await self._write_files(root)

        # 4. package.json
        print_step(f"Updating {MANIFEST_FILENAME}")
        manifest = await self.manifest_updater.update(
            root, self.request.main_file_name
        )
        files.append(root / MANIFEST_FILENAME)

        print_success(f"{self.request.project_name} generated successfully")
        return ScaffoldResult(
            success=True,
            project_root=root,
            files_written=files,
            manifest=manifest,
        )

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the request and profile."""
        return {
            "main_file_name": self.request.main_file_name,
            "compiler_target": self.profile.compiler_target,
            "compiler_module": self.profile.compiler_module,
        }

    # -- Directory ---------------------------------------------------------

    async def _create_project_dir(self, root: Path) -> None:
        if root.parent != self.cwd or root.name in ("", ".", ".."):
            raise DirectoryCreationError(root, f"not a direct child of {self.cwd}")
        try:
            await asyncio.to_thread(root.mkdir)
        except FileExistsError as exc:
            raise DirectoryExistsError(root) from exc
        except OSError as exc:
            raise DirectoryCreationError(root, str(exc)) from exc

    # -- Files -------------------------------------------------------------

    async def _write_files(self, root: Path) -> list[Path]:
        """Write every boilerplate file; the first failure aborts the batch."""
        ctx = self._build_context()
        results = await asyncio.gather(
            self._render(root / ".gitignore", "gitignore.j2", ctx),
            self._render(root / "tsconfig.json", "tsconfig.json.j2", ctx),
            self._write(root / ".env", ""),
            self._write_sources(root, ctx),
        )

        written: list[Path] = []
        for result in results:
            if isinstance(result, list):
                written.extend(result)
            else:
                written.append(result)
        return written

    async def _write_sources(self, root: Path, ctx: dict[str, Any]) -> list[Path]:
        """Create ``src/`` and write the entry file and the profile's extras into it."""
        src = root / "src"
        try:
            await asyncio.to_thread(src.mkdir)
        except OSError as exc:
            raise FileWriteError(src, str(exc)) from exc

        tasks = [self._write(src / f"{self.request.main_file_name}.ts", "")]
        for template_name, rel_path in self.profile.extra_templates.items():
            tasks.append(self._render(root / rel_path, template_name, ctx))
        return list(await asyncio.gather(*tasks))

    async def _render(self, path: Path, template_name: str, ctx: dict[str, Any]) -> Path:
        try:
            return await self.renderer.render_to_file(template_name, path, ctx)
        except OSError as exc:
            raise FileWriteError(path, str(exc)) from exc

    async def _write(self, path: Path, content: str) -> Path:
        try:
            return await write_text(path, content)
        except OSError as exc:
            raise FileWriteError(path, str(exc)) from exc
