"""package.json patching.

Reads the manifest created by the package-manager initializer, merges in the
fields fixed by the active profile, and writes it back in place.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rainsrc.utils import dump_json, load_json, write_text

from .errors import ManifestError
from .profiles import Profile
from .templates import TemplateRenderer

MANIFEST_FILENAME = "package.json"


def build_overrides(
    profile: Profile,
    main_file_name: str,
    renderer: TemplateRenderer | None = None,
) -> dict[str, Any]:
    """Return the top-level fields that replace those in package.json.

    Script commands are rendered with ``main_file_name``; everything else is
    a constant of the profile.
    """
    renderer = renderer or TemplateRenderer()
    context = {"main_file_name": main_file_name}

    overrides: dict[str, Any] = {
        "type": profile.module_type,
        "main": profile.main_entry,
        "scripts": {
            name: renderer.render_string(command, context)
            for name, command in profile.scripts.items()
        },
    }
    if profile.dependencies is not None:
        overrides["dependencies"] = dict(profile.dependencies)
    if profile.dev_dependencies is not None:
        overrides["devDependencies"] = dict(profile.dev_dependencies)
    return overrides


def merge_manifest(
    document: dict[str, Any], overrides: dict[str, Any]
) -> dict[str, Any]:
    """Shallow-merge *overrides* onto *document*.

    Override keys replace same-named keys wholesale; nested objects such as
    ``scripts`` are not merged.  Neither argument is mutated.
    """
    return {**document, **overrides}


def serialize_manifest(document: dict[str, Any], pretty: bool = False) -> str:
    """Serialise the manifest, compact or pretty-printed."""
    return dump_json(document, pretty=pretty)


class ManifestUpdater:
    """Rewrites a project's package.json for a given profile."""

    def __init__(
        self, profile: Profile, renderer: TemplateRenderer | None = None
    ) -> None:
        self.profile = profile
        self.renderer = renderer or TemplateRenderer()

    async def update(self, project_root: Path, main_file_name: str) -> dict[str, Any]:
        """Merge the profile's fields into ``<project_root>/package.json``.

        Returns:
            The merged document as written.

        Raises:
            ManifestError: If the manifest cannot be read, parsed or written.
        """
        path = Path(project_root) / MANIFEST_FILENAME
        document = await self._read(path)

        overrides = build_overrides(self.profile, main_file_name, self.renderer)
        merged = merge_manifest(document, overrides)
        content = serialize_manifest(merged, pretty=self.profile.pretty_manifest)

        try:
            await write_text(path, content)
        except OSError as exc:
            raise ManifestError(path, f"cannot be written ({exc})") from exc
        return merged

    async def _read(self, path: Path) -> dict[str, Any]:
        try:
            document = await asyncio.to_thread(load_json, path)
        except FileNotFoundError as exc:
            raise ManifestError(path, "not found") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ManifestError(path, f"invalid JSON ({exc})") from exc
        except OSError as exc:
            raise ManifestError(path, f"cannot be read ({exc})") from exc

        if not isinstance(document, dict):
            raise ManifestError(path, "top level is not a JSON object")
        return document
