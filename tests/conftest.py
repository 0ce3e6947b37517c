"""Shared pytest fixtures for the rainsrc test suite.

Provides reusable fixtures for:
- Scaffold requests for each package manager
- A fake package-manager initializer that writes package.json
- Mock subprocess helpers
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from rainsrc.scaffolder.models import PackageManager, ScaffoldRequest


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def scaffold_request() -> ScaffoldRequest:
    """A valid request using npm and the default main file name."""
    return ScaffoldRequest(
        project_name="demo-app",
        package_manager=PackageManager.NPM,
        main_file_name="main",
    )


# ---------------------------------------------------------------------------
# Package manager init
# ---------------------------------------------------------------------------

def initial_manifest(name: str) -> dict[str, Any]:
    """The package.json an ``npm init -y`` would produce."""
    return {
        "name": name,
        "version": "1.0.0",
        "description": "",
        "main": "index.js",
        "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
        "keywords": [],
        "author": "",
        "license": "ISC",
    }


@pytest.fixture
def fake_init():
    """Patch ``run_command`` in the package-manager module with a fake initializer.

    The fake writes a realistic package.json into the child's cwd and exits 0.
    The yielded mock records every call.
    """
    async def _init(cmd: list[str], cwd: Path | None = None, **kwargs: Any):
        root = Path(cwd)
        (root / "package.json").write_text(
            json.dumps(initial_manifest(root.name), indent=2), encoding="utf-8"
        )
        return (0, "Wrote to package.json", "")

    mock = AsyncMock(side_effect=_init)
    with patch("rainsrc.scaffolder.package_manager.run_command", mock):
        yield mock


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Factory for mock asyncio subprocesses.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
