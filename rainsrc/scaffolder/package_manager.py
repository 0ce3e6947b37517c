"""Package-manager initialisation.

Runs the ``init`` command of the selected package manager inside the new
project directory.  The command produces the baseline ``package.json`` that
the manifest updater later patches.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rainsrc.utils import run_command

from .errors import PackageManagerError
from .models import PackageManager

# Package manager -> argv of its non-interactive init command
INIT_COMMANDS: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["npm", "init", "-y"],
    PackageManager.YARN: ["yarn", "init", "-y"],
    PackageManager.PNPM: ["pnpm", "init"],
}


@dataclass
class InitResult:
    """Outcome of dispatching on the package manager.

    ``success`` is ``False`` only when the package manager is not one the
    scaffolder recognises; a recognised manager that fails raises
    :class:`PackageManagerError` instead.
    """

    success: bool
    package_manager: str
    command: str = ""
    stdout: str = ""
    stderr: str = ""
    reason: str = ""


def resolve_package_manager(value: Any) -> PackageManager | None:
    """Return the ``PackageManager`` for *value*, or ``None`` if unrecognised."""
    if isinstance(value, PackageManager):
        return value
    try:
        return PackageManager(value)
    except ValueError:
        return None


async def initialize_project(
    project_root: Path,
    package_manager: Any,
    timeout: int | None = None,
) -> InitResult:
    """Run the package manager's init command in *project_root*.

    Args:
        project_root: Freshly created project directory (the child's cwd).
        package_manager: A ``PackageManager`` or its string value.
        timeout: Seconds to wait for the command. ``None`` waits forever.

    Returns:
        An ``InitResult``.  Unrecognised package managers yield
        ``success=False`` without running anything.

    Raises:
        PackageManagerError: If the executable is missing or exits non-zero.
    """
    manager = resolve_package_manager(package_manager)
    if manager is None:
        return InitResult(
            success=False,
            package_manager=str(getattr(package_manager, "value", package_manager)),
            reason=f"Unrecognized package manager: {package_manager!r}",
        )

    argv = INIT_COMMANDS[manager]
    command = " ".join(argv)
    try:
        returncode, stdout, stderr = await run_command(
            argv, cwd=project_root, timeout=timeout
        )
    except FileNotFoundError as exc:
        raise PackageManagerError(
            command, f"{argv[0]} is not installed or not on PATH"
        ) from exc
    except PermissionError as exc:
        raise PackageManagerError(command, f"permission denied: {exc}") from exc

    if returncode != 0:
        raise PackageManagerError(
            command,
            stderr or stdout or f"exited with status {returncode}",
            exit_code=returncode,
        )

    return InitResult(
        success=True,
        package_manager=manager.value,
        command=command,
        stdout=stdout,
        stderr=stderr,
    )
