"""Interactive collection of the scaffold request."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Prompt

from rainsrc.config import PromptDefaults
from rainsrc.scaffolder.models import PackageManager, ScaffoldRequest
from rainsrc.utils import console as default_console


def _ask_non_empty(message: str, default: str, console: Console) -> str:
    """Ask until the answer is non-blank."""
    while True:
        answer = Prompt.ask(message, default=default, console=console).strip()
        if answer:
            return answer
        console.print("[bold yellow]A value is required.[/bold yellow]")


def collect_request(
    defaults: PromptDefaults | None = None,
    console: Console | None = None,
) -> ScaffoldRequest:
    """Prompt for project name, package manager and main file name."""
    defaults = defaults or PromptDefaults()
    console = console or default_console

    project_name = _ask_non_empty("Name of the project:", defaults.project_name, console)
    package_manager = Prompt.ask(
        "Which package manager do you use:",
        choices=[pm.value for pm in PackageManager],
        default=defaults.package_manager.value,
        console=console,
    )
    main_file_name = _ask_non_empty("Name of the main file:", defaults.main_file_name, console)

    return ScaffoldRequest(
        project_name=project_name,
        package_manager=PackageManager(package_manager),
        main_file_name=main_file_name,
    )
