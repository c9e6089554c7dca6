"""Rich output helpers for the create-shell-extension command."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from shellext.models.config import ProjectConfig


def render_success(config: ProjectConfig, console: Console) -> None:
    """Print the final message and, if needed, the npm install hint.

    Args:
        config: The configuration the project was created from.
        console: Rich Console for output.
    """
    target = escape(config.target_dir)
    console.print(f"[green]Project created at {target}[/green]", soft_wrap=True)

    if config.needs_install:
        console.print(
            f"Run [yellow]cd {target} && npm i[/yellow] to install the "
            "dependencies before you start coding.",
            soft_wrap=True,
        )


def render_error(title: str, detail: str, console: Console) -> None:
    """Print a red error headline with its detail."""
    console.print(f"[bold red]{escape(title)}:[/bold red] {escape(detail)}", soft_wrap=True)
