"""create-shell-extension CLI entry point.

Scaffolds a GNOME Shell extension project. Options missing from the command
line are asked for interactively.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from shellext import __version__
from shellext.cli.output import render_error, render_success
from shellext.models.config import SettingsError, load_settings
from shellext.options.definitions import OPTIONS, OptionKind
from shellext.options.resolver import resolve
from shellext.options.tokens import tokenize
from shellext.prompts import ConsolePrompter, PromptCancelledError
from shellext.scaffold.materializer import TargetExistsError, materialize

err_console = Console(stderr=True)


def _options_epilog() -> str:
    """List the extension options for --help."""
    flags = []
    for spec in OPTIONS:
        if spec.kind is OptionKind.BOOLEAN:
            flags.append(f"--{spec.name} / --{spec.negated_name}")
        else:
            flags.append(f"--{spec.name}=VALUE")
    return "Extension options:\n\n" + "\n\n".join(flags)


app = typer.Typer(
    name="create-shell-extension",
    help="Create a GNOME Shell extension project",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"create-shell-extension {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    epilog=_options_epilog(),
)
def create(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Settings file with option defaults (YAML)",
        exists=True,
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a new GNOME Shell extension project.

    Pass the target directory as the first argument. Every option that is
    not given on the command line is asked for interactively.
    """
    try:
        settings = load_settings(config)
    except SettingsError as exc:
        render_error("Invalid settings file", str(exc), err_console)
        raise typer.Exit(code=1)

    try:
        project = resolve(tokenize(ctx.args), ConsolePrompter(), settings)
    except PromptCancelledError as exc:
        render_error("Aborted", str(exc), err_console)
        raise typer.Exit(code=1)

    try:
        asyncio.run(materialize(project))
    except TargetExistsError as exc:
        render_error("Error", str(exc), err_console)
        raise typer.Exit(code=1)
    except OSError as exc:
        render_error("Could not create project", str(exc), err_console)
        raise typer.Exit(code=1)

    render_success(project, Console())
