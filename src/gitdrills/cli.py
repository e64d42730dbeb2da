"""gitdrills CLI - set up, reset and clean workshop task repositories."""

from __future__ import annotations

import importlib
import shlex
from pathlib import Path

import typer

from gitdrills import __version__, ui
from gitdrills.clean_all import clean_all
from gitdrills.lifecycle import CleanResult, clean_task_repo
from gitdrills.tasks import get_task, registered_tasks, run_task
from gitdrills.utils.paths import get_task_path, validate_task_number
from gitdrills.utils.workshop_config import load_workshop_config

cli = typer.Typer(
    name="gitdrills",
    help="Build deterministic practice repositories for git workshops.",
    no_args_is_help=True,
)

_FAILURES = (RuntimeError, LookupError, OSError, ValueError, ImportError)


def _version_option_callback(value: bool) -> None:
    """Handle eager --version option."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _import_task_modules(modules: list[str] | None) -> None:
    for module in modules or []:
        importlib.import_module(module)


def _setup_force_command(task_number: int, modules: list[str] | None, root: Path | None) -> str:
    argv = ["gitdrills", "setup", str(task_number)]
    for module in modules or []:
        argv.extend(["-m", module])
    if root is not None:
        argv.extend(["--root", str(root)])
    argv.append("--force")
    return shlex.join(argv)


def _task_number(value: int) -> int:
    try:
        return validate_task_number(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@cli.callback()
def _cli_callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show gitdrills version and exit.",
        is_eager=True,
        callback=_version_option_callback,
    ),
) -> None:
    """Build deterministic practice repositories for git workshops."""


TASKS_MODULE_OPTION = typer.Option(
    None,
    "--tasks-module",
    "-m",
    help="Import this module before running so its tasks register (repeatable).",
)
ROOT_OPTION = typer.Option(
    None,
    "--root",
    help="Directory holding the task<N> directories (defaults to current working directory).",
)


@cli.command(
    "setup",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def setup(
    task_number: int = typer.Argument(..., metavar="TASK_NUMBER", callback=_task_number),
    force: bool = typer.Option(
        False,
        "--force",
        help="Delete existing history and non-preserved files, then rebuild.",
    ),
    clean: bool = typer.Option(
        False,
        "--clean",
        help="Strip the task directory to its preserved files and stop.",
    ),
    tasks_module: list[str] | None = TASKS_MODULE_OPTION,
    root: Path | None = ROOT_OPTION,
) -> None:
    """Create the repository for one task and replay its history."""
    try:
        _import_task_modules(tasks_module)
        config = load_workshop_config(root)
        if clean:
            clean_task_repo(task_number, preserve_files=config.preserve_files, root=config.task_root)
            return
        definition = get_task(task_number)
        run_task(
            definition,
            force=force,
            config=config,
            force_command=_setup_force_command(task_number, tasks_module, root),
        )
    except _FAILURES as exc:
        ui.error(str(exc))
        raise typer.Exit(1) from exc


@cli.command("clean")
def clean(
    task_number: int = typer.Argument(..., metavar="TASK_NUMBER", callback=_task_number),
    root: Path | None = ROOT_OPTION,
) -> None:
    """Remove git history and every non-preserved file from one task."""
    try:
        config = load_workshop_config(root)
        result: CleanResult = clean_task_repo(
            task_number,
            preserve_files=config.preserve_files,
            root=config.task_root,
        )
    except _FAILURES as exc:
        ui.error(str(exc))
        raise typer.Exit(1) from exc

    typer.echo(f"task_path={result.repo_path}")
    typer.echo(f"existed={str(result.existed).lower()}")
    typer.echo(f"removed={len(result.removed)}")


@cli.command("clean-all")
def clean_all_cmd(
    root: Path | None = ROOT_OPTION,
) -> None:
    """Clean every task<N> directory under the workshop root."""
    try:
        config = load_workshop_config(root)
        report = clean_all(config.task_root, preserve_files=config.preserve_files)
    except _FAILURES as exc:
        ui.error(str(exc))
        raise typer.Exit(1) from exc

    if not report.ok:
        for name, reason in report.failed:
            ui.error(f"{name}: {reason}")
        raise typer.Exit(1)


@cli.command("list")
def list_cmd(
    tasks_module: list[str] | None = TASKS_MODULE_OPTION,
) -> None:
    """List registered tasks."""
    try:
        _import_task_modules(tasks_module)
        definitions = registered_tasks()
    except _FAILURES as exc:
        ui.error(str(exc))
        raise typer.Exit(1) from exc

    if not definitions:
        typer.echo("No tasks registered.")
        return
    for definition in definitions:
        typer.echo(f"{definition.number}\t{definition.title}")


@cli.command("path")
def path_cmd(
    task_number: int = typer.Argument(..., metavar="TASK_NUMBER", callback=_task_number),
    root: Path | None = ROOT_OPTION,
) -> None:
    """Print the absolute directory a task repository lives in."""
    typer.echo(str(get_task_path(task_number, root)))
