"""Shared setup flow for every task: lifecycle, builder, summary."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Sequence
from pathlib import Path

from gitdrills import ui
from gitdrills.constants import INSTRUCTIONS_FILE_NAME
from gitdrills.lifecycle import CleanResult, TaskRepoResult, clean_task_repo, initialize_task_repo
from gitdrills.ops import GitOps, bind
from gitdrills.tasks.registry import TaskDefinition, get_task
from gitdrills.utils.flags import parse_task_flags
from gitdrills.utils.paths import task_dir_name
from gitdrills.utils.workshop_config import WorkshopConfig, load_workshop_config


def print_summary(ops: GitOps, log_count: int = 10) -> None:
    """Print location, current branch, branches and recent log."""
    ui.info("\n📊 Repository Setup Complete!\n")
    ui.info(f"Repository location: {ops.repo_path}")
    ui.info(f"Current branch: {ops.get_current_branch()}")
    ui.info("\nBranches:")
    for branch in ops.list_branches():
        ui.info(f"  - {branch}")
    ui.info("\n📝 Git Log:")
    for entry in ops.get_log(log_count).all:
        ui.info(f"  {entry.short_hash} - {entry.message}")


def run_task(
    definition: TaskDefinition,
    *,
    force: bool = False,
    clean: bool = False,
    config: WorkshopConfig | None = None,
    force_command: str | None = None,
) -> TaskRepoResult | CleanResult:
    """Set up (or clean) one task repository and run its builder.

    ``force_command`` is the command line suggested when an existing
    repository blocks setup; it should rerun exactly what the caller ran.
    """
    resolved = config or load_workshop_config()
    if not clean:
        ui.info(f"🚀 Setting up Task {definition.number}: {definition.title}\n")

    result = initialize_task_repo(
        definition.number,
        force=force,
        preserve_files=resolved.preserve_files,
        clean_only=clean,
        root=resolved.task_root,
        git_user=resolved.git_user,
        force_command=force_command,
    )
    if isinstance(result, CleanResult):
        return result

    ops = bind(result.repo, result.repo_path)
    definition.build(ops)
    print_summary(ops)

    dir_name = task_dir_name(definition.number)
    ui.info(f"\n✅ Task {definition.number} setup complete!\n")
    ui.info("📖 Next steps:")
    ui.info(f"   cd {dir_name}")
    ui.info(f"   cat {INSTRUCTIONS_FILE_NAME}\n")
    return result


def script_force_command(argv: Sequence[str] | None = None) -> str:
    """Shell command that reruns the current task script with ``--force`` added."""
    args = list(sys.argv[1:] if argv is None else argv)
    return shlex.join([sys.executable, sys.argv[0], *args, "--force"])


def run_task_script(
    task_number: int,
    argv: Sequence[str] | None = None,
    *,
    root: Path | None = None,
) -> int:
    """Entry point for standalone task scripts; returns the process exit code.

    Scans argv for ``--force``/``--clean`` and converts any failure into a
    printed error and exit code 1::

        if __name__ == "__main__":
            raise SystemExit(run_task_script(3))
    """
    flags = parse_task_flags(argv)
    try:
        config = load_workshop_config(root)
        if flags.clean:
            clean_task_repo(task_number, preserve_files=config.preserve_files, root=config.task_root)
            return 0
        definition = get_task(task_number)
        run_task(
            definition,
            force=flags.force,
            config=config,
            force_command=script_force_command(argv),
        )
    except Exception as exc:
        ui.error(str(exc))
        return 1
    return 0
