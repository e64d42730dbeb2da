"""Task repository lifecycle: create, force-reset, or strip a ``task<N>`` directory."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gitdrills import ui
from gitdrills.constants import DEFAULT_PRESERVE_FILES, GIT_DIR_NAME, PRIMARY_BRANCH
from gitdrills.git.repo import GitRepo
from gitdrills.utils.paths import get_task_path, task_dir_name
from gitdrills.utils.workshop_config import DEFAULT_GIT_USER, GitUserConfig


class RepositoryAlreadyExists(RuntimeError):
    """Raised when a task repository exists and --force was not given."""

    def __init__(self, task_number: int, repo_path: Path, force_command: str | None = None):
        dir_name = task_dir_name(task_number)
        if force_command is None:
            force_command = f"gitdrills setup {task_number} --force"
        super().__init__(
            f"Task repository already exists: {dir_name}/\n\n"
            "To reset and recreate this task repository, rerun with --force:\n"
            f"  {force_command}\n\n"
            f"⚠️  WARNING: this DELETES all git history and every non-preserved file in {dir_name}/"
        )
        self.task_number = task_number
        self.repo_path = repo_path
        self.force_command = force_command


@dataclass(frozen=True)
class TaskRepoResult:
    """A freshly initialized task repository."""

    repo: GitRepo
    repo_path: Path
    task_number: int


@dataclass(frozen=True)
class CleanResult:
    """Outcome of clean-only mode. Nothing further should run for this task."""

    task_number: int
    repo_path: Path
    existed: bool
    removed: tuple[str, ...] = ()
    preserved: tuple[str, ...] = ()


def _remove_path(path: Path) -> None:
    """Remove a file, symlink or directory tree; absence is not an error."""
    if path.is_symlink() or path.is_file():
        path.unlink(missing_ok=True)
    elif path.is_dir():
        shutil.rmtree(path)


def remove_git_metadata(repo_path: Path) -> bool:
    """Delete ``.git`` under repo_path. Returns True when something was removed."""
    git_dir = repo_path / GIT_DIR_NAME
    existed = git_dir.exists() or git_dir.is_symlink()
    _remove_path(git_dir)
    return existed


def strip_directory(repo_path: Path, preserve_files: Sequence[str]) -> tuple[list[str], list[str]]:
    """Remove every direct child of repo_path whose name is not preserved.

    Matching is by top-level entry name only. Returns (removed, preserved),
    both sorted by name.
    """
    keep = set(preserve_files)
    removed: list[str] = []
    preserved: list[str] = []
    for entry in sorted(repo_path.iterdir(), key=lambda p: p.name):
        if entry.name in keep:
            preserved.append(entry.name)
            continue
        _remove_path(entry)
        removed.append(entry.name)
    return removed, preserved


def clean_task_repo(
    task_number: int,
    *,
    preserve_files: Sequence[str] = DEFAULT_PRESERVE_FILES,
    root: Path | None = None,
) -> CleanResult:
    """Strip a task directory back to its preserved files and drop its history."""
    repo_path = get_task_path(task_number, root)
    dir_name = task_dir_name(task_number)

    if not repo_path.exists():
        ui.success(f"{dir_name}/ does not exist, nothing to clean")
        return CleanResult(task_number=task_number, repo_path=repo_path, existed=False)

    ui.info(f"🧹 Cleaning {dir_name}/...")
    remove_git_metadata(repo_path)
    removed, preserved = strip_directory(repo_path, preserve_files)

    ui.success(f"Removed {len(removed)} item(s) from {dir_name}/")
    if preserved:
        ui.success(f"Preserved: {', '.join(preserved)}")
    return CleanResult(
        task_number=task_number,
        repo_path=repo_path,
        existed=True,
        removed=tuple(removed),
        preserved=tuple(preserved),
    )


def initialize_task_repo(
    task_number: int,
    *,
    force: bool = False,
    preserve_files: Sequence[str] = DEFAULT_PRESERVE_FILES,
    clean_only: bool = False,
    root: Path | None = None,
    git_user: GitUserConfig = DEFAULT_GIT_USER,
    force_command: str | None = None,
) -> TaskRepoResult | CleanResult:
    """Ensure ``task<N>`` holds a fresh repository, or clean it.

    Args:
        task_number: Positive task number; the directory is ``<root>/task<N>``
        force: Reset an existing repository instead of refusing
        preserve_files: Top-level names that survive reset and clean
        clean_only: Strip the directory and return a CleanResult without
            initializing anything
        root: Directory holding task directories (defaults to cwd)
        git_user: Identity written to repository-local config
        force_command: Command line the refusal message suggests for a
            forced rerun (defaults to ``gitdrills setup <N> --force``)

    Returns:
        TaskRepoResult for a new repository, CleanResult in clean-only mode

    Raises:
        RepositoryAlreadyExists: If ``.git`` exists and force is False
        OSError: Filesystem failures, unmodified
        ExecError: git failures, unmodified
    """
    if clean_only:
        return clean_task_repo(task_number, preserve_files=preserve_files, root=root)

    repo_path = get_task_path(task_number, root)
    dir_name = task_dir_name(task_number)

    if (repo_path / GIT_DIR_NAME).exists():
        if not force:
            raise RepositoryAlreadyExists(task_number, repo_path, force_command)

        ui.info(f"🗑️  Resetting existing {dir_name}/...")
        remove_git_metadata(repo_path)
        if repo_path.exists():
            _, preserved = strip_directory(repo_path, preserve_files)
            if preserved:
                ui.success(f"Preserved: {', '.join(preserved)}")

    if not repo_path.exists():
        ui.info(f"📁 Creating {dir_name}/...")
        repo_path.mkdir(parents=True, exist_ok=True)

    ui.info("🎯 Initializing git repository...")
    repo = GitRepo(root=repo_path)
    repo.init(PRIMARY_BRANCH)
    repo.set_config("user.name", git_user.name)
    repo.set_config("user.email", git_user.email)

    ui.success(f"Task repository initialized: {dir_name}/")
    ui.info(f"   User: {git_user.name} <{git_user.email}>")

    return TaskRepoResult(repo=repo, repo_path=repo_path, task_number=task_number)
