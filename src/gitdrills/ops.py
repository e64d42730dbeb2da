"""Git operations bound to one task repository.

Task scripts build their fixture history by calling these in order::

    result = initialize_task_repo(3, force=flags.force)
    ops = bind(result.repo, result.repo_path)
    ops.write_file("_sample/README.md", "# Task Manager\\n")
    ops.add_all()
    ops.commit("Initial commit")

Every call runs git to completion before returning. Nothing here is safe to
call concurrently against the same repository.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from gitdrills import ui
from gitdrills.constants import RERERE_CACHE_DIR_NAME
from gitdrills.git.exec import ExecError
from gitdrills.git.repo import GitRepo
from gitdrills.git.status import LOG_FORMAT, LogResult, RepoStatus, parse_log_output, parse_status_output


class ResetMode(str, Enum):
    """Accepted ``git reset`` modes."""

    SOFT = "soft"
    MIXED = "mixed"
    HARD = "hard"


class GitOps:
    """Repository operations bound to a single (handle, path) pair."""

    def __init__(self, repo: GitRepo, repo_path: Path):
        self.repo = repo
        self.repo_path = repo_path.resolve()

    def _path(self, relative_path: str) -> Path:
        return self.repo_path / relative_path

    # Branches

    def create_branch(self, name: str) -> None:
        self.repo.run(["checkout", "-b", name])
        ui.success(f"Created and checked out branch: {name}")

    def switch_branch(self, name: str) -> None:
        self.repo.run(["checkout", name])
        ui.success(f"Switched to branch: {name}")

    def delete_branch(self, name: str, force: bool = False) -> None:
        self.repo.run(["branch", "-D" if force else "-d", name])
        ui.success(f"Deleted branch: {name}")

    def get_current_branch(self) -> str:
        """Return the checked-out branch, or ``HEAD`` when detached."""
        result = self.repo.run(["symbolic-ref", "--quiet", "--short", "HEAD"], check=False)
        branch = result.stdout.strip()
        if result.returncode != 0 or not branch:
            return "HEAD"
        return branch

    def list_branches(self) -> list[str]:
        output = self.repo.run(["branch", "--list", "--format=%(refname:short)"]).stdout
        return [line.strip() for line in output.splitlines() if line.strip()]

    # Files

    def write_file(self, relative_path: str, content: str) -> None:
        target = self._path(relative_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        ui.success(f"Created/updated file: {relative_path}")

    def read_file(self, relative_path: str) -> str:
        return self._path(relative_path).read_text(encoding="utf-8")

    def delete_file(self, relative_path: str) -> None:
        self._path(relative_path).unlink()
        ui.success(f"Deleted file: {relative_path}")

    def file_exists(self, relative_path: str) -> bool:
        """True when the path exists. Only not-found maps to False."""
        try:
            os.stat(self._path(relative_path))
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True

    # Staging

    def add_files(self, files: Sequence[str]) -> None:
        if isinstance(files, str):
            files = [files]
        self.repo.run(["add", "--", *files])
        ui.success(f"Staged files: {', '.join(files)}")

    def add_all(self) -> None:
        self.repo.run(["add", "--all"])
        ui.success("Staged all changes")

    # Commits

    def commit(self, message: str) -> None:
        self.repo.run(["commit", "-m", message])
        ui.success(f"Committed: {message}")

    def amend_commit(self, message: str | None = None) -> None:
        """Amend HEAD, replacing its message only when one is given."""
        if message:
            self.repo.run(["commit", "--amend", "-m", message])
            ui.success(f"Amended commit with new message: {message}")
        else:
            self.repo.run(["commit", "--amend", "--no-edit"])
            ui.success("Amended commit (kept message)")

    # Rebase

    def rebase(self, onto: str) -> None:
        """Rebase the current branch onto ``onto``; conflicts are re-raised."""
        try:
            self.repo.run(["rebase", onto])
        except ExecError as exc:
            if exc.is_conflict:
                ui.warn("Rebase conflict detected (this may be expected)")
            else:
                ui.warn(f"Rebase onto {onto} failed")
            raise
        ui.success(f"Successfully rebased onto {onto}")

    def rebase_continue(self) -> None:
        self.repo.run(["rebase", "--continue"])
        ui.success("Rebase continued")

    def rebase_abort(self) -> None:
        self.repo.run(["rebase", "--abort"])
        ui.success("Rebase aborted")

    # Merge

    def merge(self, branch: str) -> None:
        """Merge ``branch`` into the current branch; conflicts are re-raised."""
        try:
            self.repo.run(["merge", "--no-edit", branch])
        except ExecError as exc:
            if exc.is_conflict:
                ui.warn("Merge conflict detected (this may be expected)")
            else:
                ui.warn(f"Merge of {branch} failed")
            raise
        ui.success(f"Successfully merged {branch}")

    def merge_abort(self) -> None:
        self.repo.run(["merge", "--abort"])
        ui.success("Merge aborted")

    # Rerere

    def enable_rerere(self) -> None:
        self.repo.set_config("rerere.enabled", "true")
        ui.success("Enabled git rerere")

    def disable_rerere(self) -> None:
        self.repo.set_config("rerere.enabled", "false")
        ui.success("Disabled git rerere")

    def is_rerere_enabled(self) -> bool:
        """Read failures count as disabled."""
        try:
            value = self.repo.get_config("rerere.enabled")
        except (ExecError, OSError):
            return False
        return value == "true"

    def clear_rerere_cache(self) -> None:
        cache_dir = self.repo.git_dir / RERERE_CACHE_DIR_NAME
        if not cache_dir.exists():
            ui.success("No rerere cache to clear")
            return
        shutil.rmtree(cache_dir)
        ui.success("Cleared rerere cache")

    # Inspection

    def get_status(self) -> RepoStatus:
        output = self.repo.run(["status", "--porcelain=v1", "-z", "--untracked-files=all"]).stdout
        return parse_status_output(output, current=self.get_current_branch())

    def get_log(self, max_count: int = 10) -> LogResult:
        """Most recent commits first; empty on a branch with no commits."""
        if max_count < 1:
            raise ValueError(f"max_count must be at least 1, got {max_count}")
        if not self.repo.has_head():
            return LogResult()
        output = self.repo.run(["log", f"--max-count={max_count}", f"--format={LOG_FORMAT}"]).stdout
        return parse_log_output(output)

    def has_conflicts(self) -> bool:
        return bool(self.get_conflicted_files())

    def get_conflicted_files(self) -> list[str]:
        return self.get_status().conflicted

    # Reset

    def reset(self, mode: ResetMode | str = ResetMode.HARD, ref: str = "HEAD") -> None:
        """Move the current branch to ``ref``. Defaults to a hard reset."""
        try:
            resolved_mode = ResetMode(mode)
        except ValueError as exc:
            allowed = ", ".join(m.value for m in ResetMode)
            raise ValueError(f"unsupported reset mode {mode!r}; expected one of: {allowed}") from exc
        self.repo.run(["reset", f"--{resolved_mode.value}", ref])
        ui.success(f"Reset ({resolved_mode.value}) to {ref}")


def bind(repo: GitRepo, repo_path: Path) -> GitOps:
    """Bind git operations to one repository."""
    return GitOps(repo, repo_path)


create_git_ops = bind
