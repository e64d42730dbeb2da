"""Repository handle: a git working tree addressed by its root path."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gitdrills.constants import GIT_DIR_NAME, PRIMARY_BRANCH
from gitdrills.git.exec import ExecResult, run_git


@dataclass(frozen=True)
class GitRepo:
    """Thin proxy that runs git rooted at ``root``. Holds no open resources."""

    root: Path

    @property
    def git_dir(self) -> Path:
        return self.root / GIT_DIR_NAME

    def run(
        self,
        args: list[str],
        *,
        check: bool = True,
        config: Mapping[str, str] | None = None,
    ) -> ExecResult:
        return run_git(args, repo_root=self.root, check=check, config=config)

    def init(self, initial_branch: str = PRIMARY_BRANCH) -> ExecResult:
        return self.run(["init", "-b", initial_branch])

    def set_config(self, key: str, value: str) -> ExecResult:
        """Write a repository-local config value."""
        return self.run(["config", "--local", key, value])

    def get_config(self, key: str) -> str | None:
        """Read a repository-local config value, None when unset."""
        result = self.run(["config", "--local", "--get", key], check=False)
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def has_head(self) -> bool:
        """False on an unborn branch (no commits yet)."""
        return self.run(["rev-parse", "--verify", "--quiet", "HEAD"], check=False).returncode == 0
