"""Subprocess runners behind every gitdrills git call."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Task scripts run unattended; git must never stop to ask for an editor or credentials.
NON_INTERACTIVE_ENV: dict[str, str] = {
    "GIT_EDITOR": "true",
    "GIT_SEQUENCE_EDITOR": "true",
    "GIT_TERMINAL_PROMPT": "0",
    "GIT_MERGE_AUTOEDIT": "no",
}

_CONFLICT_MARKERS = ("CONFLICT (", "Merge conflict in", "could not apply", "Resolve all conflicts")


@dataclass(frozen=True)
class ExecResult:
    """Result envelope for subprocess execution."""

    argv: tuple[str, ...]
    cwd: Path
    returncode: int
    stdout: str
    stderr: str


class ExecError(RuntimeError):
    """Raised when a command returns non-zero in check mode."""

    def __init__(self, result: ExecResult):
        rendered = " ".join(result.argv)
        detail = (result.stderr or result.stdout).strip()
        super().__init__(f"command failed ({result.returncode}): {rendered}\n{detail}")
        self.result = result

    @property
    def is_conflict(self) -> bool:
        """True when git stopped because of a content conflict."""
        combined = f"{self.result.stdout}\n{self.result.stderr}"
        return any(marker in combined for marker in _CONFLICT_MARKERS)


def run_command(
    argv: list[str],
    *,
    cwd: Path,
    check: bool = True,
    env: Mapping[str, str] | None = None,
) -> ExecResult:
    """Run command and return structured result."""
    merged_env = None
    if env:
        merged_env = {**os.environ, **env}
    completed = subprocess.run(
        argv,
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
        env=merged_env,
    )
    result = ExecResult(
        argv=tuple(argv),
        cwd=cwd.resolve(),
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
    if check and result.returncode != 0:
        raise ExecError(result)
    return result


def run_git(
    args: list[str],
    *,
    repo_root: Path,
    check: bool = True,
    config: Mapping[str, str] | None = None,
) -> ExecResult:
    """Run a non-interactive git command rooted at repo.

    ``config`` entries become ``-c key=value`` overrides for this call only.
    """
    overrides: list[str] = []
    for key, value in (config or {}).items():
        overrides.extend(["-c", f"{key}={value}"])
    return run_command(
        ["git", *overrides, *args],
        cwd=repo_root,
        check=check,
        env=NON_INTERACTIVE_ENV,
    )
