"""Tests for the git subprocess runners."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from gitdrills.git.exec import ExecError, ExecResult, run_command, run_git


@pytest.fixture
def bare_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", "-b", "main"], cwd=repo, check=True, capture_output=True)
    return repo


def _result(stdout: str = "", stderr: str = "", code: int = 1) -> ExecResult:
    return ExecResult(argv=("git", "merge", "topic"), cwd=Path("/repo"), returncode=code, stdout=stdout, stderr=stderr)


def test_run_git_returns_structured_result(bare_repo: Path) -> None:
    result = run_git(["rev-parse", "--is-inside-work-tree"], repo_root=bare_repo)
    assert result.returncode == 0
    assert result.stdout.strip() == "true"
    assert result.argv == ("git", "rev-parse", "--is-inside-work-tree")
    assert result.cwd == bare_repo.resolve()


def test_run_git_raises_exec_error_in_check_mode(bare_repo: Path) -> None:
    with pytest.raises(ExecError) as excinfo:
        run_git(["checkout", "does-not-exist"], repo_root=bare_repo)
    assert excinfo.value.result.returncode != 0
    assert "git checkout does-not-exist" in str(excinfo.value)


def test_run_git_without_check_returns_failure(bare_repo: Path) -> None:
    result = run_git(["config", "--local", "--get", "no.such"], repo_root=bare_repo, check=False)
    assert result.returncode != 0


def test_run_git_config_overrides_apply_to_one_call(bare_repo: Path) -> None:
    result = run_git(["config", "--get", "drill.level"], repo_root=bare_repo, config={"drill.level": "3"})
    assert result.stdout.strip() == "3"
    assert run_git(["config", "--get", "drill.level"], repo_root=bare_repo, check=False).returncode != 0


def test_run_command_passes_env(tmp_path: Path) -> None:
    result = run_command(["sh", "-c", "echo $DRILL_VALUE"], cwd=tmp_path, env={"DRILL_VALUE": "ok"})
    assert result.stdout.strip() == "ok"


def test_exec_error_detects_conflicts() -> None:
    merge = _result(stdout="Auto-merging a.txt\nCONFLICT (content): Merge conflict in a.txt\n")
    rebase = _result(stderr="error: could not apply 1a2b3c4... change\n")
    other = _result(stderr="merge: topic - not something we can merge\n")

    assert ExecError(merge).is_conflict
    assert ExecError(rebase).is_conflict
    assert not ExecError(other).is_conflict
