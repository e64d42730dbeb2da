"""Git plumbing for gitdrills task repositories."""

from gitdrills.git.exec import ExecError, ExecResult, run_command, run_git
from gitdrills.git.repo import GitRepo
from gitdrills.git.status import LogEntry, LogResult, RepoStatus

__all__ = [
    "ExecError",
    "ExecResult",
    "GitRepo",
    "LogEntry",
    "LogResult",
    "RepoStatus",
    "run_command",
    "run_git",
]
