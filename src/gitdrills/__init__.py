"""gitdrills - practice repositories for git workshops."""

__version__ = "0.3.0"

from gitdrills.constants import CLI_FLAG_CLEAN, CLI_FLAG_FORCE, CLI_FLAGS, INSTRUCTIONS_FILE_NAME  # noqa: E402
from gitdrills.lifecycle import (  # noqa: E402
    CleanResult,
    RepositoryAlreadyExists,
    TaskRepoResult,
    initialize_task_repo,
)
from gitdrills.ops import GitOps, ResetMode, bind, create_git_ops  # noqa: E402
from gitdrills.utils.flags import has_flag, parse_task_flags  # noqa: E402
from gitdrills.utils.paths import get_task_path  # noqa: E402
from gitdrills.utils.workshop_config import DEFAULT_GIT_USER, GitUserConfig  # noqa: E402

__all__ = [
    "CLI_FLAGS",
    "CLI_FLAG_CLEAN",
    "CLI_FLAG_FORCE",
    "DEFAULT_GIT_USER",
    "INSTRUCTIONS_FILE_NAME",
    "CleanResult",
    "GitOps",
    "GitUserConfig",
    "RepositoryAlreadyExists",
    "ResetMode",
    "TaskRepoResult",
    "__version__",
    "bind",
    "create_git_ops",
    "get_task_path",
    "has_flag",
    "initialize_task_repo",
    "parse_task_flags",
]
