"""Shared constants for gitdrills task scripts."""

from __future__ import annotations

CLI_FLAG_FORCE = "--force"
CLI_FLAG_CLEAN = "--clean"
CLI_FLAGS: tuple[str, ...] = (CLI_FLAG_FORCE, CLI_FLAG_CLEAN)

INSTRUCTIONS_FILE_NAME = "Instructions.md"
DEFAULT_PRESERVE_FILES: tuple[str, ...] = (INSTRUCTIONS_FILE_NAME,)

TASK_DIR_PREFIX = "task"
PRIMARY_BRANCH = "main"

GIT_DIR_NAME = ".git"
RERERE_CACHE_DIR_NAME = "rr-cache"
