"""Task directory naming and resolution."""

from __future__ import annotations

import re
from pathlib import Path

from gitdrills.constants import TASK_DIR_PREFIX

_TASK_DIR_PATTERN = re.compile(rf"^{TASK_DIR_PREFIX}(\d+)$")


def validate_task_number(task_number: int) -> int:
    """Reject anything that is not a positive integer."""
    if isinstance(task_number, bool) or not isinstance(task_number, int):
        raise ValueError(f"task number must be a positive integer, got {task_number!r}")
    if task_number < 1:
        raise ValueError(f"task number must be a positive integer, got {task_number}")
    return task_number


def task_dir_name(task_number: int) -> str:
    """Return the directory name for a task, e.g. ``task3``."""
    return f"{TASK_DIR_PREFIX}{validate_task_number(task_number)}"


def get_task_path(task_number: int, root: Path | None = None) -> Path:
    """Return the absolute path of ``task<N>`` under root (defaults to cwd)."""
    base = (root or Path.cwd()).resolve()
    return base / task_dir_name(task_number)


def parse_task_dir_name(name: str) -> int | None:
    """Return the task number encoded in a directory name, or None."""
    match = _TASK_DIR_PATTERN.match(name)
    if match is None:
        return None
    number = int(match.group(1))
    return number if number > 0 else None
