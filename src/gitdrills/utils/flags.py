"""Raw argv flag scanning for task scripts."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from gitdrills.constants import CLI_FLAG_CLEAN, CLI_FLAG_FORCE


@dataclass(frozen=True)
class TaskFlags:
    """Presence-only flags accepted by every task script."""

    force: bool = False
    clean: bool = False


def has_flag(flag: str, argv: Sequence[str] | None = None) -> bool:
    """Return True when the literal flag appears anywhere in argv."""
    args = sys.argv[1:] if argv is None else argv
    return flag in args


def parse_task_flags(argv: Sequence[str] | None = None) -> TaskFlags:
    """Scan argv for --force and --clean; anything else is ignored."""
    return TaskFlags(
        force=has_flag(CLI_FLAG_FORCE, argv),
        clean=has_flag(CLI_FLAG_CLEAN, argv),
    )
