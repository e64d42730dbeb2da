"""Clean every ``task<N>`` directory under a workshop root."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from gitdrills import ui
from gitdrills.constants import DEFAULT_PRESERVE_FILES
from gitdrills.lifecycle import CleanResult, clean_task_repo
from gitdrills.utils.paths import parse_task_dir_name


@dataclass(frozen=True)
class CleanAllReport:
    """Per-task outcomes of a clean-all pass."""

    cleaned: list[CleanResult] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def discover_task_dirs(root: Path) -> list[tuple[int, Path]]:
    """Return (number, path) for each task directory, in numeric order.

    Symlinks are skipped even when they point at a directory.
    """
    found: list[tuple[int, Path]] = []
    for entry in root.iterdir():
        if entry.is_symlink() or not entry.is_dir():
            continue
        number = parse_task_dir_name(entry.name)
        if number is not None:
            found.append((number, entry))
    return sorted(found)


def clean_all(
    root: Path | None = None,
    *,
    preserve_files: Sequence[str] = DEFAULT_PRESERVE_FILES,
) -> CleanAllReport:
    """Clean each discovered task; a failing task is reported and skipped."""
    resolved_root = (root or Path.cwd()).resolve()
    report = CleanAllReport()

    task_dirs = discover_task_dirs(resolved_root)
    if not task_dirs:
        ui.success("No task directories found to clean.")
        return report

    ui.info(f"🧹 Cleaning {len(task_dirs)} task(s)...\n")
    for number, path in task_dirs:
        try:
            result = clean_task_repo(number, preserve_files=preserve_files, root=resolved_root)
        except OSError as exc:
            ui.warn(f"Could not clean {path.name}: {exc}")
            report.failed.append((path.name, str(exc)))
            continue
        report.cleaned.append(result)

    if report.ok:
        ui.info("\n✅ All tasks cleaned!\n")
    return report
