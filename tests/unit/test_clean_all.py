"""Tests for cleaning every task directory in a workshop root."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitdrills.clean_all import clean_all, discover_task_dirs
from gitdrills.lifecycle import initialize_task_repo


def _make_task(root: Path, number: int) -> Path:
    initialize_task_repo(number, root=root)
    task_dir = root / f"task{number}"
    (task_dir / "Instructions.md").write_text(f"# Task {number}\n", encoding="utf-8")
    (task_dir / "_sample").mkdir()
    (task_dir / "_sample" / "file.txt").write_text("x\n", encoding="utf-8")
    return task_dir


def test_discover_orders_numerically_and_skips_others(tmp_path: Path) -> None:
    for name in ["task10", "task2", "task1", "taskA", "notes"]:
        (tmp_path / name).mkdir()
    (tmp_path / "task3").write_text("not a directory", encoding="utf-8")

    assert [n for n, _ in discover_task_dirs(tmp_path)] == [1, 2, 10]


def test_clean_all_strips_every_task(tmp_path: Path) -> None:
    dirs = [_make_task(tmp_path, n) for n in (1, 2, 11)]

    report = clean_all(tmp_path)

    assert report.ok
    assert [r.task_number for r in report.cleaned] == [1, 2, 11]
    for task_dir in dirs:
        assert [p.name for p in task_dir.iterdir()] == ["Instructions.md"]


def test_clean_all_with_no_tasks(tmp_path: Path) -> None:
    report = clean_all(tmp_path)
    assert report.ok
    assert report.cleaned == []


def test_clean_all_continues_past_a_failing_task(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _make_task(tmp_path, 1)
    second = _make_task(tmp_path, 2)

    import gitdrills.clean_all as clean_all_module

    real_clean = clean_all_module.clean_task_repo

    def flaky_clean(number: int, **kwargs):
        if number == 1:
            raise PermissionError("permission denied: task1/.git")
        return real_clean(number, **kwargs)

    monkeypatch.setattr(clean_all_module, "clean_task_repo", flaky_clean)

    report = clean_all(tmp_path)

    assert not report.ok
    assert report.failed == [("task1", "permission denied: task1/.git")]
    assert [r.task_number for r in report.cleaned] == [2]
    assert [p.name for p in second.iterdir()] == ["Instructions.md"]


def test_symlinked_task_dir_is_not_followed(tmp_path: Path) -> None:
    workshop = tmp_path / "workshop"
    workshop.mkdir()
    outside = tmp_path / "thesis"
    outside.mkdir()
    (outside / "thesis.tex").write_text("\\chapter{One}\n", encoding="utf-8")
    (workshop / "task7").symlink_to(outside, target_is_directory=True)
    real = _make_task(workshop, 1)

    assert [n for n, _ in discover_task_dirs(workshop)] == [1]

    report = clean_all(workshop)

    assert report.ok
    assert [r.task_number for r in report.cleaned] == [1]
    assert (outside / "thesis.tex").read_text(encoding="utf-8") == "\\chapter{One}\n"
    assert [p.name for p in real.iterdir()] == ["Instructions.md"]
