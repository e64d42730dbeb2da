"""Unit tests for task directory naming."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitdrills.utils.paths import get_task_path, parse_task_dir_name, task_dir_name, validate_task_number


def test_task_dir_name() -> None:
    assert task_dir_name(1) == "task1"
    assert task_dir_name(12) == "task12"


def test_get_task_path_is_absolute_under_root(tmp_path: Path) -> None:
    assert get_task_path(3, tmp_path) == tmp_path.resolve() / "task3"
    assert get_task_path(3, tmp_path).is_absolute()


def test_get_task_path_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert get_task_path(5) == tmp_path.resolve() / "task5"


@pytest.mark.parametrize("bad", [0, -1, True, 1.5, "2"])
def test_validate_task_number_rejects_non_positive_integers(bad: object) -> None:
    with pytest.raises(ValueError, match="positive integer"):
        validate_task_number(bad)  # type: ignore[arg-type]


def test_parse_task_dir_name() -> None:
    assert parse_task_dir_name("task7") == 7
    assert parse_task_dir_name("task10") == 10
    assert parse_task_dir_name("task0") is None
    assert parse_task_dir_name("task") is None
    assert parse_task_dir_name("task3-notes") is None
    assert parse_task_dir_name("Task3") is None
