"""Fixtures for task registry tests."""

from __future__ import annotations

import pytest

from gitdrills.tasks import registry


@pytest.fixture(autouse=True)
def empty_registry(monkeypatch: pytest.MonkeyPatch) -> dict:
    """Give each test its own registry and skip installed entry points."""
    table: dict = {}
    monkeypatch.setattr(registry, "_REGISTRY", table)
    monkeypatch.setattr(registry, "_entry_points_loaded", True)
    return table
