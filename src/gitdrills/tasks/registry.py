"""Registry of workshop task builders.

Tasks register in-process with ``@register_task`` or from installed packages
through the ``gitdrills.tasks`` entry-point group. An entry point may point at
a ``TaskDefinition`` or at a module whose import registers its tasks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gitdrills.utils.paths import validate_task_number

if TYPE_CHECKING:
    from gitdrills.ops import GitOps

ENTRY_POINT_GROUP = "gitdrills.tasks"

TaskBuilder = Callable[["GitOps"], None]


class UnknownTaskError(LookupError):
    """Raised when no builder is registered for a task number."""

    def __init__(self, task_number: int, known: list[int]):
        listed = ", ".join(str(n) for n in known) or "none"
        super().__init__(f"No task registered with number {task_number} (registered: {listed})")
        self.task_number = task_number


@dataclass(frozen=True)
class TaskDefinition:
    """A numbered exercise and the builder that scripts its history."""

    number: int
    title: str
    build: TaskBuilder
    description: str = ""


_REGISTRY: dict[int, TaskDefinition] = {}
_entry_points_loaded = False


def add_task(definition: TaskDefinition) -> TaskDefinition:
    """Register a definition; re-registering the same builder is a no-op."""
    validate_task_number(definition.number)
    existing = _REGISTRY.get(definition.number)
    if existing is not None and existing.build is not definition.build:
        raise ValueError(
            f"Task {definition.number} is already registered as {existing.title!r}"
        )
    _REGISTRY[definition.number] = definition
    return definition


def register_task(number: int, title: str, *, description: str = "") -> Callable[[TaskBuilder], TaskBuilder]:
    """Decorator registering a builder function as task ``number``."""

    def decorator(build: TaskBuilder) -> TaskBuilder:
        doc = description or (build.__doc__ or "").strip()
        add_task(TaskDefinition(number=number, title=title, build=build, description=doc))
        return build

    return decorator


def unregister_task(number: int) -> None:
    _REGISTRY.pop(number, None)


def load_entry_point_tasks() -> None:
    """Import every task exposed under the ``gitdrills.tasks`` entry-point group."""
    global _entry_points_loaded
    if _entry_points_loaded:
        return
    from importlib.metadata import entry_points

    for ep in entry_points(group=ENTRY_POINT_GROUP):
        loaded = ep.load()
        if isinstance(loaded, TaskDefinition):
            add_task(loaded)
    _entry_points_loaded = True


def registered_tasks() -> list[TaskDefinition]:
    """All known tasks ordered by number."""
    load_entry_point_tasks()
    return [_REGISTRY[n] for n in sorted(_REGISTRY)]


def get_task(number: int) -> TaskDefinition:
    load_entry_point_tasks()
    definition = _REGISTRY.get(number)
    if definition is None:
        raise UnknownTaskError(number, sorted(_REGISTRY))
    return definition
