"""Task registration and the shared setup flow."""

from gitdrills.tasks.registry import (
    ENTRY_POINT_GROUP,
    TaskDefinition,
    UnknownTaskError,
    add_task,
    get_task,
    register_task,
    registered_tasks,
)
from gitdrills.tasks.runner import print_summary, run_task, run_task_script

__all__ = [
    "ENTRY_POINT_GROUP",
    "TaskDefinition",
    "UnknownTaskError",
    "add_task",
    "get_task",
    "print_summary",
    "register_task",
    "registered_tasks",
    "run_task",
    "run_task_script",
]
