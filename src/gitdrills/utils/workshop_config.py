"""Workshop configuration: fixed git identity plus optional per-workshop overrides.

An optional ``.gitdrills/workshop.toml`` next to the task directories may
override the preserve-list::

    [workshop]
    preserve_files = ["Instructions.md", "HINTS.md"]

The committer identity is not read from the file; callers that need a
different identity (tests, mostly) pass their own ``GitUserConfig``.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from gitdrills.constants import DEFAULT_PRESERVE_FILES

CONFIG_DIR_NAME = ".gitdrills"
CONFIG_FILE_NAME = "workshop.toml"


@dataclass(frozen=True)
class GitUserConfig:
    """Committer identity written into every task repository."""

    name: str
    email: str


DEFAULT_GIT_USER = GitUserConfig(
    name="Rebase Wizard 🧙",
    email="merge-conflicts-begone@git-workshop.dev",
)


@dataclass(frozen=True)
class WorkshopConfig:
    """Settings shared by every task in one workshop checkout."""

    git_user: GitUserConfig = DEFAULT_GIT_USER
    preserve_files: tuple[str, ...] = field(default=DEFAULT_PRESERVE_FILES)
    task_root: Path | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "WorkshopConfig":
        """Parse and validate a config dict into WorkshopConfig."""
        section = data.get("workshop", {})
        if not isinstance(section, dict):
            raise TypeError("[workshop] must be a table")

        preserve = section.get("preserve_files", list(DEFAULT_PRESERVE_FILES))
        if not isinstance(preserve, list) or not all(isinstance(name, str) for name in preserve):
            raise ValueError("preserve_files must be a list of file names")
        for name in preserve:
            if not name or "/" in name or "\\" in name:
                raise ValueError(f"preserve_files entries must be top-level names, got {name!r}")

        return cls(preserve_files=tuple(preserve))


def load_workshop_config(root: Path | None = None) -> WorkshopConfig:
    """Load workshop configuration from ``<root>/.gitdrills/workshop.toml``.

    Args:
        root: Directory holding the task directories (defaults to cwd)

    Returns:
        WorkshopConfig with defaults for anything the file leaves out, or the
        plain defaults when no file exists

    Raises:
        RuntimeError: If the config file is malformed or invalid
    """
    resolved_root = (root or Path.cwd()).resolve()
    toml_path = resolved_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME
    if not toml_path.exists():
        return WorkshopConfig(task_root=resolved_root)

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
        config = WorkshopConfig.from_dict(data)
    except tomllib.TOMLDecodeError as e:
        raise RuntimeError(f"Malformed TOML config at {toml_path}: {e}") from e
    except (KeyError, TypeError, ValueError) as e:
        raise RuntimeError(f"Invalid config structure in {toml_path}: {e}") from e

    return replace(config, task_root=resolved_root)
