"""Parsers for git porcelain status and formatted log output."""

from __future__ import annotations

from dataclasses import dataclass, field

# Porcelain v1 XY pairs that mean "unmerged".
CONFLICT_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

FIELD_SEP = "\x1f"
RECORD_SEP = "\x1e"
NUL = "\x00"
LOG_FORMAT = FIELD_SEP.join(["%H", "%aI", "%an", "%ae", "%s", "%b"]) + RECORD_SEP


@dataclass(frozen=True)
class RepoStatus:
    """Working tree state grouped the way task scripts ask about it."""

    current: str
    staged: list[str] = field(default_factory=list)
    unstaged: list[str] = field(default_factory=list)
    untracked: list[str] = field(default_factory=list)
    conflicted: list[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.unstaged or self.untracked or self.conflicted)


@dataclass(frozen=True)
class LogEntry:
    """One commit as reported by ``git log``."""

    hash: str
    date: str
    author_name: str
    author_email: str
    message: str
    body: str = ""

    @property
    def short_hash(self) -> str:
        return self.hash[:7]


@dataclass(frozen=True)
class LogResult:
    """Commits newest first, in the order git printed them."""

    all: list[LogEntry] = field(default_factory=list)

    @property
    def latest(self) -> LogEntry | None:
        return self.all[0] if self.all else None

    @property
    def total(self) -> int:
        return len(self.all)


def parse_status_output(status_output: str, *, current: str) -> RepoStatus:
    """Parse ``git status --porcelain=v1 -z`` output into a RepoStatus.

    Entries are NUL-terminated and paths are never quoted. A rename or copy
    entry carries the new path and is followed by one extra field holding
    the original path.
    """
    staged: list[str] = []
    unstaged: list[str] = []
    untracked: list[str] = []
    conflicted: list[str] = []

    fields = iter(status_output.split(NUL))
    for raw_entry in fields:
        if len(raw_entry) < 4:
            continue
        code = raw_entry[:2]
        path = raw_entry[3:]
        if "R" in code or "C" in code:
            next(fields, None)
        if code == "??":
            untracked.append(path)
            continue
        if code == "!!":
            continue
        if code in CONFLICT_CODES:
            conflicted.append(path)
            continue
        index_code, worktree_code = code[0], code[1]
        if index_code not in (" ", "?"):
            staged.append(path)
        if worktree_code not in (" ", "?"):
            unstaged.append(path)

    return RepoStatus(
        current=current,
        staged=staged,
        unstaged=unstaged,
        untracked=untracked,
        conflicted=conflicted,
    )


def parse_log_output(log_output: str) -> LogResult:
    """Parse ``git log --format=LOG_FORMAT`` output."""
    entries: list[LogEntry] = []
    for raw_record in log_output.split(RECORD_SEP):
        record = raw_record.strip("\n")
        if not record:
            continue
        parts = record.split(FIELD_SEP)
        if len(parts) < 5:
            raise ValueError(f"unexpected git log record: {record!r}")
        commit_hash, date, author_name, author_email, message = parts[:5]
        body = parts[5].strip() if len(parts) > 5 else ""
        entries.append(
            LogEntry(
                hash=commit_hash,
                date=date,
                author_name=author_name,
                author_email=author_email,
                message=message,
                body=body,
            )
        )
    return LogResult(all=entries)
