"""Data models for decoded status records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ChangeCode(str, Enum):
    """One side of a porcelain XY code."""

    UNCHANGED = "."
    MODIFIED = "M"
    TYPE_CHANGED = "T"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UPDATED_BUT_UNMERGED = "U"
    UNTRACKED = "?"
    IGNORED = "!"


# worktree file modes that never hold mergeable text
GITLINK_MODE = "160000"
SYMLINK_MODE = "120000"


@dataclass(frozen=True)
class SubmoduleState:
    """Decoded ``S<c><m><u>`` field of a submodule record."""

    commit_changed: bool
    modified_changes: bool
    untracked_changes: bool


@dataclass(frozen=True)
class StatusHeader:
    """A ``# <name> <value>`` header line, e.g. ``branch.head``."""

    name: str
    value: str


@dataclass(frozen=True)
class StatusRecord:
    """One working-tree entry, before classification."""

    path: str
    index_side: ChangeCode
    worktree_side: ChangeCode
    old_path: Optional[str] = None  # set on renames and copies
    unmerged: bool = False
    submodule: Optional[SubmoduleState] = None
    worktree_mode: Optional[str] = field(default=None, compare=False)
    raw: str = field(default="", compare=False, repr=False)

    @property
    def codes(self) -> tuple[ChangeCode, ChangeCode]:
        return self.index_side, self.worktree_side
