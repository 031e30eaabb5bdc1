"""Working directory status models — the per-path results callers consume."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Union

from wtstatus.conflicts.classifier import UnmergedAction
from wtstatus.git.models import ChangeCode, SubmoduleState


class FileStatusKind(str, Enum):
    NEW = "new"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"
    CONFLICTED = "conflicted"
    UNTRACKED = "untracked"
    IGNORED = "ignored"


@dataclass(frozen=True)
class ConflictedEntry:
    """Classification of an unmerged path.

    ``conflict_marker_count`` is None for manual conflicts (no markers were
    ever written) and an int, possibly 0, for textual ones.
    """

    action: UnmergedAction
    us: ChangeCode
    them: ChangeCode
    conflict_marker_count: Optional[int] = None


@dataclass(frozen=True)
class NewStatus:
    kind: ClassVar[FileStatusKind] = FileStatusKind.NEW


@dataclass(frozen=True)
class ModifiedStatus:
    kind: ClassVar[FileStatusKind] = FileStatusKind.MODIFIED


@dataclass(frozen=True)
class DeletedStatus:
    kind: ClassVar[FileStatusKind] = FileStatusKind.DELETED


@dataclass(frozen=True)
class RenamedStatus:
    old_path: str
    kind: ClassVar[FileStatusKind] = FileStatusKind.RENAMED


@dataclass(frozen=True)
class CopiedStatus:
    old_path: str
    kind: ClassVar[FileStatusKind] = FileStatusKind.COPIED


@dataclass(frozen=True)
class ConflictedStatus:
    entry: ConflictedEntry
    kind: ClassVar[FileStatusKind] = FileStatusKind.CONFLICTED


@dataclass(frozen=True)
class UntrackedStatus:
    kind: ClassVar[FileStatusKind] = FileStatusKind.UNTRACKED


@dataclass(frozen=True)
class IgnoredStatus:
    kind: ClassVar[FileStatusKind] = FileStatusKind.IGNORED


FileStatus = Union[
    NewStatus,
    ModifiedStatus,
    DeletedStatus,
    RenamedStatus,
    CopiedStatus,
    ConflictedStatus,
    UntrackedStatus,
    IgnoredStatus,
]


def is_conflicted(status: FileStatus) -> bool:
    return isinstance(status, ConflictedStatus)


def is_manual_conflict(status: FileStatus) -> bool:
    """True for a conflict with no markers to edit (binary or delete/modify)."""
    return isinstance(status, ConflictedStatus) and status.entry.conflict_marker_count is None


def is_textual_conflict(status: FileStatus) -> bool:
    return isinstance(status, ConflictedStatus) and status.entry.conflict_marker_count is not None


@dataclass(frozen=True)
class FileEntry:
    path: str
    status: FileStatus
    submodule: Optional[SubmoduleState] = None


@dataclass(frozen=True)
class BranchInfo:
    """Decoded ``# branch.*`` headers. None fields were not reported."""

    oid: Optional[str] = None  # None for an unborn branch
    head: Optional[str] = None  # None when detached
    upstream: Optional[str] = None
    ahead: Optional[int] = None
    behind: Optional[int] = None


@dataclass(frozen=True)
class WorkingDirectoryStatus:
    """Every changed path, in the order git reported them."""

    files: List[FileEntry] = field(default_factory=list)
    branch: BranchInfo = field(default_factory=BranchInfo)

    @property
    def is_clean(self) -> bool:
        return not self.files

    @property
    def conflicted_files(self) -> List[FileEntry]:
        return [f for f in self.files if is_conflicted(f.status)]

    def find(self, path: str) -> Optional[FileEntry]:
        for entry in self.files:
            if entry.path == path:
                return entry
        return None
