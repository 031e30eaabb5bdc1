"""Working directory status — models, predicates and aggregation."""

from wtstatus.status.aggregator import ContentReadError, build_status, get_status
from wtstatus.status.models import (
    BranchInfo,
    ConflictedEntry,
    ConflictedStatus,
    CopiedStatus,
    DeletedStatus,
    FileEntry,
    FileStatus,
    FileStatusKind,
    IgnoredStatus,
    ModifiedStatus,
    NewStatus,
    RenamedStatus,
    UntrackedStatus,
    WorkingDirectoryStatus,
    is_conflicted,
    is_manual_conflict,
    is_textual_conflict,
)

__all__ = [
    "BranchInfo",
    "ConflictedEntry",
    "ConflictedStatus",
    "ContentReadError",
    "CopiedStatus",
    "DeletedStatus",
    "FileEntry",
    "FileStatus",
    "FileStatusKind",
    "IgnoredStatus",
    "ModifiedStatus",
    "NewStatus",
    "RenamedStatus",
    "UntrackedStatus",
    "WorkingDirectoryStatus",
    "build_status",
    "get_status",
    "is_conflicted",
    "is_manual_conflict",
    "is_textual_conflict",
]
