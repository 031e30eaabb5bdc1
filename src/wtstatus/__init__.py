"""wtstatus — structured working-tree status for git repositories."""

from wtstatus.status import (
    ContentReadError,
    FileEntry,
    FileStatusKind,
    WorkingDirectoryStatus,
    build_status,
    get_status,
    is_conflicted,
    is_manual_conflict,
    is_textual_conflict,
)

__version__ = "0.1.0"

__all__ = [
    "ContentReadError",
    "FileEntry",
    "FileStatusKind",
    "WorkingDirectoryStatus",
    "__version__",
    "build_status",
    "get_status",
    "is_conflicted",
    "is_manual_conflict",
    "is_textual_conflict",
]
