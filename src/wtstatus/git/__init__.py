"""Git interface layer — adapter, porcelain status parsing, models."""

from wtstatus.git.adapter import (
    GitError,
    find_repo_root,
    get_status_text,
    read_worktree_file,
)
from wtstatus.git.models import ChangeCode, StatusHeader, StatusRecord, SubmoduleState
from wtstatus.git.status_parser import StatusDecodeError, StatusParser, decode_status

__all__ = [
    "ChangeCode",
    "GitError",
    "StatusDecodeError",
    "StatusHeader",
    "StatusParser",
    "StatusRecord",
    "SubmoduleState",
    "decode_status",
    "find_repo_root",
    "get_status_text",
    "read_worktree_file",
]
