"""JSON reporter for scripts and editors."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List

from wtstatus.status.models import (
    ConflictedStatus,
    CopiedStatus,
    FileEntry,
    RenamedStatus,
    WorkingDirectoryStatus,
)


def _entry_to_dict(entry: FileEntry) -> Dict[str, Any]:
    status = entry.status
    data: Dict[str, Any] = {"path": entry.path, "kind": status.kind.value}
    if isinstance(status, (RenamedStatus, CopiedStatus)):
        data["old_path"] = status.old_path
    if isinstance(status, ConflictedStatus):
        conflict = status.entry
        data["conflict"] = {
            "action": conflict.action.value,
            "us": conflict.us.value,
            "them": conflict.them.value,
            # key omitted, not null, for manual conflicts
            **(
                {"conflict_marker_count": conflict.conflict_marker_count}
                if conflict.conflict_marker_count is not None
                else {}
            ),
        }
    if entry.submodule is not None:
        data["submodule"] = asdict(entry.submodule)
    return data


def to_dict(status: WorkingDirectoryStatus) -> Dict[str, Any]:
    """Convert a WorkingDirectoryStatus to a JSON-serialisable dict."""
    files: List[Dict[str, Any]] = [_entry_to_dict(e) for e in status.files]
    return {
        "version": "1.0",
        "branch": asdict(status.branch),
        "total_files": len(status.files),
        "conflicted_files": len(status.conflicted_files),
        "files": files,
    }


def render(status: WorkingDirectoryStatus) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(status), indent=2)
