"""Status aggregation — decoded records, conflict classes and marker counts
merged into one WorkingDirectoryStatus.

``build_status`` is pure over its inputs (status text and a file reader), so
it can be exercised without git. ``get_status`` wires it to a real
repository. Any failure aborts the whole call: a caller either gets every
entry or an exception, never a partial list.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, List, Optional, Union

from wtstatus.config.schema import WtStatusConfig
from wtstatus.conflicts.classifier import UnknownConflictCode, classify, is_textual_action
from wtstatus.conflicts.markers import DEFAULT_SNIFF_BYTES, count_markers, is_binary
from wtstatus.git.adapter import find_repo_root, get_status_text, read_worktree_file
from wtstatus.git.models import (
    GITLINK_MODE,
    SYMLINK_MODE,
    ChangeCode,
    StatusHeader,
    StatusRecord,
)
from wtstatus.git.status_parser import StatusDecodeError, StatusParser
from wtstatus.status.models import (
    BranchInfo,
    ConflictedEntry,
    ConflictedStatus,
    CopiedStatus,
    DeletedStatus,
    FileEntry,
    FileStatus,
    IgnoredStatus,
    ModifiedStatus,
    NewStatus,
    RenamedStatus,
    UntrackedStatus,
    WorkingDirectoryStatus,
)

_logger = logging.getLogger(__name__)

_AHEAD_BEHIND_RE = re.compile(r"\+(\d+) -(\d+)")

FileReader = Callable[[str], bytes]


class ContentReadError(Exception):
    """Raised when a conflicted file can't be read for marker counting."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path


def _ordinary_status(record: StatusRecord) -> FileStatus:
    """Map a merged record's XY codes onto a single FileStatus."""
    codes = record.codes

    if ChangeCode.RENAMED in codes:
        if record.old_path is None:
            raise StatusDecodeError("rename without original path", record.path)
        return RenamedStatus(old_path=record.old_path)
    if ChangeCode.COPIED in codes:
        if record.old_path is None:
            raise StatusDecodeError("copy without original path", record.path)
        return CopiedStatus(old_path=record.old_path)
    if ChangeCode.UNTRACKED in codes:
        return UntrackedStatus()
    if ChangeCode.IGNORED in codes:
        return IgnoredStatus()
    if ChangeCode.UPDATED_BUT_UNMERGED in codes:
        raise StatusDecodeError("unmerged code in a merged record", record.path)
    # staged adds and intent-to-add files (".A") alike
    if ChangeCode.ADDED in codes and ChangeCode.DELETED not in codes:
        return NewStatus()
    if ChangeCode.DELETED in codes:
        return DeletedStatus()
    return ModifiedStatus()


def _has_text_content(record: StatusRecord) -> bool:
    """False for submodules and symlinks, whose conflicts have no file to splice."""
    if record.submodule is not None:
        return False
    return record.worktree_mode not in (GITLINK_MODE, SYMLINK_MODE)


def _conflicted_status(
    record: StatusRecord, read_file: FileReader, sniff_bytes: int
) -> ConflictedStatus:
    us, them = record.codes
    try:
        action = classify(us, them)
    except UnknownConflictCode as exc:
        raise UnknownConflictCode(exc.us, exc.them, record.raw or record.path) from None

    marker_count: Optional[int] = None
    if is_textual_action(action) and _has_text_content(record):
        try:
            content = read_file(record.path)
        except OSError as exc:
            raise ContentReadError(record.path, exc.strerror or str(exc)) from exc
        if not is_binary(content, sniff_bytes):
            marker_count = count_markers(content)

    _logger.debug(
        "conflict %s: %s (markers: %s)", record.path, action.value, marker_count
    )
    return ConflictedStatus(
        entry=ConflictedEntry(
            action=action,
            us=us,
            them=them,
            conflict_marker_count=marker_count,
        )
    )


def _branch_info(headers: List[StatusHeader]) -> BranchInfo:
    values = {}
    for header in headers:
        if header.name == "branch.oid":
            values["oid"] = None if header.value == "(initial)" else header.value
        elif header.name == "branch.head":
            values["head"] = None if header.value == "(detached)" else header.value
        elif header.name == "branch.upstream":
            values["upstream"] = header.value
        elif header.name == "branch.ab":
            m = _AHEAD_BEHIND_RE.fullmatch(header.value)
            if m is None:
                raise StatusDecodeError("malformed branch.ab header", header.value)
            values["ahead"] = int(m.group(1))
            values["behind"] = int(m.group(2))
        else:
            _logger.debug("ignoring status header %s", header.name)
    return BranchInfo(**values)


def build_status(
    status_text: str,
    read_file: FileReader,
    *,
    sniff_bytes: int = DEFAULT_SNIFF_BYTES,
) -> WorkingDirectoryStatus:
    """Assemble a WorkingDirectoryStatus from porcelain v2 *status_text*.

    *read_file* maps a repository-relative path to the file's current bytes;
    it is only called for conflicts that can carry markers.
    """
    headers: List[StatusHeader] = []
    files: List[FileEntry] = []

    for item in StatusParser(status_text).parse():
        if isinstance(item, StatusHeader):
            headers.append(item)
            continue

        status: FileStatus
        if item.unmerged:
            status = _conflicted_status(item, read_file, sniff_bytes)
        else:
            status = _ordinary_status(item)
        files.append(FileEntry(path=item.path, status=status, submodule=item.submodule))

    return WorkingDirectoryStatus(files=files, branch=_branch_info(headers))


def get_status(
    repository_path: Union[str, Path],
    config: Optional[WtStatusConfig] = None,
) -> Optional[WorkingDirectoryStatus]:
    """Return the working directory status of *repository_path*.

    Returns None if the path is not inside a git work tree. Raises GitError,
    StatusDecodeError (including UnknownConflictCode) or ContentReadError.
    """
    cfg = config or WtStatusConfig()
    timeout = cfg.git.timeout

    repo_root = find_repo_root(Path(repository_path), timeout=timeout)
    if repo_root is None:
        _logger.debug("%s is not a git repository", repository_path)
        return None

    status_text = get_status_text(
        repo_root,
        untracked_files=cfg.status.untracked_files,
        ignore_submodules=cfg.status.ignore_submodules,
        renames=cfg.status.renames,
        timeout=timeout,
    )
    return build_status(
        status_text,
        lambda path: read_worktree_file(repo_root, path),
        sniff_bytes=cfg.conflicts.binary_sniff_bytes,
    )
