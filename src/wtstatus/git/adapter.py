"""Git subprocess wrapper — repository probe, porcelain status, worktree reads."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

_logger = logging.getLogger(__name__)

# stderr fragments git prints when the directory is not a usable work tree
_NOT_A_REPO_MESSAGES = (
    "not a git repository",
    "must be run in a work tree",
)


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    # status only reads; don't take the optional index lock
    cmd = ["git", "--no-optional-locks", *args]
    _logger.debug("running %s in %s", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="surrogateescape",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git error: {stderr or f'exit status {result.returncode}'}")
    return result.stdout


def find_repo_root(path: Path, timeout: int = 30) -> Optional[Path]:
    """Return the work tree root for *path*, or None if it isn't in a repository."""
    if not path.is_dir():
        return None
    try:
        out = _run_git(["rev-parse", "--show-toplevel"], cwd=path, timeout=timeout)
    except GitError as exc:
        if any(msg in str(exc) for msg in _NOT_A_REPO_MESSAGES):
            return None
        raise
    # older git prints nothing from inside a .git directory
    root = out.strip()
    return Path(root) if root else None


def get_status_text(
    repo_root: Path,
    *,
    untracked_files: str = "all",
    ignore_submodules: str = "none",
    renames: bool = True,
    timeout: int = 30,
) -> str:
    """Return NUL-terminated porcelain v2 status output, with branch headers."""
    args: List[str] = [
        "status",
        "--porcelain=v2",
        "-z",
        "--branch",
        f"--untracked-files={untracked_files}",
        f"--ignore-submodules={ignore_submodules}",
    ]
    if not renames:
        args.append("--no-renames")
    return _run_git(args, cwd=repo_root, timeout=timeout)


def read_worktree_file(repo_root: Path, path: str) -> bytes:
    """Return the raw bytes of *path* in the working tree. Raises OSError."""
    return (repo_root / path).read_bytes()
