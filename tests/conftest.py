"""Shared test fixtures — sample porcelain output and temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

HASH_A = "a" * 40
HASH_B = "b" * 40
HASH_C = "c" * 40
HASH_0 = "0" * 40


def git(repo: Path, *args: str, check: bool = True) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=check
    )


def commit_all(repo: Path, message: str) -> None:
    git(repo, "add", "-A")
    git(repo, "commit", "-m", message)


@pytest.fixture
def porcelain_modified() -> str:
    """One unstaged modification."""
    return f"1 .M N... 100644 100644 100644 {HASH_A} {HASH_A} README.md\0"


@pytest.fixture
def porcelain_branch_headers() -> str:
    """Branch headers followed by a staged new file."""
    return (
        f"# branch.oid {HASH_C}\0"
        "# branch.head main\0"
        "# branch.upstream origin/main\0"
        "# branch.ab +2 -1\0"
        f"1 A. N... 000000 100644 100644 {HASH_0} {HASH_A} new.txt\0"
    )


@pytest.fixture
def porcelain_rename() -> str:
    """A staged rename, foo -> bar."""
    return f"2 R. N... 100644 100644 100644 {HASH_A} {HASH_A} R100 bar\0foo\0"


@pytest.fixture
def porcelain_copy() -> str:
    """A modified source and a staged copy of it."""
    return (
        f"1 M. N... 100644 100644 100644 {HASH_A} {HASH_B} CONTRIBUTING.md\0"
        f"2 C. N... 100644 100644 100644 {HASH_A} {HASH_A} C75 docs/OVERVIEW.md\0CONTRIBUTING.md\0"
    )


@pytest.fixture
def porcelain_conflicts() -> str:
    """The multi-file conflicted merge: four unmerged paths and one clean add."""
    return (
        f"u UD N... 100644 100644 000000 100644 {HASH_A} {HASH_B} {HASH_0} bar\0"
        f"u AA N... 000000 100644 100644 100644 {HASH_0} {HASH_A} {HASH_B} baz\0"
        f"u AA N... 000000 100644 100644 100644 {HASH_0} {HASH_A} {HASH_C} cat\0"
        f"1 A. N... 000000 100644 100644 {HASH_0} {HASH_A} dog\0"
        f"u UU N... 100644 100644 100644 100644 {HASH_A} {HASH_B} {HASH_C} foo\0"
    )


@pytest.fixture
def porcelain_untracked() -> str:
    return "? notes/todo.txt\0! build/\0"


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    git(tmp_path, "config", "user.email", "test@test.com")
    git(tmp_path, "config", "user.name", "Test")
    git(tmp_path, "config", "commit.gpgsign", "false")
    git(tmp_path, "config", "core.autocrlf", "false")
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    commit_all(tmp_path, "init")
    return tmp_path


@pytest.fixture
def conflicted_repo(tmp_git_repo: Path) -> Path:
    """Repository left mid-merge with conflicts in foo, bar, baz and cat.

    foo is modified on both sides (UU), bar is modified by us and deleted by
    them (UD), baz and cat are added on both sides (AA), dog is added by
    them only and merges cleanly.
    """
    repo = tmp_git_repo
    (repo / "foo").write_text("base foo\n")
    (repo / "bar").write_text("base bar\n")
    commit_all(repo, "base")
    git(repo, "branch", "other")

    (repo / "foo").write_text("ours foo\n")
    (repo / "bar").write_text("ours bar\n")
    (repo / "baz").write_text("ours baz\n")
    (repo / "cat").write_text("ours cat\n")
    commit_all(repo, "ours")

    git(repo, "checkout", "other")
    (repo / "foo").write_text("theirs foo\n")
    (repo / "bar").unlink()
    (repo / "baz").write_text("theirs baz\n")
    (repo / "cat").write_text("theirs cat\n")
    (repo / "dog").write_text("dog\n")
    commit_all(repo, "theirs")

    git(repo, "checkout", "-")
    git(repo, "merge", "other", check=False)
    return repo


@pytest.fixture
def binary_conflict_repo(tmp_git_repo: Path) -> Path:
    """Repository where branch ``other`` changed a binary image.

    The current branch has not touched the image yet; tests make their own
    change and then merge ``other``.
    """
    repo = tmp_git_repo
    (repo / "my-cool-image.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR base")
    commit_all(repo, "add image")
    git(repo, "branch", "other")

    git(repo, "checkout", "other")
    (repo / "my-cool-image.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR theirs")
    commit_all(repo, "change image on other")
    git(repo, "checkout", "-")
    return repo
