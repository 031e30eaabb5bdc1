"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

UntrackedMode = Literal["all", "normal", "no"]
SubmoduleMode = Literal["none", "untracked", "dirty", "all"]
OutputFormat = Literal["terminal", "json"]

UNTRACKED_MODES = ("all", "normal", "no")
SUBMODULE_MODES = ("none", "untracked", "dirty", "all")
OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class StatusConfig:
    untracked_files: UntrackedMode = "all"
    ignore_submodules: SubmoduleMode = "none"
    renames: bool = True  # False passes --no-renames


@dataclass
class ConflictsConfig:
    binary_sniff_bytes: int = 8000  # NUL within this prefix = binary


@dataclass
class GitConfig:
    timeout: int = 30  # seconds, per git invocation


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class WtStatusConfig:
    version: str = "1.0"
    status: StatusConfig = field(default_factory=StatusConfig)
    conflicts: ConflictsConfig = field(default_factory=ConflictsConfig)
    git: GitConfig = field(default_factory=GitConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
