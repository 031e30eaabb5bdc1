"""Conflicts — unmerged classification and marker counting."""

from wtstatus.conflicts.classifier import (
    UnknownConflictCode,
    UnmergedAction,
    classify,
    is_textual_action,
)
from wtstatus.conflicts.markers import count_markers, is_binary

__all__ = [
    "UnknownConflictCode",
    "UnmergedAction",
    "classify",
    "count_markers",
    "is_binary",
    "is_textual_action",
]
