"""Unmerged entry classification — (us, them) code pair to a named action."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from wtstatus.git.models import ChangeCode
from wtstatus.git.status_parser import StatusDecodeError


class UnmergedAction(str, Enum):
    BOTH_ADDED = "both_added"
    BOTH_MODIFIED = "both_modified"
    BOTH_DELETED = "both_deleted"
    ADDED_BY_US = "added_by_us"
    DELETED_BY_US = "deleted_by_us"
    ADDED_BY_THEM = "added_by_them"
    DELETED_BY_THEM = "deleted_by_them"


class UnknownConflictCode(StatusDecodeError):
    """Raised for an unmerged code pair with no known action."""

    def __init__(self, us: ChangeCode, them: ChangeCode, raw: str = "") -> None:
        super().__init__(f"unknown conflict code {us.value}{them.value}", raw)
        self.us = us
        self.them = them


_A = ChangeCode.ADDED
_D = ChangeCode.DELETED
_U = ChangeCode.UPDATED_BUT_UNMERGED

_ACTIONS: Dict[Tuple[ChangeCode, ChangeCode], UnmergedAction] = {
    (_A, _A): UnmergedAction.BOTH_ADDED,
    (_U, _U): UnmergedAction.BOTH_MODIFIED,
    (_U, _D): UnmergedAction.DELETED_BY_THEM,
    (_D, _U): UnmergedAction.DELETED_BY_US,
    (_A, _D): UnmergedAction.DELETED_BY_THEM,
    (_D, _A): UnmergedAction.DELETED_BY_US,
    (_D, _D): UnmergedAction.BOTH_DELETED,
    (_A, _U): UnmergedAction.ADDED_BY_US,
    (_U, _A): UnmergedAction.ADDED_BY_THEM,
}

# Both sides left live text for the merge to splice markers into
_TEXTUAL_ACTIONS = frozenset({UnmergedAction.BOTH_ADDED, UnmergedAction.BOTH_MODIFIED})


def classify(us: ChangeCode, them: ChangeCode) -> UnmergedAction:
    """Return the UnmergedAction for an unmerged (us, them) pair.

    Raises UnknownConflictCode for pairs outside the table; there is no
    fallback action.
    """
    try:
        return _ACTIONS[(us, them)]
    except KeyError:
        raise UnknownConflictCode(us, them) from None


def is_textual_action(action: UnmergedAction) -> bool:
    """True if *action* can leave conflict markers in the working-tree file."""
    return action in _TEXTUAL_ACTIONS
