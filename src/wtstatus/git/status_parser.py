"""Porcelain v2 status parser.

Decodes the NUL-terminated output of ``git status --porcelain=v2 -z`` into
StatusHeader and StatusRecord objects, in the order git reported them.
Every record is either decoded completely or rejected with a
StatusDecodeError that carries the raw record; nothing is silently dropped.
"""

from __future__ import annotations

import logging
import re
from typing import Generator, List, Optional

from wtstatus.git.models import ChangeCode, StatusHeader, StatusRecord, SubmoduleState

_logger = logging.getLogger(__name__)

# --- Record patterns (one NUL-separated token each) ---

# 1 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <path>
_ORDINARY_RE = re.compile(
    r"1 (.)(.) (\S{4}) (\d+) (\d+) (\d+) ([0-9a-f]+) ([0-9a-f]+) (.+)", re.DOTALL
)
# 2 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <X><score> <path>   (origPath follows)
_RENAMED_RE = re.compile(
    r"2 (.)(.) (\S{4}) (\d+) (\d+) (\d+) ([0-9a-f]+) ([0-9a-f]+) ([RC])(\d+) (.+)",
    re.DOTALL,
)
# u <XY> <sub> <m1> <m2> <m3> <mW> <h1> <h2> <h3> <path>
_UNMERGED_RE = re.compile(
    r"u (.)(.) (\S{4}) (\d+) (\d+) (\d+) (\d+) ([0-9a-f]+) ([0-9a-f]+) ([0-9a-f]+) (.+)",
    re.DOTALL,
)
_UNTRACKED_RE = re.compile(r"([?!]) (.+)", re.DOTALL)
_HEADER_RE = re.compile(r"# (\S+)(?: (.*))?", re.DOTALL)
_SUBMODULE_RE = re.compile(r"S([C.])([M.])([U.])")


class StatusDecodeError(Exception):
    """Raised when a status record is malformed or uses an unknown code."""

    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(f"{message}: {raw!r}" if raw else message)
        self.raw = raw


def _change_code(char: str, raw: str) -> ChangeCode:
    try:
        return ChangeCode(char)
    except ValueError:
        raise StatusDecodeError(f"unknown change code {char!r}", raw) from None


def _submodule_state(field: str, raw: str) -> Optional[SubmoduleState]:
    """Decode the <sub> field. ``N...`` means "not a submodule"."""
    if field == "N...":
        return None
    m = _SUBMODULE_RE.fullmatch(field)
    if m is None:
        raise StatusDecodeError(f"malformed submodule field {field!r}", raw)
    return SubmoduleState(
        commit_changed=m.group(1) == "C",
        modified_changes=m.group(2) == "M",
        untracked_changes=m.group(3) == "U",
    )


class StatusParser:
    """Parse porcelain v2 status text and yield StatusHeader / StatusRecord objects.

    Usage::

        parser = StatusParser(status_text)
        for item in parser.parse():
            if isinstance(item, StatusHeader):
                ...
            elif isinstance(item, StatusRecord):
                ...
    """

    def __init__(self, status_text: str) -> None:
        tokens = status_text.split("\0")
        # -z output terminates every record, so the last token is empty
        if tokens and tokens[-1] == "":
            tokens.pop()
        self._tokens = tokens

    def parse(self) -> Generator[StatusHeader | StatusRecord, None, None]:
        """Yield headers and records in the order git emitted them."""
        idx = 0
        total = len(self._tokens)
        count = 0

        while idx < total:
            raw = self._tokens[idx]
            idx += 1

            if not raw:
                raise StatusDecodeError("empty status record")

            ident = raw[0]

            if ident == "#":
                m = _HEADER_RE.fullmatch(raw)
                if m is None:
                    raise StatusDecodeError("malformed header", raw)
                yield StatusHeader(name=m.group(1), value=m.group(2) or "")
                continue

            if ident == "1":
                m = _ORDINARY_RE.fullmatch(raw)
                if m is None:
                    raise StatusDecodeError("malformed ordinary record", raw)
                record = StatusRecord(
                    path=m.group(9),
                    index_side=_change_code(m.group(1), raw),
                    worktree_side=_change_code(m.group(2), raw),
                    submodule=_submodule_state(m.group(3), raw),
                    worktree_mode=m.group(6),
                    raw=raw,
                )

            elif ident == "2":
                m = _RENAMED_RE.fullmatch(raw)
                if m is None:
                    raise StatusDecodeError("malformed rename/copy record", raw)
                if idx >= total:
                    raise StatusDecodeError("rename/copy record without original path", raw)
                old_path = self._tokens[idx]
                idx += 1
                if not old_path:
                    raise StatusDecodeError("rename/copy record without original path", raw)
                record = StatusRecord(
                    path=m.group(11),
                    old_path=old_path,
                    index_side=_change_code(m.group(1), raw),
                    worktree_side=_change_code(m.group(2), raw),
                    submodule=_submodule_state(m.group(3), raw),
                    worktree_mode=m.group(6),
                    raw=raw,
                )

            elif ident == "u":
                m = _UNMERGED_RE.fullmatch(raw)
                if m is None:
                    raise StatusDecodeError("malformed unmerged record", raw)
                record = StatusRecord(
                    path=m.group(11),
                    index_side=_change_code(m.group(1), raw),
                    worktree_side=_change_code(m.group(2), raw),
                    unmerged=True,
                    submodule=_submodule_state(m.group(3), raw),
                    worktree_mode=m.group(7),
                    raw=raw,
                )

            elif ident in "?!":
                m = _UNTRACKED_RE.fullmatch(raw)
                if m is None:
                    raise StatusDecodeError("malformed untracked/ignored record", raw)
                code = ChangeCode(m.group(1))
                record = StatusRecord(
                    path=m.group(2), index_side=code, worktree_side=code, raw=raw
                )

            else:
                raise StatusDecodeError(f"unknown record type {ident!r}", raw)

            count += 1
            yield record

        _logger.debug("decoded %d status record(s)", count)


def decode_status(status_text: str) -> List[StatusRecord]:
    """Return only the StatusRecords from *status_text*, in order."""
    return [
        item for item in StatusParser(status_text).parse() if isinstance(item, StatusRecord)
    ]
