"""Conflict marker counting and binary content sniffing."""

from __future__ import annotations

import re

# exactly seven '<', then a label or end of line; longer runs are plain text
_START_MARKER_RE = re.compile(rb"^<{7}(?: |\r?$)", re.MULTILINE)

# git treats a blob as binary if a NUL shows up in its first 8000 bytes
DEFAULT_SNIFF_BYTES = 8000


def count_markers(content: bytes) -> int:
    """Count conflict hunk starts in *content*.

    Only ``<<<<<<<`` lines are counted; separator, base and end markers are
    ignored, as are runs of eight or more ``<``. Unbalanced or malformed
    blocks are not repaired, every start line counts. A resolved file
    yields 0.
    """
    return len(_START_MARKER_RE.findall(content))


def is_binary(content: bytes, sniff_bytes: int = DEFAULT_SNIFF_BYTES) -> bool:
    """Return True if *content* looks binary (NUL byte near the start)."""
    return b"\x00" in content[:sniff_bytes]
