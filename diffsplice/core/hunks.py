"""
Split one file's patch into hunks.

Format: @@ -l[,s] +l[,s] @@ optional section heading
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from .groups import calculate_last_changed_lines, find_change_groups
from .models import Hunk

logger = logging.getLogger(__name__)

HUNK_HEADER_RE = re.compile(
    r"^@@\s+-(?P<sline>\d+)(?:,(?P<slen>\d+))?\s+\+(?P<dline>\d+)(?:,(?P<dlen>\d+))?\s+@@"
)


def parse_hunk_header(header: str) -> Optional[Tuple[int, int, int, int]]:
    """Return (old_start, old_count, new_start, new_count), or None if the
    line is not a hunk header. Omitted counts default to 1."""
    m = HUNK_HEADER_RE.match(header)
    if not m:
        return None
    sline = int(m.group("sline"))
    slen = int(m.group("slen") or 1)
    dline = int(m.group("dline"))
    dlen = int(m.group("dlen") or 1)
    return sline, slen, dline, dlen


def _build_hunk(lines: List[str], coords: Tuple[int, int, int, int]) -> Hunk:
    old_start, old_count, new_start, new_count = coords
    last_addition, last_deletion = calculate_last_changed_lines(lines, new_start, old_start)
    groups = find_change_groups(lines, new_start, old_start)
    return Hunk(
        header=lines[0],
        start_line=new_start,
        old_start_line=old_start,
        last_addition_line=last_addition,
        last_deletion_line=last_deletion,
        change_groups=tuple(groups),
        content="\n".join(lines),
        line_count=len(lines),
        lines=tuple(lines),
        declared_old_count=old_count,
        declared_new_count=new_count,
    )


def parse_hunks(patch: str) -> List[Hunk]:
    """Parse the hunks of a single-file patch.

    Lines before the first @@ header (diff --git, index, ---, +++) are
    skipped. Every line after a header, up to the next header, belongs to
    that hunk, whatever its prefix.
    """
    if not patch or not patch.strip():
        return []

    hunks: List[Hunk] = []
    current_lines: Optional[List[str]] = None
    current_coords: Optional[Tuple[int, int, int, int]] = None

    for line in patch.split("\n"):
        coords = parse_hunk_header(line)
        if coords is not None:
            if current_lines is not None:
                hunks.append(_build_hunk(current_lines, current_coords))
            current_lines = [line]
            current_coords = coords
        elif current_lines is not None:
            current_lines.append(line)

    if current_lines is not None:
        hunks.append(_build_hunk(current_lines, current_coords))

    logger.debug("Parsed %d hunks", len(hunks))
    return hunks
