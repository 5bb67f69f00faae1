"""
Data types produced by the diff engine.

All records are frozen: they are built fresh on every parse call and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class FileDiff:
    path: str
    patch: str  # full "diff --git ..." block: file header + hunks


@dataclass(frozen=True)
class ChangeGroup:
    """A maximal run of '+'/'-' lines inside a hunk."""

    start_index: int  # index into Hunk.lines of the first change line
    end_index: int  # index into Hunk.lines of the last change line
    old_start_line: int  # old-file counter when the group began
    new_start_line: int  # new-file counter when the group began
    end_addition_line: Optional[int] = None
    end_deletion_line: Optional[int] = None


@dataclass(frozen=True)
class Hunk:
    header: str  # the @@ line
    start_line: int  # new-file start declared by the header
    old_start_line: int  # old-file start declared by the header
    last_addition_line: Optional[int]
    last_deletion_line: Optional[int]
    change_groups: Tuple[ChangeGroup, ...]
    content: str  # "\n".join(lines)
    line_count: int
    lines: Tuple[str, ...]  # lines[0] is the header
    # Declared ",count" values. Only the opt-in count check reads these.
    declared_old_count: int = 1
    declared_new_count: int = 1

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["lines"] = list(self.lines)
        data["change_groups"] = [asdict(g) for g in self.change_groups]
        return data


@dataclass(frozen=True)
class SkippedChunk:
    index: int  # position among the raw "diff --git" chunks
    first_line: str
    reason: str


@dataclass(frozen=True)
class HunkCountMismatch:
    path: str
    hunk_index: int
    header: str
    declared_old_count: int
    actual_old_count: int
    declared_new_count: int
    actual_new_count: int


@dataclass
class DiffParseReport:
    files: List[FileDiff] = field(default_factory=list)
    skipped: List[SkippedChunk] = field(default_factory=list)
    count_mismatches: List[HunkCountMismatch] = field(default_factory=list)
