"""
Line-number bookkeeping inside a hunk.

Both scans skip lines[0] (the @@ header) and keep two counters: one in
old-file coordinates, one in new-file coordinates. '+' advances only the
new counter, '-' only the old one, ' ' (context) advances both. Any other
line ("\\ No newline at end of file", blank trailing line) advances neither.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .models import ChangeGroup


@dataclass
class _OpenGroup:
    start_index: int
    end_index: int
    old_start_line: int
    new_start_line: int
    end_addition_line: Optional[int] = None
    end_deletion_line: Optional[int] = None

    def close(self) -> ChangeGroup:
        return ChangeGroup(
            start_index=self.start_index,
            end_index=self.end_index,
            old_start_line=self.old_start_line,
            new_start_line=self.new_start_line,
            end_addition_line=self.end_addition_line,
            end_deletion_line=self.end_deletion_line,
        )


def calculate_last_changed_lines(
    hunk_lines: Sequence[str],
    new_start_line: int,
    old_start_line: int,
) -> Tuple[Optional[int], Optional[int]]:
    """Return (last_addition_line, last_deletion_line) for a hunk.

    Each value is the file line number of the last '+' (new file) or '-'
    (old file) line, or None when the hunk has no line of that kind.
    """
    new_line = new_start_line
    old_line = old_start_line
    last_addition: Optional[int] = None
    last_deletion: Optional[int] = None

    for line in hunk_lines[1:]:
        prefix = line[:1]
        if prefix == "+":
            last_addition = new_line
            new_line += 1
        elif prefix == "-":
            last_deletion = old_line
            old_line += 1
        elif prefix == " ":
            new_line += 1
            old_line += 1

    return last_addition, last_deletion


def find_change_groups(
    hunk_lines: Sequence[str],
    new_start_line: int,
    old_start_line: int,
) -> List[ChangeGroup]:
    """Partition the change lines of a hunk into maximal consecutive groups.

    A group's old/new start lines are the counter values at the moment its
    first line is seen, which is what a sliced-out patch needs for its
    @@ header.
    """
    groups: List[ChangeGroup] = []
    new_line = new_start_line
    old_line = old_start_line
    current: Optional[_OpenGroup] = None

    for i in range(1, len(hunk_lines)):
        prefix = hunk_lines[i][:1]

        if prefix in ("+", "-"):
            if current is None:
                current = _OpenGroup(
                    start_index=i,
                    end_index=i,
                    old_start_line=old_line,
                    new_start_line=new_line,
                )
            current.end_index = i
            if prefix == "+":
                current.end_addition_line = new_line
                new_line += 1
            else:
                current.end_deletion_line = old_line
                old_line += 1
            continue

        # context, marker or stray line: ends the running group
        if current is not None:
            groups.append(current.close())
            current = None
        if prefix == " ":
            new_line += 1
            old_line += 1

    if current is not None:
        groups.append(current.close())

    return groups
