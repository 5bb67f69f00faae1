"""
Accessors over parsed diffs.

get_file_diff mirrors the lenient engine (None when missing). The select_*
helpers are for the CLI and HTTP layers, which need to report a bad path or
index to the user, so they raise DiffLookupError instead.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..exceptions import DiffLookupError
from .models import ChangeGroup, FileDiff, Hunk


def get_file_diff(diffs: Iterable[FileDiff], file_path: str) -> Optional[str]:
    for diff in diffs:
        if diff.path == file_path:
            return diff.patch
    return None


def require_file_diff(diffs: Iterable[FileDiff], file_path: str) -> str:
    patch = get_file_diff(diffs, file_path)
    if patch is None:
        raise DiffLookupError(f"File not found in diff: {file_path}")
    return patch


def select_hunk(hunks: Sequence[Hunk], index: int) -> Hunk:
    if not 0 <= index < len(hunks):
        raise DiffLookupError(f"Hunk {index} out of range (file has {len(hunks)} hunks)")
    return hunks[index]


def select_change_group(hunk: Hunk, index: int) -> ChangeGroup:
    groups = hunk.change_groups
    if not 0 <= index < len(groups):
        raise DiffLookupError(
            f"Change group {index} out of range (hunk has {len(groups)} groups)"
        )
    return groups[index]
