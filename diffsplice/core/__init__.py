"""
diffsplice core: unified diff parsing and patch reconstruction.
"""

from .models import ChangeGroup, DiffParseReport, FileDiff, Hunk, HunkCountMismatch, SkippedChunk
from .splitter import parse_diff
from .hunks import parse_hunks, parse_hunk_header
from .groups import calculate_last_changed_lines, find_change_groups
from .reconstruct import create_change_group_patch, create_hunk_patch, extract_diff_header
from .lookup import get_file_diff, require_file_diff, select_change_group, select_hunk
from .diagnostics import check_hunk_counts, parse_diff_report
from .background import parse_diff_async, parse_diff_report_async

__all__ = [
    'ChangeGroup',
    'DiffParseReport',
    'FileDiff',
    'Hunk',
    'HunkCountMismatch',
    'SkippedChunk',
    'parse_diff',
    'parse_hunks',
    'parse_hunk_header',
    'calculate_last_changed_lines',
    'find_change_groups',
    'create_change_group_patch',
    'create_hunk_patch',
    'extract_diff_header',
    'get_file_diff',
    'require_file_diff',
    'select_change_group',
    'select_hunk',
    'check_hunk_counts',
    'parse_diff_report',
    'parse_diff_async',
    'parse_diff_report_async',
]
