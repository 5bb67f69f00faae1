"""
Optional diagnostics for a diff parse.

parse_diff_report returns the same files as parse_diff plus what the lenient
parser silently ignored: dropped chunks and, when asked for, hunks whose
declared @@ counts disagree with their lines.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config.settings import settings
from .hunks import parse_hunks
from .models import DiffParseReport, FileDiff, Hunk, HunkCountMismatch, SkippedChunk
from .splitter import DIFF_GIT_PREFIX, iter_chunks

logger = logging.getLogger(__name__)

MISSING_PATHS = "missing a/ b/ paths"


def count_hunk_lines(hunk: Hunk) -> Tuple[int, int]:
    """Return (old_count, new_count) as implied by the hunk's lines."""
    context = deletions = additions = 0
    for line in hunk.lines[1:]:
        prefix = line[:1]
        if prefix == " ":
            context += 1
        elif prefix == "-":
            deletions += 1
        elif prefix == "+":
            additions += 1
    return context + deletions, context + additions


def check_hunk_counts(hunk: Hunk, path: str = "", hunk_index: int = 0) -> Optional[HunkCountMismatch]:
    old_count, new_count = count_hunk_lines(hunk)
    if old_count == hunk.declared_old_count and new_count == hunk.declared_new_count:
        return None
    return HunkCountMismatch(
        path=path,
        hunk_index=hunk_index,
        header=hunk.header,
        declared_old_count=hunk.declared_old_count,
        actual_old_count=old_count,
        declared_new_count=hunk.declared_new_count,
        actual_new_count=new_count,
    )


def parse_diff_report(diff_text: str, validate_counts: Optional[bool] = None) -> DiffParseReport:
    if validate_counts is None:
        validate_counts = settings.validate_hunk_counts

    report = DiffParseReport()
    for index, chunk, path in iter_chunks(diff_text):
        if path is None:
            first_line = chunk.split("\n", 1)[0]
            report.skipped.append(SkippedChunk(index=index, first_line=first_line, reason=MISSING_PATHS))
            continue
        report.files.append(FileDiff(path=path, patch=DIFF_GIT_PREFIX + chunk))

    if validate_counts:
        for file_diff in report.files:
            for hunk_index, hunk in enumerate(parse_hunks(file_diff.patch)):
                mismatch = check_hunk_counts(hunk, file_diff.path, hunk_index)
                if mismatch is not None:
                    report.count_mismatches.append(mismatch)

    if report.skipped or report.count_mismatches:
        logger.debug(
            "Diff report: %d files, %d skipped chunks, %d count mismatches",
            len(report.files), len(report.skipped), len(report.count_mismatches),
        )
    return report
