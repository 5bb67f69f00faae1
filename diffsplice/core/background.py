"""
Parse large diffs off the caller's thread.

The whole diff string goes in and the whole list of FileDiff comes back:
no streaming and no partial results.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from .diagnostics import parse_diff_report
from .models import DiffParseReport, FileDiff
from .splitter import parse_diff


async def parse_diff_async(diff_text: Optional[str]) -> List[FileDiff]:
    if not diff_text:
        return []
    return await asyncio.to_thread(parse_diff, diff_text)


async def parse_diff_report_async(
    diff_text: Optional[str], validate_counts: Optional[bool] = None
) -> DiffParseReport:
    if not diff_text:
        return DiffParseReport()
    return await asyncio.to_thread(parse_diff_report, diff_text, validate_counts)
