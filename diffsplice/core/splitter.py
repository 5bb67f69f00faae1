"""
Split a multi-file git diff into per-file patches.

Each "diff --git" block becomes one FileDiff whose patch keeps the whole
block (header lines and hunks) exactly as it appeared in the input. Blocks
whose first line lacks the "a/<path> b/<path>" pair are dropped.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, Tuple

from .models import FileDiff

logger = logging.getLogger(__name__)

DIFF_GIT_PREFIX = "diff --git "
CHUNK_SPLIT_RE = re.compile(r"^diff --git ", re.MULTILINE)
# Non-greedy on the a/ side: a path containing " b/" is split at its first
# occurrence. Kept as-is, see DESIGN.md.
PATH_PAIR_RE = re.compile(r"a/(.+?)\s+b/([^\r\n]+)")


def iter_chunks(diff_text: str) -> Iterator[Tuple[int, str, Optional[str]]]:
    """Yield (index, chunk, path) for every non-empty chunk of diff_text.

    ``chunk`` has the "diff --git " prefix stripped; ``path`` is None when the
    first line does not carry an a/ b/ path pair.
    """
    if not diff_text:
        return
    chunks = [c for c in CHUNK_SPLIT_RE.split(diff_text) if c]
    for index, chunk in enumerate(chunks):
        first_line = chunk.split("\n", 1)[0]
        m = PATH_PAIR_RE.search(first_line)
        yield index, chunk, (m.group(2) if m else None)


def parse_diff(diff_text: str) -> List[FileDiff]:
    files: List[FileDiff] = []
    for index, chunk, path in iter_chunks(diff_text):
        if path is None:
            logger.debug("Dropping diff chunk %d without a/ b/ paths", index)
            continue
        files.append(FileDiff(path=path, patch=DIFF_GIT_PREFIX + chunk))
    logger.debug("Split diff into %d file patches", len(files))
    return files
